from enum import Enum
from typing import Optional
from pydantic import BaseModel

class CheckStatus(str, Enum):
    SUCCESS = "success"
    REPORTED_FAILURE = "reported_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"

class CheckResult(BaseModel):
    """
    Outcome of the single remote probe.
    Whether the client returned an error object or raised, the caller
    only ever sees one of the three statuses above.
    """
    resource: str
    status: CheckStatus
    message: Optional[str] = None
    error_type: Optional[str] = None
    latency_ms: Optional[float] = None
    row_count: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.SUCCESS
