from typing import Optional, Protocol
from .models import CheckResult

class BackendConnector(Protocol):
    def connect(self) -> None:
        ...

    def close(self) -> None:
        ...

    def count_rows(self, resource: str) -> Optional[int]:
        """Head-only count query. Raises RemoteReportedError on an error response."""
        ...

    def check_health(self, resource: str) -> CheckResult:
        ...
