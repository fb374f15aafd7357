from typing import Optional
import time
from ..domain.models import CheckResult, CheckStatus
from ..exceptions import RemoteReportedError
from ..logger import get_logger

logger = get_logger("connectors")

class BaseConnector:
    """
    Template for backend connectors.
    Subclasses implement connect() and count_rows(); check_health() folds
    every outcome into a CheckResult and never raises.
    """
    def __init__(self, url: str, alias: str = "unknown"):
        self.url = url
        self.alias = alias

    def connect(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def count_rows(self, resource: str) -> Optional[int]:
        raise NotImplementedError

    def check_health(self, resource: str) -> CheckResult:
        start_time = time.time()
        row_count = None
        status = CheckStatus.UNEXPECTED_FAILURE
        error_msg = None
        error_type = None

        try:
            self.connect()
            row_count = self.count_rows(resource)
            status = CheckStatus.SUCCESS
        except RemoteReportedError as e:
            status = CheckStatus.REPORTED_FAILURE
            error_msg = e.message
            error_type = type(e).__name__
            logger.debug("%s reported an error for %s (code=%s)", self.alias, resource, e.code)
        except Exception as e:
            status = CheckStatus.UNEXPECTED_FAILURE
            error_msg = str(e) or repr(e)
            error_type = type(e).__name__
            logger.debug("Probe against %s raised", self.alias, exc_info=True)

        latency = (time.time() - start_time) * 1000  # ms

        return CheckResult(
            resource=resource,
            status=status,
            message=error_msg,
            error_type=error_type,
            latency_ms=round(latency, 2),
            row_count=row_count,
        )
