from ..domain.interfaces import BackendConnector
from ..domain.models import CheckResult

# Probe target, a small table every deployment has
DEFAULT_RESOURCE = "Week"

class ConnectionChecker:
    """
    SRP: Responsible only for the connectivity probe.
    """
    def __init__(self, connector: BackendConnector, resource: str = DEFAULT_RESOURCE):
        self.connector = connector
        self.resource = resource

    def check_health(self) -> CheckResult:
        try:
            return self.connector.check_health(self.resource)
        finally:
            self.connector.close()
