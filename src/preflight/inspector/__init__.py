from pydantic import BaseModel
from ..domain.interfaces import BackendConnector
from ..domain.models import CheckResult
from .checker import ConnectionChecker, DEFAULT_RESOURCE

class InspectionReport(BaseModel):
    health: CheckResult

class InspectorFacade:
    """
    Facade Pattern: Unified entry point for the preflight check.
    """
    def __init__(self, connector: BackendConnector):
        self._checker = ConnectionChecker(connector, DEFAULT_RESOURCE)

    def run_diagnostics(self) -> InspectionReport:
        health = self._checker.check_health()
        return InspectionReport(health=health)
