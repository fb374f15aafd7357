from typing import Any, Callable, Optional
from postgrest.exceptions import APIError
from supabase import create_client
from .base import BaseConnector
from ..exceptions import RemoteReportedError, UnexpectedError
from ..logger import get_logger

logger = get_logger("connectors.supabase")

ClientFactory = Callable[[str, str], Any]

class SupabaseConnector(BaseConnector):
    """
    Supabase (PostgREST) connector.
    Only issues head-only count queries, no row payload crosses the wire.
    """
    def __init__(self, url: str, key: str, alias: str = "supabase",
                 client_factory: Optional[ClientFactory] = None):
        super().__init__(url, alias)
        self._key = key
        self._client_factory = client_factory or create_client
        self._client = None

    def connect(self) -> None:
        if self._client is None:
            logger.debug("Creating client for %s", self.url)
            try:
                self._client = self._client_factory(self.url, self._key)
            except Exception as e:
                raise UnexpectedError(e) from e

    def close(self) -> None:
        self._client = None

    def count_rows(self, resource: str) -> Optional[int]:
        self.connect()
        try:
            response = (
                self._client.table(resource)
                .select("*", count="exact", head=True)
                .execute()
            )
        except APIError as e:
            raise RemoteReportedError(e.message or str(e), code=e.code) from e

        # Older clients hand the error back on the response instead of raising
        error = getattr(response, "error", None)
        if error:
            if isinstance(error, dict):
                raise RemoteReportedError(str(error.get("message")), code=error.get("code"))
            raise RemoteReportedError(str(getattr(error, "message", error)), code=getattr(error, "code", None))
        return getattr(response, "count", None)
