from typing import Optional
from ..domain.interfaces import BackendConnector
from ..config import PreflightConfig
from .supabase import SupabaseConnector, ClientFactory

def get_connector(config: PreflightConfig, client_factory: Optional[ClientFactory] = None) -> BackendConnector:
    """
    Factory function to create the connector for the configured backend.
    client_factory replaces supabase.create_client (tests, custom client options).
    """
    return SupabaseConnector(
        config.supabase_url,
        config.supabase_service_key,
        client_factory=client_factory,
    )
