"""
Supabase Connection Management.

One async Supabase client is created at startup with the service-role
key and shared by the event store and the token verifier. The client
holds no per-request state, so concurrent requests can share it.
"""
from supabase import AsyncClient, acreate_client

from dayrhythm.core.config import Settings
from dayrhythm.core.logging_config import get_logger

logger = get_logger(__name__)


async def create_supabase_client(settings: Settings) -> AsyncClient:
    """
    Create the process-wide Supabase client.

    Args:
        settings: Application settings with the Supabase URL and service key

    Returns:
        Connected AsyncClient
    """
    client = await acreate_client(settings.supabase_url, settings.supabase_service_key)
    logger.info(f"Supabase client initialized: {settings.supabase_url}")
    return client
