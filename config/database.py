"""
Database connection management.

Provides the Supabase client singleton used by the internal database provider.
"""

from supabase import create_client, Client
from functools import lru_cache
import structlog

from config.settings import settings
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get cached Supabase client instance.

    Uses lru_cache to ensure only one client is created.
    Call get_supabase_client.cache_clear() to reconnect.

    Returns:
        Client: Supabase client

    Raises:
        DatabaseError: If Supabase is not configured or the client cannot be created
    """
    if not settings.supabase_configured:
        logger.warning("supabase_not_configured")
        raise DatabaseError("connect", "Supabase is not configured")

    try:
        logger.info(
            "connecting_to_supabase",
            url=settings.supabase_url[:30] + "..."  # Log partial URL only
        )

        client = create_client(
            settings.supabase_url,
            settings.supabase_key
        )

        logger.info("supabase_connected", status="success")
        return client

    except Exception as e:
        logger.error(
            "supabase_connection_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        raise DatabaseError("connect", str(e)) from e


# Convenience alias
db = get_supabase_client


# ===================
# HELPER FUNCTIONS
# ===================

def check_connection() -> dict:
    """
    Check database connection health.

    Returns:
        dict: Connection status with details
    """
    if not settings.supabase_configured:
        return {"status": "not_configured"}

    try:
        client = get_supabase_client()
        containers = client.table(settings.container_table).select(
            "container_number", count="exact"
        ).limit(1).execute()

        return {
            "status": "healthy",
            "containers_count": containers.count
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e)
        }


def reset_connection():
    """
    Reset the cached database connection.

    Call this if connection becomes stale or after config changes.
    """
    get_supabase_client.cache_clear()
    logger.info("database_connection_reset")
