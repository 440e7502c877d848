"""
app/db/supabase.py

Purpose: Supabase (PostgREST) client lifecycle

- Creates the single shared AsyncPostgrestClient at startup
- Exposes it to endpoints through the get_gateway() dependency
- Runs queries, turning store and transport failures into StoreOperationError
- Health check against the store
- Closes the underlying connection pool on shutdown
"""

import httpx
from postgrest import AsyncPostgrestClient
from postgrest.exceptions import APIError
from typing import Any, Optional

from app.core.config import settings
from app.core.exceptions import StoreOperationError
from app.core.logging import get_logger
from utils.constants import STORAGE_LOCATIONS_TABLE

logger = get_logger(__name__)

# Global client, shared by every request
_client: Optional[AsyncPostgrestClient] = None


def create_client(url: str, key: str, timeout: Optional[float] = None) -> AsyncPostgrestClient:
    """
    Builds a PostgREST client for a Supabase project's REST endpoint.

    Without a timeout the underlying httpx client never times out.
    """
    options = {}
    if timeout is not None:
        options["http_client"] = httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    return AsyncPostgrestClient(
        f"{url.rstrip('/')}/rest/v1",
        headers={
            "apikey": key,
            "Authorization": f"Bearer {key}",
        },
        **options,
    )


def connect_to_store():
    """
    Creates the shared client from settings.
    Called during application startup.
    """
    global _client

    if _client is not None:
        logger.warning("Supabase client already initialized")
        return

    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")

    _client = create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY,
        timeout=settings.DATABASE_TIMEOUT,
    )
    logger.info(f"Supabase client ready: {settings.SUPABASE_URL}")


async def close_store_connection():
    """
    Closes the client's connection pool.
    Called during application shutdown.
    """
    global _client

    if _client:
        logger.info("Closing Supabase client")
        await _client.aclose()
        _client = None


async def execute_query(query: Any, table: str) -> Any:
    """
    Runs a built request once (the client's automatic GET retries are
    switched off) and returns its response. maybe_single() requests
    return None when nothing matched.

    Raises:
        StoreOperationError: With the store's message on an APIError, or the
            transport error text when the store could not be reached
    """
    try:
        return await query.retry(False).execute()
    except APIError as e:
        message = e.message or str(e)
        logger.error(f"Store error: {message} (code={e.code})", extra={"table": table})
        raise StoreOperationError(message) from e
    except httpx.RequestError as e:
        message = str(e) or type(e).__name__
        logger.error(f"Store request failed: {message}", extra={"table": table})
        raise StoreOperationError(message) from e


async def check_database_health(client: Optional[Any] = None) -> bool:
    """
    Reads one id from storage_locations.

    Returns:
        True if the store answered without error, False otherwise
    """
    client = client or _client
    if client is None:
        logger.error("Supabase client not initialized")
        return False

    try:
        await execute_query(
            client.table(STORAGE_LOCATIONS_TABLE).select("id").limit(1),
            STORAGE_LOCATIONS_TABLE,
        )
    except StoreOperationError:
        return False
    return True


def get_gateway() -> AsyncPostgrestClient:
    """
    FastAPI dependency returning the shared client.

    Raises:
        RuntimeError: If the client is not initialized
    """
    if _client is None:
        raise RuntimeError(
            "Supabase client not initialized. Call connect_to_store() during startup."
        )
    return _client
