"""
app/services/location_service.py

Purpose: Storage location reads

- Full catalog listing (unfiltered, unpaginated)
- Picking an arbitrary location for a new booking
"""

from typing import Any, Dict, List

from postgrest import AsyncPostgrestClient

from app.core.exceptions import StoreOperationError
from app.core.logging import get_logger
from app.db.supabase import execute_query
from utils.constants import STORAGE_LOCATIONS_TABLE, NO_LOCATIONS_MESSAGE

logger = get_logger(__name__)


async def list_locations(client: AsyncPostgrestClient) -> List[Dict[str, Any]]:
    """
    Returns every storage location row. An empty table yields [].

    Raises:
        StoreOperationError: If the store reports an error
    """
    response = await execute_query(
        client.table(STORAGE_LOCATIONS_TABLE).select("*"),
        STORAGE_LOCATIONS_TABLE,
    )
    return response.data or []


async def get_any_location(client: AsyncPostgrestClient) -> Dict[str, Any]:
    """
    Returns one existing location, whichever the store hands back first.
    Not tied to user choice or availability.

    Raises:
        StoreOperationError: On a store error, or with NO_LOCATIONS_MESSAGE when the table is empty
    """
    response = await execute_query(
        client.table(STORAGE_LOCATIONS_TABLE).select("*").limit(1).maybe_single(),
        STORAGE_LOCATIONS_TABLE,
    )

    # maybe_single() returns None when nothing matched
    location = response.data if response is not None else None
    if not location:
        logger.error(f"Location fetch error: {NO_LOCATIONS_MESSAGE}", extra={"table": STORAGE_LOCATIONS_TABLE})
        raise StoreOperationError(NO_LOCATIONS_MESSAGE)

    return location
