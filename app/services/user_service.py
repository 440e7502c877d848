"""
app/services/user_service.py

Purpose: User row creation

- Registration: insert caller-supplied fields verbatim
- Booking flow: synthesize a placeholder user (no auth/session exists yet)
"""

import random
from typing import Any, Dict, List, Optional

from postgrest import AsyncPostgrestClient

from app.core.exceptions import StoreOperationError
from app.core.logging import get_logger
from app.db.supabase import execute_query
from utils.constants import (
    USERS_TABLE,
    PLACEHOLDER_USER_NAME,
    PLACEHOLDER_EMAIL_DOMAIN,
    PLACEHOLDER_PHONE_PREFIX,
    PLACEHOLDER_PHONE_MIN,
    PLACEHOLDER_PHONE_MAX,
    USER_NOT_RETURNED_MESSAGE,
)
from utils.time_utils import epoch_millis

logger = get_logger(__name__)


def build_placeholder_user(millis: Optional[int] = None) -> Dict[str, Any]:
    """
    Builds the stand-in user inserted for every booking.

    The email embeds the current epoch milliseconds, so two bookings in the
    same millisecond produce the same address. The phone is "+91" followed
    by a random 10-digit number.
    """
    millis = epoch_millis() if millis is None else millis
    return {
        "name": PLACEHOLDER_USER_NAME,
        "email": f"user_{millis}@{PLACEHOLDER_EMAIL_DOMAIN}",
        "phone": f"{PLACEHOLDER_PHONE_PREFIX}{random.randint(PLACEHOLDER_PHONE_MIN, PLACEHOLDER_PHONE_MAX)}",
    }


async def create_placeholder_user(client: AsyncPostgrestClient) -> Dict[str, Any]:
    """
    Inserts a placeholder user and returns the stored row (with its generated id).

    Raises:
        StoreOperationError: If the insert fails or the store returns no row
    """
    response = await execute_query(
        client.table(USERS_TABLE).insert([build_placeholder_user()]),
        USERS_TABLE,
    )

    rows = response.data or []
    if not rows:
        logger.error(USER_NOT_RETURNED_MESSAGE, extra={"table": USERS_TABLE})
        raise StoreOperationError(USER_NOT_RETURNED_MESSAGE)

    user = rows[0]
    logger.info("Placeholder user created", extra={"user_id": user.get("id")})
    return user


async def register_user(client: AsyncPostgrestClient, fields: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Inserts a user row from the registration body without any checks.

    Args:
        client: Shared PostgREST client
        fields: name, email and phone exactly as received (missing ones are None)

    Returns:
        Inserted rows as returned by the store

    Raises:
        StoreOperationError: If the insert fails
    """
    response = await execute_query(client.table(USERS_TABLE).insert([fields]), USERS_TABLE)

    rows = response.data or []
    logger.info(f"Registered {len(rows)} user row(s)")
    return rows
