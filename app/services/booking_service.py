"""
app/services/booking_service.py

Purpose: Booking creation and status lookup

Creation runs three strictly sequential store calls:
1. insert a placeholder user
2. pick any existing storage location
3. insert the booking referencing both

There is no transaction around these writes. If step 2 or 3 fails, the user
row from step 1 stays in the store (orphan) and a warning is logged.
"""

from typing import Any

from postgrest import AsyncPostgrestClient

from app.core.exceptions import ValidationError, ResourceNotFoundError, StoreOperationError
from app.core.logging import LogContext, get_logger
from app.db.supabase import execute_query
from app.models.booking import BookingStatus
from app.schemas.booking import BookingCreatedResponse, BookingDetails, BookingStatusResponse
from app.services import location_service, user_service
from utils.constants import (
    BOOKINGS_TABLE,
    BOOKING_WITH_RELATIONS,
    BOOKING_CREATED_MESSAGE,
    BOOKING_STATUS_FETCHED_MESSAGE,
    BOOKING_NOT_FOUND_MESSAGE,
    MISSING_BOOKING_FIELDS_MESSAGE,
)
from utils.time_utils import utc_now_iso

logger = get_logger(__name__)


async def create_booking(
    client: AsyncPostgrestClient,
    luggage_type: Any,
    duration: Any,
) -> BookingCreatedResponse:
    """
    Creates a pending booking for a freshly synthesized user at an arbitrary location.

    Args:
        client: Shared PostgREST client
        luggage_type: Kind of luggage, any truthy JSON value
        duration: Storage duration, any truthy JSON value

    Returns:
        BookingCreatedResponse with the inserted booking rows and a summary

    Raises:
        ValidationError: If either field is missing or falsy (no store call is made)
        StoreOperationError: If any of the three store calls fails
    """
    if not luggage_type or not duration:
        raise ValidationError(MISSING_BOOKING_FIELDS_MESSAGE)

    user = await user_service.create_placeholder_user(client)
    user_id = user.get("id")

    with LogContext(user_id=user_id) as log_ctx:
        try:
            location = await location_service.get_any_location(client)
        except StoreOperationError:
            logger.warning("Booking aborted after user creation; user row left orphaned")
            raise
        location_id = location.get("id")
        log_ctx.update(location_id=location_id)

        status = BookingStatus.PENDING.value
        try:
            response = await execute_query(
                client.table(BOOKINGS_TABLE).insert([{
                    "user_id": user_id,
                    "location_id": location_id,
                    "luggage_type": luggage_type,
                    "duration": duration,
                    "status": status,
                    "created_at": utc_now_iso(),
                }]),
                BOOKINGS_TABLE,
            )
        except StoreOperationError:
            logger.warning("Booking insert failed; user row left orphaned")
            raise

        rows = response.data or []
        log_ctx.update(booking_id=rows[0].get("id") if rows else None)
        logger.info("Booking created")

    return BookingCreatedResponse(
        message=BOOKING_CREATED_MESSAGE,
        data=rows,
        booking_details=BookingDetails(
            user_id=user_id,
            location_id=location_id,
            luggage_type=luggage_type,
            duration=duration,
            status=status,
        ),
    )


async def get_booking_status(client: AsyncPostgrestClient, booking_id: str) -> BookingStatusResponse:
    """
    Fetches one booking with its user and storage location embedded.

    Raises:
        StoreOperationError: If the store reports an error (including multiple matches)
        ResourceNotFoundError: If no booking has this id
    """
    with LogContext(booking_id=booking_id):
        response = await execute_query(
            client.table(BOOKINGS_TABLE)
            .select(*BOOKING_WITH_RELATIONS)
            .eq("id", booking_id)
            .maybe_single(),
            BOOKINGS_TABLE,
        )

    booking = response.data if response is not None else None
    if not booking:
        raise ResourceNotFoundError(BOOKING_NOT_FOUND_MESSAGE)

    return BookingStatusResponse(message=BOOKING_STATUS_FETCHED_MESSAGE, data=booking)
