"""
app/api/locations.py

Purpose: Location and booking endpoints (mounted under /api/locations)

- GET  /test                          liveness check
- GET  /locations                     full location catalog
- POST /book                          create a pending booking
- GET  /booking/{booking_id}/status   booking with user and location embedded

Every endpoint converts unexpected exceptions into InternalServerError so
exactly one JSON response is sent.
"""

from fastapi import APIRouter, Depends
from postgrest import AsyncPostgrestClient
from typing import Optional

from app.core.exceptions import BagDropError, InternalServerError
from app.core.logging import get_logger
from app.db.supabase import get_gateway
from app.schemas.booking import BookingRequest, BookingCreatedResponse, BookingStatusResponse
from app.schemas.location import LocationListResponse
from app.schemas.response import MessageResponse
from app.services import booking_service, location_service
from utils.constants import API_WORKING_MESSAGE, LOCATIONS_FETCHED_MESSAGE

logger = get_logger(__name__)
router = APIRouter()


@router.get("/test", response_model=MessageResponse)
async def test_route() -> MessageResponse:
    return MessageResponse(message=API_WORKING_MESSAGE)


@router.get("/locations", response_model=LocationListResponse)
async def get_locations(client: AsyncPostgrestClient = Depends(get_gateway)) -> LocationListResponse:
    """
    Lists all storage locations.
    """
    try:
        locations = await location_service.list_locations(client)
        return LocationListResponse(message=LOCATIONS_FETCHED_MESSAGE, data=locations)
    except BagDropError:
        raise
    except Exception as e:
        logger.exception(f"Server error listing locations: {str(e)}")
        raise InternalServerError(details=str(e)) from e


@router.post("/book", response_model=BookingCreatedResponse)
async def book(
    request: Optional[BookingRequest] = None,
    client: AsyncPostgrestClient = Depends(get_gateway),
) -> BookingCreatedResponse:
    """
    Creates a booking.

    Flow:
    1. Reject missing luggageType/duration with 400 (no store calls)
    2. Insert placeholder user
    3. Pick any storage location
    4. Insert pending booking
    """
    try:
        request = request or BookingRequest()
        return await booking_service.create_booking(
            client,
            luggage_type=request.luggage_type,
            duration=request.duration,
        )
    except BagDropError:
        raise
    except Exception as e:
        logger.exception(f"Server error creating booking: {str(e)}")
        raise InternalServerError(details=str(e)) from e


@router.get("/booking/{booking_id}/status", response_model=BookingStatusResponse)
async def get_booking_status(
    booking_id: str,
    client: AsyncPostgrestClient = Depends(get_gateway),
) -> BookingStatusResponse:
    """
    Returns the booking row with nested `users` and `storage_locations`.
    404 if no booking has this id.
    """
    try:
        return await booking_service.get_booking_status(client, booking_id)
    except BagDropError:
        raise
    except Exception as e:
        logger.exception(f"Server error fetching booking {booking_id}: {str(e)}")
        raise InternalServerError(details=str(e)) from e
