"""
app/schemas/booking.py

Pydantic models for the booking endpoints.
Field names follow the camelCase JSON used by the frontend.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class BookingRequest(BaseModel):
    """
    Body of POST /book. Values are taken as-is from the JSON (any type);
    presence and truthiness are checked by the booking service.
    """

    model_config = ConfigDict(populate_by_name=True)

    luggage_type: Optional[Any] = Field(default=None, alias="luggageType", description="Kind of luggage, e.g. suitcase")
    duration: Optional[Any] = Field(default=None, description="Requested storage duration, e.g. 2h or 2")


class BookingDetails(BaseModel):
    """Denormalized summary returned next to the inserted booking row."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Any = Field(..., alias="userId")
    location_id: Any = Field(..., alias="locationId")
    luggage_type: Any = Field(..., alias="luggageType")
    duration: Any
    status: str


class BookingCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    data: Optional[List[Dict[str, Any]]] = None
    booking_details: BookingDetails = Field(..., alias="bookingDetails")


class BookingStatusResponse(BaseModel):
    message: str
    data: Dict[str, Any]
