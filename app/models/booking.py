"""
app/models/booking.py

Purpose: Booking row model

- bookings table: id, user_id -> users.id, location_id -> storage_locations.id,
  luggage_type, duration, status, created_at
- Rows are inserted once and never updated or deleted by this service
"""

from enum import Enum


class BookingStatus(str, Enum):
    """
    Booking lifecycle values. Only PENDING is ever written here; other values
    belong to processes outside this service.
    """

    PENDING = "pending"
