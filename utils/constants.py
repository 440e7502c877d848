"""
utils/constants.py

Purpose: Centralized static values

- Store table names
- Response and error messages
- Placeholder user values used by booking creation

(Prevents hardcoding across the codebase)
"""

# ============================================================
# TABLES
# ============================================================

USERS_TABLE = "users"
STORAGE_LOCATIONS_TABLE = "storage_locations"
BOOKINGS_TABLE = "bookings"

# Booking status lookup embeds the referenced rows
BOOKING_WITH_RELATIONS = ("*", f"{USERS_TABLE}(*)", f"{STORAGE_LOCATIONS_TABLE}(*)")

# ============================================================
# SUCCESS MESSAGES
# ============================================================

API_WORKING_MESSAGE = "API is working"
LOCATIONS_FETCHED_MESSAGE = "Locations fetched successfully"
BOOKING_CREATED_MESSAGE = "Booking created successfully"
BOOKING_STATUS_FETCHED_MESSAGE = "Booking status fetched successfully"

# ============================================================
# ERROR MESSAGES
# ============================================================

MISSING_BOOKING_FIELDS_MESSAGE = "Missing required fields: luggageType and duration are required"
NO_LOCATIONS_MESSAGE = "No locations available"
BOOKING_NOT_FOUND_MESSAGE = "Booking not found"
USER_NOT_RETURNED_MESSAGE = "User creation returned no row"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# ============================================================
# PLACEHOLDER USER (booking creation)
# ============================================================

PLACEHOLDER_USER_NAME = "Test User"
PLACEHOLDER_EMAIL_DOMAIN = "example.com"
PLACEHOLDER_PHONE_PREFIX = "+91"
PLACEHOLDER_PHONE_MIN = 1_000_000_000
PLACEHOLDER_PHONE_MAX = 9_999_999_999
