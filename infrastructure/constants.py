"""
Constants Module - Centralized configuration values
===================================================

Endpoint paths, persisted-state keys and defaults shared by the booking
workflows. Runtime overrides live in :mod:`infrastructure.settings`.
"""

# Remote API
DEFAULT_API_BASE_URL = "http://localhost:3000/api"
DEFAULT_API_TIMEOUT_SECONDS = 15.0
BOOKINGS_PATH = "/bookings"
BOOKING_DETAIL_PATH = "/bookings/{booking_id}"
PAYMENT_REDIRECT_PATH = "/payments/booking/{booking_id}"

# Response envelope and field names
RESPONSE_DATA_KEY = "data"
RESPONSE_MESSAGE_KEYS = ("message", "error", "detail")
REDIRECT_URL_KEY = "redirectUrl"

# Persisted client state
LAST_BOOKING_KEY = "lastBookingId"
SESSION_USER_KEY = "user"
SESSION_TOKEN_KEY = "token"
DEFAULT_DATA_DIRECTORY = "data"
DEFAULT_LAST_BOOKING_FILE = "last_booking.json"
DEFAULT_SESSION_FILE = "session.json"

# Navigation
BOOKING_ID_QUERY_PARAM = "bookingId"

# Locale
DEFAULT_TIMEZONE = "Asia/Jakarta"
DEFAULT_LANGUAGE = "id"
CURRENCY_PREFIX = "Rp"

# Time range input
TIME_RANGE_SEPARATOR = "-"
TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"
