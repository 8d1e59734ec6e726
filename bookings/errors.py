"""Errors raised by booking API collaborators."""

from __future__ import annotations

from typing import Optional


class BookingApiError(Exception):
    """Base error for remote booking operations.

    ``server_message`` carries the human-readable message from the response
    body when the server provided one.
    """

    def __init__(
        self,
        message: str,
        *,
        server_message: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.server_message = server_message
        self.status_code = status_code


class BookingApiConnectionError(BookingApiError):
    """Raised when the server could not be reached or timed out."""


class BookingApiNotFoundError(BookingApiError):
    """Raised when the requested booking does not exist."""


class BookingApiRequestError(BookingApiError):
    """Raised for rejected requests and server-side failures."""


class InvalidBookingResponse(BookingApiError):
    """Raised when a successful response does not carry a usable booking."""
