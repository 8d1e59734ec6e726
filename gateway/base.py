"""Abstract contract for the remote booking operations."""

from __future__ import annotations

from typing import Protocol

from bookings.contracts import Booking, BookingRequest, PaymentRedirect


class BookingApi(Protocol):
    """Remote operations consumed by the submission and status workflows.

    Implementations raise :class:`bookings.errors.BookingApiError` subclasses
    on transport or server failures.
    """

    async def create_booking(self, request: BookingRequest) -> Booking:
        ...

    async def request_payment_redirect(self, booking_id: str) -> PaymentRedirect:
        ...

    async def fetch_booking_status(self, booking_id: str) -> Booking:
        ...
