"""Shared fakes and utilities for unit tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from bookings.contracts import Booking, BookingRequest, PaymentRedirect, SessionUser


class DummyLogger:
    """Lightweight stand-in for ``logging.Logger`` that records calls."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

    def _record(self, level: str, *args: Any, **kwargs: Any) -> None:
        self.records.append((level, args, kwargs))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self._record("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        self._record("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        self._record("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        self._record("error", *args, **kwargs)

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


class RecordingNotifier:
    """Notifier double that keeps every message with its level."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    async def success(self, message: str) -> None:
        self.messages.append(("success", message))

    async def error(self, message: str) -> None:
        self.messages.append(("error", message))

    async def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def levels(self) -> List[str]:
        return [level for level, _ in self.messages]


class StubSession:
    def __init__(self, user: Optional[SessionUser] = None) -> None:
        self.user = user
        self.calls = 0

    def get_current_user(self) -> Optional[SessionUser]:
        self.calls += 1
        return self.user


class StubBookingApi:
    """Scripted ``BookingApi``: each slot is a value to return or an exception to raise."""

    def __init__(
        self,
        *,
        created: Any = None,
        redirect: Any = None,
        status: Any = None,
    ) -> None:
        self.created = created
        self.redirect = redirect if redirect is not None else PaymentRedirect()
        self.status = status
        self.calls: List[Tuple[str, Any]] = []

    async def create_booking(self, request: BookingRequest) -> Booking:
        self.calls.append(("create_booking", request))
        return _resolve(self.created)

    async def request_payment_redirect(self, booking_id: str) -> PaymentRedirect:
        self.calls.append(("request_payment_redirect", booking_id))
        return _resolve(self.redirect)

    async def fetch_booking_status(self, booking_id: str) -> Booking:
        self.calls.append(("fetch_booking_status", booking_id))
        return _resolve(self.status)

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


def _resolve(value: Any) -> Any:
    if isinstance(value, BaseException):
        raise value
    return value


def make_booking(booking_id: str = "101", **overrides: Any) -> Booking:
    payload: Dict[str, Any] = {
        "id": booking_id,
        "status": "WAITING_PAYMENT",
        "courtId": 12,
        "court": {"name": "Lapangan Futsal A", "location": "Jl. Merdeka 1"},
        "startTime": "2025-03-10T02:00:00.000Z",
        "endTime": "2025-03-10T03:30:00.000Z",
        "totalPrice": 150000,
    }
    payload.update(overrides)
    return Booking.from_payload(payload)
