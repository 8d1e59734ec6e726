"""Shared booking request/record contracts for the submission and status workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from infrastructure.constants import REDIRECT_URL_KEY


class BookingLifecycle(Enum):
    """Lifecycle states reported by the booking server."""

    PENDING = "PENDING"
    WAITING_PAYMENT = "WAITING_PAYMENT"
    PAID = "PAID"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    COMPLETED = "COMPLETED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> "BookingLifecycle":
        if value is None:
            return cls.UNKNOWN
        normalized = str(value).strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class FormInput:
    """Raw contact and match options typed by the user."""

    name: str = ""
    phone: str = ""
    email: str = ""
    team_name: str = ""
    find_opponent: bool = False

    def is_complete(self) -> bool:
        return bool((self.name or "").strip()) and bool((self.phone or "").strip())


@dataclass(frozen=True)
class BookingContext:
    """Slot selected upstream of the form.

    ``court_id`` takes precedence over ``court``; the latter is a descriptive
    fallback such as ``"court-12"`` that may embed the identifier.
    """

    court_id: Optional[Any] = None
    court: Optional[Any] = None
    date: Optional[Any] = None
    time: Optional[str] = None
    price: Optional[Any] = None
    price_from: Optional[Any] = None

    def court_candidate(self) -> Optional[Any]:
        if self.court_id not in (None, "", 0):
            return self.court_id
        if self.court not in (None, ""):
            return self.court
        return None

    def estimated_price(self) -> Any:
        return self.price or self.price_from or 0


@dataclass(frozen=True)
class TimeRange:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class BookingRequest:
    """Canonical payload sent to the create-booking operation."""

    user_id: int
    court_id: int
    start_time: datetime
    end_time: datetime
    team_name: Optional[str] = None
    find_opponent: bool = False

    def __post_init__(self) -> None:
        if self.user_id <= 0 or self.court_id <= 0:
            raise ValueError("Booking identifiers must be positive integers")
        if self.end_time <= self.start_time:
            raise ValueError("Booking end time must be after its start time")

    @classmethod
    def from_inputs(
        cls,
        user_id: int,
        court_id: int,
        time_range: TimeRange,
        form: FormInput,
    ) -> "BookingRequest":
        team_name = (form.team_name or "").strip() or None
        return cls(
            user_id=user_id,
            court_id=court_id,
            start_time=time_range.start,
            end_time=time_range.end,
            team_name=team_name,
            find_opponent=bool(form.find_opponent),
        )

    def as_payload(self) -> Dict[str, object]:
        """Return the JSON body expected by the bookings endpoint."""

        return {
            "userId": self.user_id,
            "courtId": self.court_id,
            "startTime": _iso_utc(self.start_time),
            "endTime": _iso_utc(self.end_time),
            "teamName": self.team_name or "",
            "findOpponent": self.find_opponent,
        }


@dataclass(frozen=True)
class CourtSummary:
    name: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class Booking:
    """Server-owned booking record, read-only on the client."""

    id: str
    status: BookingLifecycle
    raw_status: Optional[str]
    court_id: Optional[Any]
    court: Optional[CourtSummary]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    total_price: Decimal = Decimal(0)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def status_label(self) -> str:
        return self.raw_status or self.status.value

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Booking":
        booking_id = payload.get("id")
        if booking_id in (None, ""):
            raise ValueError("Booking payload is missing an id")

        court_payload = payload.get("court")
        court = None
        if isinstance(court_payload, Mapping):
            court = CourtSummary(
                name=court_payload.get("name"),
                location=court_payload.get("location"),
            )

        known = {"id", "status", "courtId", "court", "startTime", "endTime", "totalPrice"}
        raw_status = payload.get("status")
        return cls(
            id=str(booking_id),
            status=BookingLifecycle.parse(raw_status),
            raw_status=str(raw_status) if raw_status is not None else None,
            court_id=payload.get("courtId"),
            court=court,
            start_time=_parse_timestamp(payload.get("startTime")),
            end_time=_parse_timestamp(payload.get("endTime")),
            total_price=_parse_amount(payload.get("totalPrice")),
            extra={key: value for key, value in payload.items() if key not in known},
        )


@dataclass(frozen=True)
class PaymentRedirect:
    """Response of the payment initiation call; a missing URL is valid."""

    redirect_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "PaymentRedirect":
        if not isinstance(payload, Mapping):
            return cls()
        url = payload.get(REDIRECT_URL_KEY)
        return cls(redirect_url=str(url) if url else None)


@dataclass(frozen=True)
class SessionUser:
    id: Any
    name: Optional[str] = None
    email: Optional[str] = None
    token: Optional[str] = None


def _iso_utc(value: datetime) -> str:
    if value.tzinfo is None:
        return value.isoformat()
    utc_value = value.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_amount(value: Any) -> Decimal:
    if value in (None, ""):
        return Decimal(0)
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return Decimal(0)
    if not amount.is_finite() or amount < 0:
        return Decimal(0)
    return amount


class NavigationKind(Enum):
    EXTERNAL = "external"
    STATUS_VIEW = "status_view"


@dataclass(frozen=True)
class Navigation:
    """Navigation request handed back to the presentation layer."""

    kind: NavigationKind
    target: str

    @classmethod
    def external(cls, url: str) -> "Navigation":
        return cls(kind=NavigationKind.EXTERNAL, target=url)

    @classmethod
    def status_view(cls, booking_id: str) -> "Navigation":
        return cls(kind=NavigationKind.STATUS_VIEW, target=str(booking_id))
