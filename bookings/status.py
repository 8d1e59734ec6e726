"""Booking status lookup with last-booking recovery."""

from __future__ import annotations
from tracking import t

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union
from urllib.parse import parse_qs

from clientapp.i18n import Translator, create_translator
from clientapp.notifications import LoggingNotifier, Notifier
from gateway.base import BookingApi
from infrastructure.constants import BOOKING_ID_QUERY_PARAM

from .contracts import Booking
from .errors import BookingApiError
from .reference_store import LastBookingStore

QueryParams = Union[str, Mapping[str, object], None]


@dataclass(frozen=True)
class StatusOutcome:
    booking_id: Optional[str]
    booking: Optional[Booking] = None
    message: Optional[str] = None

    @property
    def idle(self) -> bool:
        return self.booking_id is None

    @property
    def found(self) -> bool:
        return self.booking is not None


class BookingStatusFetcher:
    """Fetch and hold the booking shown on the status view.

    Without an explicit id the fetcher falls back to, in order, the id it was
    opened with, the ``bookingId`` query parameter and the last-booking store.
    """

    def __init__(
        self,
        api: BookingApi,
        store: LastBookingStore,
        *,
        initial_booking_id: Optional[str] = None,
        query_params: QueryParams = None,
        notifier: Optional[Notifier] = None,
        translator: Optional[Translator] = None,
    ) -> None:
        t('bookings.status.BookingStatusFetcher.__init__')
        self.api = api
        self.store = store
        self.initial_booking_id = _clean(initial_booking_id)
        self.query_params = query_params
        self.notifier = notifier or LoggingNotifier()
        self.translator = translator or create_translator()
        self.booking: Optional[Booking] = None
        self.booking_id: Optional[str] = None
        self.error: Optional[str] = None
        self.is_loading = False
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve_booking_id(self) -> Optional[str]:
        t('bookings.status.BookingStatusFetcher.resolve_booking_id')
        return (
            self.initial_booking_id
            or _query_booking_id(self.query_params)
            or _clean(self.store.get())
        )

    @property
    def placeholder(self) -> Optional[str]:
        """Prompt shown while no booking is on display."""
        if self.booking is not None or self.is_loading:
            return None
        return self.translator.t('status.enter_id')

    async def refresh(self, candidate_id: Optional[str] = None) -> StatusOutcome:
        t('bookings.status.BookingStatusFetcher.refresh')
        booking_id = _clean(candidate_id) or self.resolve_booking_id()
        if booking_id is None:
            self.booking = None
            self.booking_id = None
            self.error = None
            self.logger.debug("No booking id available; status view stays idle")
            return StatusOutcome(booking_id=None, message=self.translator.t('status.enter_id'))

        self.booking_id = booking_id
        self.is_loading = True
        try:
            booking = await self.api.fetch_booking_status(booking_id)
        except BookingApiError as exc:
            return await self._clear(booking_id, exc.server_message)
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Unexpected status fetch error for %s: %s", booking_id, exc, exc_info=True)
            return await self._clear(booking_id, None)
        finally:
            self.is_loading = False

        self.booking = booking
        self.error = None
        try:
            self.store.set(booking_id)
        except OSError as exc:
            self.logger.error("Failed to persist last booking id %s: %s", booking_id, exc)
        self.logger.info("Booking %s status: %s", booking_id, booking.status_label)
        return StatusOutcome(booking_id=booking_id, booking=booking)

    async def _clear(self, booking_id: str, server_message: Optional[str]) -> StatusOutcome:
        t('bookings.status.BookingStatusFetcher._clear')
        message = server_message or self.translator.t('status.fetch_failed')
        self.logger.warning("Status fetch for booking %s failed: %s", booking_id, message)
        self.booking = None
        self.error = message
        await self.notifier.error(message)
        return StatusOutcome(booking_id=booking_id, message=message)


def _clean(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _query_booking_id(query_params: QueryParams) -> Optional[str]:
    if query_params is None:
        return None
    if isinstance(query_params, str):
        values = parse_qs(query_params.lstrip("?")).get(BOOKING_ID_QUERY_PARAM)
        return _clean(values[0]) if values else None
    value = query_params.get(BOOKING_ID_QUERY_PARAM)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return _clean(value)
