"""
Booking submission workflow
Turns a selected court/time slot plus form input into a created booking and
hands the user over to the payment page
"""

from __future__ import annotations
from tracking import t

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from clientapp.i18n import Translator, create_translator
from clientapp.notifications import LoggingNotifier, Notifier
from gateway.base import BookingApi
from infrastructure.constants import DEFAULT_TIMEZONE
from users.session import SessionProvider

from .contracts import Booking, BookingContext, BookingRequest, FormInput, Navigation
from .errors import BookingApiConnectionError, BookingApiError, InvalidBookingResponse
from .identifiers import to_numeric_id
from .reference_store import LastBookingStore
from .time_range import build_time_range


class SubmissionState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    CREATING_BOOKING = "creating_booking"
    REQUESTING_PAYMENT = "requesting_payment"
    REDIRECTING = "redirecting"
    FALLING_BACK_TO_STATUS = "falling_back_to_status"
    FAILED = "failed"


class SubmissionFailure(Enum):
    MISSING_FIELDS = "missing_fields"
    SESSION_EXPIRED = "session_expired"
    INVALID_COURT = "invalid_court"
    INVALID_TIME = "invalid_time"
    BOOKING_FAILED = "booking_failed"


_FAILURE_MESSAGE_KEYS = {
    SubmissionFailure.MISSING_FIELDS: "submit.missing_fields",
    SubmissionFailure.SESSION_EXPIRED: "submit.session_expired",
    SubmissionFailure.INVALID_COURT: "submit.invalid_court",
    SubmissionFailure.INVALID_TIME: "submit.invalid_time",
}


@dataclass(frozen=True)
class SubmissionOutcome:
    """Terminal result of one ``submit`` call."""

    state: SubmissionState
    message: str
    failure: Optional[SubmissionFailure] = None
    booking_id: Optional[str] = None
    booking: Optional[Booking] = None
    navigation: Optional[Navigation] = None

    @property
    def booking_created(self) -> bool:
        return self.booking_id is not None


class BookingSubmissionOrchestrator:
    """
    Validates a booking form and sequences create-booking and payment calls

    Responsibilities:
    - Fail fast on missing fields, expired session, bad court or time input
    - Create the booking and remember its id before asking for payment
    - Redirect to payment, or fall back to the status view when that fails
    """

    def __init__(
        self,
        api: BookingApi,
        session: SessionProvider,
        store: LastBookingStore,
        *,
        notifier: Optional[Notifier] = None,
        translator: Optional[Translator] = None,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> None:
        t('bookings.submission.BookingSubmissionOrchestrator.__init__')
        self.api = api
        self.session = session
        self.store = store
        self.notifier = notifier or LoggingNotifier()
        self.translator = translator or create_translator()
        self.timezone = timezone
        self.state = SubmissionState.IDLE
        self.is_submitting = False
        self.logger = logging.getLogger(self.__class__.__name__)

    async def submit(self, form: FormInput, context: BookingContext) -> SubmissionOutcome:
        """
        Run the whole submission workflow once

        Never raises for validation, session or remote failures; the returned
        outcome always describes where the workflow stopped.
        """
        t('bookings.submission.BookingSubmissionOrchestrator.submit')
        self.state = SubmissionState.VALIDATING

        request_or_failure = self._build_request(form, context)
        if isinstance(request_or_failure, SubmissionFailure):
            return await self._fail(request_or_failure)
        request = request_or_failure

        self.state = SubmissionState.CREATING_BOOKING
        self.is_submitting = True
        try:
            return await self._create_and_pay(request)
        finally:
            self.is_submitting = False

    def _build_request(self, form: FormInput, context: BookingContext) -> BookingRequest | SubmissionFailure:
        t('bookings.submission.BookingSubmissionOrchestrator._build_request')
        if not form.is_complete():
            return SubmissionFailure.MISSING_FIELDS

        user = self.session.get_current_user()
        user_id = to_numeric_id(user.id) if user is not None else None
        if user_id is None:
            return SubmissionFailure.SESSION_EXPIRED

        court_id = to_numeric_id(context.court_candidate())
        if court_id is None:
            return SubmissionFailure.INVALID_COURT

        time_range = build_time_range(context.date, context.time, self.timezone)
        if time_range is None:
            return SubmissionFailure.INVALID_TIME

        return BookingRequest.from_inputs(user_id, court_id, time_range, form)

    async def _create_and_pay(self, request: BookingRequest) -> SubmissionOutcome:
        t('bookings.submission.BookingSubmissionOrchestrator._create_and_pay')
        self.logger.info(
            "Creating booking for user %s on court %s (%s - %s)",
            request.user_id,
            request.court_id,
            request.start_time.isoformat(),
            request.end_time.isoformat(),
        )
        try:
            booking = await self.api.create_booking(request)
            if not booking.id:
                raise InvalidBookingResponse("Booking response did not include an id")
        except BookingApiError as exc:
            self.logger.error("Create booking failed: %s", exc)
            return await self._fail(SubmissionFailure.BOOKING_FAILED, self._create_error_message(exc))
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Unexpected create booking error: %s", exc, exc_info=True)
            return await self._fail(SubmissionFailure.BOOKING_FAILED, self.translator.t('submit.network_error'))

        self._remember(booking.id)

        self.state = SubmissionState.REQUESTING_PAYMENT
        try:
            redirect = await self.api.request_payment_redirect(booking.id)
        except BookingApiError as exc:
            self.logger.error("Payment redirect failed for booking %s: %s", booking.id, exc)
            return await self._fall_back_to_status(booking, exc.server_message)
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Unexpected payment redirect error for booking %s: %s", booking.id, exc, exc_info=True)
            return await self._fall_back_to_status(booking, None)

        if not redirect.redirect_url:
            self.logger.warning("Payment redirect for booking %s had no URL", booking.id)
            return await self._fall_back_to_status(booking, None)

        self.state = SubmissionState.REDIRECTING
        message = self.translator.t('submit.redirecting')
        await self.notifier.success(message)
        self.logger.info("Redirecting booking %s to payment page", booking.id)
        return SubmissionOutcome(
            state=self.state,
            message=message,
            booking_id=booking.id,
            booking=booking,
            navigation=Navigation.external(redirect.redirect_url),
        )

    def _remember(self, booking_id: str) -> None:
        t('bookings.submission.BookingSubmissionOrchestrator._remember')
        try:
            self.store.set(booking_id)
        except OSError as exc:
            # The booking already exists server-side; keep going so the user still reaches payment.
            self.logger.error("Failed to persist last booking id %s: %s", booking_id, exc)

    async def _fall_back_to_status(self, booking: Booking, server_message: Optional[str]) -> SubmissionOutcome:
        t('bookings.submission.BookingSubmissionOrchestrator._fall_back_to_status')
        self.state = SubmissionState.FALLING_BACK_TO_STATUS
        message = server_message or self.translator.t('submit.payment_unavailable')
        await self.notifier.error(message)
        return SubmissionOutcome(
            state=self.state,
            message=message,
            booking_id=booking.id,
            booking=booking,
            navigation=Navigation.status_view(booking.id),
        )

    async def _fail(self, failure: SubmissionFailure, message: Optional[str] = None) -> SubmissionOutcome:
        t('bookings.submission.BookingSubmissionOrchestrator._fail')
        self.state = SubmissionState.FAILED
        if message is None:
            message = self.translator.t(_FAILURE_MESSAGE_KEYS[failure])
        self.logger.warning("Booking submission stopped: %s", failure.value)
        await self.notifier.error(message)
        return SubmissionOutcome(state=self.state, message=message, failure=failure)

    def _create_error_message(self, exc: BookingApiError) -> str:
        t('bookings.submission.BookingSubmissionOrchestrator._create_error_message')
        if exc.server_message:
            return exc.server_message
        if isinstance(exc, BookingApiConnectionError):
            return self.translator.t('submit.network_error')
        return self.translator.t('submit.booking_invalid')
