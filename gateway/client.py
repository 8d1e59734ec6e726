"""HTTP client for the court booking backend."""

from __future__ import annotations
from tracking import t

import logging
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote

import httpx

from bookings.contracts import Booking, BookingRequest, PaymentRedirect
from bookings.errors import (
    BookingApiConnectionError,
    BookingApiNotFoundError,
    BookingApiRequestError,
    InvalidBookingResponse,
)
from infrastructure.constants import (
    BOOKING_DETAIL_PATH,
    BOOKINGS_PATH,
    PAYMENT_REDIRECT_PATH,
    RESPONSE_DATA_KEY,
    RESPONSE_MESSAGE_KEYS,
)

logger = logging.getLogger(__name__)

TokenSource = Callable[[], Optional[str]]


class CourtBookingClient:
    """``httpx``-backed implementation of :class:`gateway.base.BookingApi`."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        token_source: Optional[TokenSource] = None,
        http: Optional[httpx.AsyncClient] = None,
    ) -> None:
        t('gateway.client.CourtBookingClient.__init__')
        self.token_source = token_source
        self.http = http or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
        )

    async def __aenter__(self) -> "CourtBookingClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        t('gateway.client.CourtBookingClient.aclose')
        await self.http.aclose()

    async def call(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue a request and return the decoded body.

        Raises a :class:`bookings.errors.BookingApiError` subclass for
        transport failures and error statuses.
        """
        t('gateway.client.CourtBookingClient.call')
        headers = self._headers()
        try:
            response = await self.http.request(method, path, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            raise BookingApiConnectionError(f"Request to {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise BookingApiConnectionError(f"Connection to backend failed: {exc}") from exc

        body = _decode(response)
        if response.status_code >= 400:
            server_message = _server_message(body)
            logger.warning(
                "%s %s failed with %s: %s",
                method,
                path,
                response.status_code,
                server_message or "no message",
            )
            error_cls = (
                BookingApiNotFoundError
                if response.status_code == 404
                else BookingApiRequestError
            )
            raise error_cls(
                server_message or f"Backend returned status {response.status_code}",
                server_message=server_message,
                status_code=response.status_code,
            )
        return body

    async def create_booking(self, request: BookingRequest) -> Booking:
        t('gateway.client.CourtBookingClient.create_booking')
        body = await self.call("POST", BOOKINGS_PATH, json=request.as_payload())
        data = _unwrap(body)
        if not isinstance(data, Mapping) or data.get("id") in (None, ""):
            raise InvalidBookingResponse("Booking response did not include an id")
        return Booking.from_payload(data)

    async def request_payment_redirect(self, booking_id: str) -> PaymentRedirect:
        t('gateway.client.CourtBookingClient.request_payment_redirect')
        path = PAYMENT_REDIRECT_PATH.format(booking_id=quote(str(booking_id), safe=""))
        body = await self.call("POST", path)
        return PaymentRedirect.from_payload(_unwrap(body))

    async def fetch_booking_status(self, booking_id: str) -> Booking:
        t('gateway.client.CourtBookingClient.fetch_booking_status')
        path = BOOKING_DETAIL_PATH.format(booking_id=quote(str(booking_id), safe=""))
        body = await self.call("GET", path)
        data = _unwrap(body)
        if not isinstance(data, Mapping) or data.get("id") in (None, ""):
            raise InvalidBookingResponse("Booking status response did not include a booking")
        return Booking.from_payload(data)

    def _headers(self) -> Dict[str, str]:
        t('gateway.client.CourtBookingClient._headers')
        headers = {"Accept": "application/json"}
        token = self.token_source() if self.token_source else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {"message": response.text}


def _unwrap(body: Any) -> Any:
    if isinstance(body, Mapping) and RESPONSE_DATA_KEY in body:
        return body[RESPONSE_DATA_KEY]
    return body


def _server_message(body: Any) -> Optional[str]:
    if not isinstance(body, Mapping):
        return None
    for key in RESPONSE_MESSAGE_KEYS:
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None
