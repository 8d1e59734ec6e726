import pytest

from bookings.errors import BookingApiConnectionError, BookingApiNotFoundError
from bookings.reference_store import InMemoryLastBookingStore
from bookings.status import BookingStatusFetcher
from clientapp.i18n import Translator
from tests.helpers import RecordingNotifier, StubBookingApi, make_booking


def _fetcher(api, store, **kwargs):
    notifier = RecordingNotifier()
    fetcher = BookingStatusFetcher(
        api,
        store,
        notifier=notifier,
        translator=Translator("en"),
        **kwargs,
    )
    return fetcher, notifier


@pytest.mark.asyncio
async def test_refresh_without_any_identifier_stays_idle():
    api = StubBookingApi(status=make_booking())
    fetcher, notifier = _fetcher(api, InMemoryLastBookingStore())

    outcome = await fetcher.refresh()

    assert outcome.idle is True
    assert outcome.booking is None
    assert outcome.message == "Enter a Booking ID to view its status."
    assert fetcher.booking is None
    assert fetcher.placeholder == "Enter a Booking ID to view its status."
    assert api.calls == []
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_refresh_prefers_initial_id_over_query_and_store():
    api = StubBookingApi(status=make_booking("1"))
    fetcher, _ = _fetcher(
        api,
        InMemoryLastBookingStore("3"),
        initial_booking_id="1",
        query_params={"bookingId": "2"},
    )

    await fetcher.refresh()

    assert api.calls == [("fetch_booking_status", "1")]


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["?bookingId=2", "bookingId=2&foo=bar", {"bookingId": ["2"]}])
async def test_refresh_uses_query_parameter_before_store(query):
    api = StubBookingApi(status=make_booking("2"))
    fetcher, _ = _fetcher(api, InMemoryLastBookingStore("3"), query_params=query)

    await fetcher.refresh()

    assert api.calls == [("fetch_booking_status", "2")]


@pytest.mark.asyncio
async def test_refresh_falls_back_to_stored_reference():
    api = StubBookingApi(status=make_booking("3"))
    fetcher, _ = _fetcher(api, InMemoryLastBookingStore("3"), query_params="?other=1")

    outcome = await fetcher.refresh()

    assert outcome.found is True
    assert api.calls == [("fetch_booking_status", "3")]


@pytest.mark.asyncio
async def test_refresh_success_exposes_booking_and_updates_store():
    store = InMemoryLastBookingStore("old")
    booking = make_booking("42")
    api = StubBookingApi(status=booking)
    fetcher, _ = _fetcher(api, store)

    outcome = await fetcher.refresh(" 42 ")

    assert outcome.booking is booking
    assert fetcher.booking is booking
    assert fetcher.booking_id == "42"
    assert fetcher.placeholder is None
    assert fetcher.is_loading is False
    assert store.get() == "42"


@pytest.mark.asyncio
async def test_refresh_failure_clears_booking_and_keeps_store():
    store = InMemoryLastBookingStore("42")
    api = StubBookingApi(status=make_booking("42"))
    fetcher, notifier = _fetcher(api, store)
    await fetcher.refresh()
    assert fetcher.booking is not None

    api.status = BookingApiNotFoundError("missing", server_message="Booking not found", status_code=404)
    outcome = await fetcher.refresh("99")

    assert outcome.booking is None
    assert outcome.message == "Booking not found"
    assert fetcher.booking is None
    assert fetcher.error == "Booking not found"
    assert fetcher.is_loading is False
    assert store.get() == "42"
    assert notifier.messages == [("error", "Booking not found")]


@pytest.mark.asyncio
async def test_refresh_failure_without_server_message_uses_generic_text():
    api = StubBookingApi(status=BookingApiConnectionError("refused"))
    fetcher, _ = _fetcher(api, InMemoryLastBookingStore())

    outcome = await fetcher.refresh("7")

    assert outcome.message == "Failed to fetch booking status"


@pytest.mark.asyncio
async def test_refresh_is_repeatable_for_same_identifier():
    store = InMemoryLastBookingStore()
    api = StubBookingApi(status=make_booking("5"))
    fetcher, _ = _fetcher(api, store)

    await fetcher.refresh("5")
    await fetcher.refresh("5")

    assert api.calls == [("fetch_booking_status", "5"), ("fetch_booking_status", "5")]
    assert store.get() == "5"
