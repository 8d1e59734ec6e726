"""Dependency container wiring the booking workflows to concrete collaborators."""

from __future__ import annotations
from tracking import t

from typing import Any, Callable, Dict, Mapping, Optional, Union

from bookings.reference_store import JsonLastBookingStore, LastBookingStore
from bookings.status import BookingStatusFetcher
from bookings.submission import BookingSubmissionOrchestrator
from gateway.client import CourtBookingClient
from infrastructure.settings import AppSettings, get_settings
from users.session import SessionStore

from .i18n import Translator, create_translator
from .notifications import LoggingNotifier, Notifier, TelegramNotifier


class DependencyContainer:
    """Lazy dependency container with optional override support."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        t('clientapp.container.DependencyContainer.__init__')
        self.settings = settings or get_settings()
        self._cache: Dict[str, Any] = {}
        if overrides:
            self._cache.update(overrides)

    def _resolve(self, key: str, factory: Callable[[], Any]) -> Any:
        t('clientapp.container.DependencyContainer._resolve')
        if key not in self._cache:
            self._cache[key] = factory()
        return self._cache[key]

    @property
    def session(self) -> SessionStore:
        t('clientapp.container.DependencyContainer.session')
        return self._resolve('session', lambda: SessionStore(str(self.settings.session_path)))

    @property
    def store(self) -> LastBookingStore:
        t('clientapp.container.DependencyContainer.store')
        return self._resolve('store', lambda: JsonLastBookingStore(self.settings.last_booking_path))

    @property
    def api(self) -> CourtBookingClient:
        t('clientapp.container.DependencyContainer.api')

        def factory() -> CourtBookingClient:
            t('clientapp.container.DependencyContainer.api.factory')
            return CourtBookingClient(
                self.settings.api_base_url,
                timeout=self.settings.api_timeout_seconds,
                token_source=self.session.get_token,
            )

        return self._resolve('api', factory)

    @property
    def translator(self) -> Translator:
        t('clientapp.container.DependencyContainer.translator')
        return self._resolve('translator', lambda: create_translator(self.settings.language))

    @property
    def notifier(self) -> Notifier:
        t('clientapp.container.DependencyContainer.notifier')

        def factory() -> Notifier:
            t('clientapp.container.DependencyContainer.notifier.factory')
            if self.settings.telegram_bot_token and self.settings.telegram_chat_id:
                return TelegramNotifier(
                    self.settings.telegram_chat_id,
                    token=self.settings.telegram_bot_token,
                )
            return LoggingNotifier()

        return self._resolve('notifier', factory)

    def build_submission_orchestrator(self) -> BookingSubmissionOrchestrator:
        t('clientapp.container.DependencyContainer.build_submission_orchestrator')
        return BookingSubmissionOrchestrator(
            self.api,
            self.session,
            self.store,
            notifier=self.notifier,
            translator=self.translator,
            timezone=self.settings.timezone,
        )

    def build_status_fetcher(
        self,
        *,
        initial_booking_id: Optional[str] = None,
        query_params: Union[str, Mapping[str, object], None] = None,
    ) -> BookingStatusFetcher:
        t('clientapp.container.DependencyContainer.build_status_fetcher')
        return BookingStatusFetcher(
            self.api,
            self.store,
            initial_booking_id=initial_booking_id,
            query_params=query_params,
            notifier=self.notifier,
            translator=self.translator,
        )

    async def aclose(self) -> None:
        t('clientapp.container.DependencyContainer.aclose')
        api = self._cache.pop('api', None)
        if api is not None:
            await api.aclose()
