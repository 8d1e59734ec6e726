"""Notification channels for success/error/info messages raised by the workflows."""

from __future__ import annotations
from tracking import t

import logging
from enum import Enum
from typing import Optional, Protocol

from telegram import Bot
from telegram.error import TelegramError


class NotificationLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notifier(Protocol):
    """User-facing message sink supplied by the presentation layer."""

    async def success(self, message: str) -> None:
        ...

    async def error(self, message: str) -> None:
        ...

    async def info(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Default notifier that only writes messages to the application log."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        t('clientapp.notifications.LoggingNotifier.__init__')
        self.logger = logger or logging.getLogger('Notifications')

    async def success(self, message: str) -> None:
        t('clientapp.notifications.LoggingNotifier.success')
        self.logger.info("✅ %s", message)

    async def error(self, message: str) -> None:
        t('clientapp.notifications.LoggingNotifier.error')
        self.logger.warning("❌ %s", message)

    async def info(self, message: str) -> None:
        t('clientapp.notifications.LoggingNotifier.info')
        self.logger.info("ℹ️ %s", message)


_LEVEL_PREFIX = {
    NotificationLevel.SUCCESS: "✅",
    NotificationLevel.ERROR: "❌",
    NotificationLevel.INFO: "ℹ️",
}


class TelegramNotifier:
    """Deliver workflow messages to a Telegram chat.

    Delivery failures are logged and never interrupt the booking workflow.
    """

    def __init__(
        self,
        chat_id: int | str,
        *,
        bot: Optional[Bot] = None,
        token: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('clientapp.notifications.TelegramNotifier.__init__')
        if bot is None:
            if not token:
                raise ValueError("TelegramNotifier requires a bot or a bot token")
            bot = Bot(token)
        self.bot = bot
        self.chat_id = chat_id
        self.logger = logger or logging.getLogger('TelegramNotifier')

    async def success(self, message: str) -> None:
        t('clientapp.notifications.TelegramNotifier.success')
        await self._deliver(NotificationLevel.SUCCESS, message)

    async def error(self, message: str) -> None:
        t('clientapp.notifications.TelegramNotifier.error')
        await self._deliver(NotificationLevel.ERROR, message)

    async def info(self, message: str) -> None:
        t('clientapp.notifications.TelegramNotifier.info')
        await self._deliver(NotificationLevel.INFO, message)

    async def _deliver(self, level: NotificationLevel, message: str) -> None:
        t('clientapp.notifications.TelegramNotifier._deliver')
        text = f"{_LEVEL_PREFIX[level]} {message}"
        try:
            await self.bot.send_message(chat_id=self.chat_id, text=text)
        except TelegramError as exc:
            self.logger.error("Failed to deliver %s notification: %s", level.value, exc)
