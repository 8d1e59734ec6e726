"""Centralized application settings.

All runtime configuration is read here once and handed to the workflows as an
immutable :class:`AppSettings` snapshot. Values come from the process
environment, with ``.env`` support during development.
"""

from __future__ import annotations
from tracking import t

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import constants


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Normalize environment strings such as "true"/"1" into booleans."""
    t('infrastructure.settings._to_bool')

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_float(value: Optional[str], default: float) -> float:
    t('infrastructure.settings._to_float')

    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of high-level configuration values."""

    api_base_url: str
    api_timeout_seconds: float
    timezone: str
    language: str
    production_mode: bool
    data_directory: str
    last_booking_file: str
    session_file: str
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None

    @property
    def last_booking_path(self) -> Path:
        return _resolve(self.data_directory, self.last_booking_file)

    @property
    def session_path(self) -> Path:
        return _resolve(self.data_directory, self.session_file)


def _resolve(directory: str, file_name: str) -> Path:
    path = Path(file_name)
    if path.is_absolute():
        return path
    return Path(directory) / path


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Load configuration from the environment and fall back to defaults."""
    t('infrastructure.settings.load_settings')

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    api_base_url = env.get("API_BASE_URL", constants.DEFAULT_API_BASE_URL).rstrip("/")
    api_timeout_seconds = _to_float(
        env.get("API_TIMEOUT_SECONDS"), constants.DEFAULT_API_TIMEOUT_SECONDS
    )

    timezone = env.get("BOOKING_TIMEZONE", constants.DEFAULT_TIMEZONE)
    language = env.get("LANGUAGE_CODE", constants.DEFAULT_LANGUAGE)
    production_mode = _to_bool(env.get("PRODUCTION_MODE", "false"))

    data_directory = env.get("DATA_DIRECTORY", constants.DEFAULT_DATA_DIRECTORY)
    last_booking_file = env.get("LAST_BOOKING_FILE", constants.DEFAULT_LAST_BOOKING_FILE)
    session_file = env.get("SESSION_FILE", constants.DEFAULT_SESSION_FILE)

    return AppSettings(
        api_base_url=api_base_url,
        api_timeout_seconds=api_timeout_seconds,
        timezone=timezone,
        language=language,
        production_mode=production_mode,
        data_directory=data_directory,
        last_booking_file=last_booking_file,
        session_file=session_file,
        telegram_bot_token=env.get("TELEGRAM_BOT_TOKEN") or None,
        telegram_chat_id=env.get("TELEGRAM_CHAT_ID") or None,
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached :class:`AppSettings` instance."""
    t('infrastructure.settings.get_settings')

    return load_settings()
