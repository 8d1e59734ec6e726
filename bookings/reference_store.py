"""Single-slot persistence for the most recently touched booking id."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional, Protocol

from tracking import t

from infrastructure.constants import LAST_BOOKING_KEY


class LastBookingStore(Protocol):
    """Last-write-wins slot shared by the submission and status workflows."""

    def get(self) -> Optional[str]:
        ...

    def set(self, booking_id: str) -> None:
        ...


class InMemoryLastBookingStore:
    """Process-local store, used by tests and short-lived sessions."""

    def __init__(self, booking_id: Optional[str] = None) -> None:
        t('bookings.reference_store.InMemoryLastBookingStore.__init__')
        self._value = booking_id

    def get(self) -> Optional[str]:
        t('bookings.reference_store.InMemoryLastBookingStore.get')
        return self._value or None

    def set(self, booking_id: str) -> None:
        t('bookings.reference_store.InMemoryLastBookingStore.set')
        self._value = str(booking_id)


class JsonLastBookingStore:
    """Read/write the last booking id to a JSON backing file.

    Concurrent writers from separate processes are not arbitrated; the last
    completed write wins.
    """

    def __init__(self, file_path: str | Path, *, logger: Optional[logging.Logger] = None) -> None:
        t('bookings.reference_store.JsonLastBookingStore.__init__')
        self._path = Path(file_path)
        self._logger = logger or logging.getLogger('LastBookingStore')

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Optional[str]:
        """Return the stored id, or ``None`` when nothing readable is stored."""

        t('bookings.reference_store.JsonLastBookingStore.get')
        if not self._path.exists():
            return None
        try:
            with self._path.open('r', encoding='utf-8') as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            self._logger.warning("Failed to read last booking from %s: %s", self._path, exc)
            return None

        if not isinstance(payload, dict):
            self._logger.warning(
                "Invalid last booking format in %s; expected object, received %s",
                self._path,
                type(payload).__name__,
            )
            return None

        value = payload.get(LAST_BOOKING_KEY)
        if value in (None, ""):
            return None
        return str(value)

    def set(self, booking_id: str) -> None:
        """Overwrite the slot atomically. Raises ``OSError`` if the write fails."""

        t('bookings.reference_store.JsonLastBookingStore.set')
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Optional[Path] = None
        try:
            with NamedTemporaryFile(
                'w', encoding='utf-8', dir=self._path.parent, delete=False
            ) as handle:
                tmp_path = Path(handle.name)
                json.dump({LAST_BOOKING_KEY: str(booking_id)}, handle)
                handle.write("\n")
            tmp_path.replace(self._path)
        except OSError:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise
        self._logger.debug("Last booking id %s saved to %s", booking_id, self._path)
