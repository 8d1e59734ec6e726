"""
Session state for the booking client
Reads the authenticated identity written by the login collaborator
"""
from tracking import t

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from bookings.contracts import SessionUser
from infrastructure.constants import SESSION_TOKEN_KEY, SESSION_USER_KEY


class SessionProvider(Protocol):
    """Source of the currently authenticated user."""

    def get_current_user(self) -> Optional[SessionUser]:
        ...


class SessionStore:
    """
    Session persisted as a JSON file

    The file holds the ``user`` object returned by the login endpoint and the
    bearer ``token``. A missing or unreadable file means nobody is signed in.
    """

    def __init__(self, file_path: str = 'session.json') -> None:
        """
        Args:
            file_path: Path to the JSON session file
        """
        t('users.session.SessionStore.__init__')
        self.file_path = Path(file_path)
        self.logger = logging.getLogger('SessionStore')

    def get_current_user(self) -> Optional[SessionUser]:
        """
        Return the signed-in user, or None when no usable session exists

        The user id is returned as stored; callers normalize it.
        """
        t('users.session.SessionStore.get_current_user')
        payload = self._load()
        user = payload.get(SESSION_USER_KEY)
        if not isinstance(user, dict) or user.get('id') in (None, ''):
            self.logger.debug("No authenticated user in %s", self.file_path)
            return None

        return SessionUser(
            id=user.get('id'),
            name=user.get('name'),
            email=user.get('email'),
            token=payload.get(SESSION_TOKEN_KEY),
        )

    def get_token(self) -> Optional[str]:
        t('users.session.SessionStore.get_token')
        token = self._load().get(SESSION_TOKEN_KEY)
        return str(token) if token else None

    def save(self, user: Dict[str, Any], token: Optional[str] = None) -> None:
        """
        Persist a freshly authenticated session

        Raises:
            ValueError: If the user mapping has no 'id'
        """
        t('users.session.SessionStore.save')
        if user.get('id') in (None, ''):
            raise ValueError("Session user must contain an 'id' key")

        payload: Dict[str, Any] = {SESSION_USER_KEY: dict(user)}
        if token:
            payload[SESSION_TOKEN_KEY] = token

        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with self.file_path.open('w', encoding='utf-8') as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
        self.logger.info(f"Saved session for user_id: {user.get('id')}")

    def clear(self) -> None:
        t('users.session.SessionStore.clear')
        if self.file_path.exists():
            self.file_path.unlink()
            self.logger.info("Session cleared")

    def _load(self) -> Dict[str, Any]:
        t('users.session.SessionStore._load')
        if not self.file_path.exists():
            return {}
        try:
            with self.file_path.open('r', encoding='utf-8') as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            self.logger.warning(f"Failed to read session file {self.file_path}: {exc}")
            return {}
        return payload if isinstance(payload, dict) else {}
