"""
Cookie-backed session access.

Starlette's ``SessionMiddleware`` keeps a signed dict per client in the
session cookie. ``SessionSink`` is the narrow view the auth service gets of
it: a single optional ``userId`` slot.
"""

from collections.abc import MutableMapping
from typing import Any

from app.constants.auth import SESSION_USER_ID_KEY


class SessionSink:
    def __init__(self, store: MutableMapping[str, Any] | None = None):
        self._store = store if store is not None else {}

    @property
    def user_id(self) -> int | None:
        value = self._store.get(SESSION_USER_ID_KEY)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @user_id.setter
    def user_id(self, value: int) -> None:
        self._store[SESSION_USER_ID_KEY] = int(value)
