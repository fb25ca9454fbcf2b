"""
In-memory user store.

``UserStore`` is the single source of truth for user records. Every
operation, read or write, runs under one exclusive lock for its whole
duration, so operations never interleave. Records are copied on the way
out so callers can serialize them after the lock is released.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace

from user_app.models import User

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when no user matches the requested id or name."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"User not found: {self.key!r}"


class UserStore:
    """Lock-guarded mapping from user id to ``User``."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._last_stamp = 0

    def _next_id(self) -> str:
        # Caller must hold the lock. Bumping past the last stamp keeps ids
        # unique when the clock is coarse or steps backwards.
        stamp = max(time.time_ns(), self._last_stamp + 1)
        self._last_stamp = stamp
        return str(stamp)

    def create(self, name: str, email: str) -> User:
        """Store a new user under a freshly generated id and return it."""
        with self._lock:
            user = User(id=self._next_id(), name=name, email=email)
            self._users[user.id] = user
            logger.debug("Created user %s", user.id)
            return replace(user)

    def get(self, user_id: str) -> User:
        """Return the user with ``user_id`` or raise ``UserNotFoundError``."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return replace(user)

    def get_by_name(self, name: str) -> User:
        """
        Return the first user whose name equals ``name``.

        The scan follows the mapping's iteration order; when several users
        share a name, which one comes back is not part of the contract.
        """
        with self._lock:
            for user in self._users.values():
                if user.name == name:
                    return replace(user)
        raise UserNotFoundError(name)

    def get_all(self) -> dict[str, User]:
        """Return a copy of the whole collection keyed by id."""
        with self._lock:
            return {user_id: replace(user) for user_id, user in self._users.items()}

    def replace_fields(self, user_id: str, name: str, email: str) -> User:
        """Overwrite both name and email, even with empty strings."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            user.name = name
            user.email = email
            return replace(user)

    def merge_fields(self, user_id: str, name: str, email: str) -> User:
        """Overwrite only the fields given a non-empty value."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            if name:
                user.name = name
            if email:
                user.email = email
            return replace(user)

    def delete(self, user_id: str) -> None:
        """Remove the user with ``user_id``; the check and removal are atomic."""
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)
            logger.debug("Deleted user %s", user_id)

    def __len__(self) -> int:
        """Return the number of stored users."""
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        """Return True when a user with ``user_id`` is stored."""
        with self._lock:
            return user_id in self._users
