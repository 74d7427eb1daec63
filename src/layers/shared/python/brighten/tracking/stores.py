"""Client-side key/value stores.

The tracking client never touches a browser directly. Cookies, local storage
and session storage are modelled as injected ``KeyValueStore`` objects so the
same code runs against real browser bindings, a cookie header or tests.
"""

import time
from datetime import timedelta
from typing import Callable, Iterator, Protocol

from brighten.utils.http import parse_cookie_string


class StorageAccessError(Exception):
    """Raised when a store cannot be read or written (disabled, quota, privacy mode)."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, ttl: timedelta | None = None) -> None: ...

    def delete(self, key: str) -> None: ...

    def items(self) -> Iterator[tuple[str, str]]: ...


class MemoryStore:
    """In-memory store with optional per-key expiry."""

    def __init__(self, initial: dict[str, str] | None = None, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._data: dict[str, tuple[str, float | None]] = {
            key: (value, None) for key, value in (initial or {}).items()
        }

    def _expired(self, expires_at: float | None) -> bool:
        return expires_at is not None and self._clock() >= expires_at

    def get(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._expired(expires_at):
            del self._data[key]
            return None
        return value

    def set(self, key: str, value: str, ttl: timedelta | None = None) -> None:
        expires_at = self._clock() + ttl.total_seconds() if ttl else None
        self._data[key] = (value, expires_at)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def items(self) -> Iterator[tuple[str, str]]:
        for key in list(self._data):
            value = self.get(key)
            if value is not None:
                yield key, value


class CookieStore(MemoryStore):
    """Cookie jar seeded from a cookie header."""

    @classmethod
    def from_header(cls, raw: str, clock: Callable[[], float] = time.time) -> "CookieStore":
        return cls(parse_cookie_string(raw), clock)


class DisabledStore:
    """A store whose every access fails, like storage blocked by the browser."""

    def __init__(self, reason: str = "storage is disabled"):
        self.reason = reason

    def get(self, key: str) -> str | None:
        raise StorageAccessError(self.reason)

    def set(self, key: str, value: str, ttl: timedelta | None = None) -> None:
        raise StorageAccessError(self.reason)

    def delete(self, key: str) -> None:
        raise StorageAccessError(self.reason)

    def items(self) -> Iterator[tuple[str, str]]:
        raise StorageAccessError(self.reason)
