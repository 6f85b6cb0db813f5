"""TTL key-value stores used to hold the BankHub access token."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Protocol

from sepay_bankhub.config import Settings

logger = logging.getLogger(__name__)


class TokenCache(Protocol):
    """Minimal cache interface the token manager depends on."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if missing or expired."""
        ...

    def put(self, key: str, value: str, ttl: int) -> None:
        """Store a value for ``ttl`` seconds."""
        ...

    def forget(self, key: str) -> None:
        """Remove a value unconditionally."""
        ...


class MemoryTokenCache:
    """Process-local TTL cache.

    An entry stored with ``ttl=0`` is kept but already expired, so the next
    ``get`` is a miss.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[float, str]] = {}

    def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            self._store.pop(key, None)
            return None

        return value

    def put(self, key: str, value: str, ttl: int) -> None:
        self._store[key] = (self._clock() + max(0, ttl), value)

    def forget(self, key: str) -> None:
        self._store.pop(key, None)

    def remaining(self, key: str) -> int | None:
        """Seconds until ``key`` expires, or None if it is not cached."""
        entry = self._store.get(key)
        if entry is None:
            return None
        left = int(entry[0] - self._clock())
        return left if left > 0 else None

    @property
    def size(self) -> int:
        """Number of entries currently held (expired ones included)."""
        return len(self._store)


class FileTokenCache:
    """TTL cache persisted as JSON so separate CLI runs share one token.

    Stores ``{key: {"value": ..., "expires_at": <unix time>}}`` at ``path``.
    """

    def __init__(self, path: str | Path, clock: Callable[[], float] = time.time) -> None:
        self._path = Path(path)
        self._clock = clock

    # ── persistence ───────────────────────────────────────────────────

    def _load(self) -> dict[str, dict[str, object]]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token cache {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, dict[str, object]]) -> None:
        """Write to a temp file in the same directory, then rename it over the cache."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f)
            os.replace(tmp_path, self._path)
        finally:
            Path(tmp_path).unlink(missing_ok=True)

    # ── TokenCache ────────────────────────────────────────────────────

    def get(self, key: str) -> str | None:
        data = self._load()
        entry = data.get(key)
        if not entry:
            return None

        if self._clock() >= float(entry.get("expires_at", 0)):
            data.pop(key, None)
            self._save(data)
            return None

        value = entry.get("value")
        return str(value) if value is not None else None

    def put(self, key: str, value: str, ttl: int) -> None:
        data = self._load()
        data[key] = {"value": value, "expires_at": self._clock() + max(0, ttl)}
        self._save(data)

    def forget(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def remaining(self, key: str) -> int | None:
        """Seconds until ``key`` expires, or None if it is not cached."""
        entry = self._load().get(key)
        if not entry:
            return None
        left = int(float(entry.get("expires_at", 0)) - self._clock())
        return left if left > 0 else None


def build_token_cache(settings: Settings) -> TokenCache:
    """Create the token cache selected by ``settings.token_cache``."""
    backend = settings.token_cache.lower()
    if backend == "memory":
        return MemoryTokenCache()
    if backend == "file":
        return FileTokenCache(settings.token_cache_path)
    raise ValueError(f"Unknown token cache backend '{settings.token_cache}'. Use memory or file.")
