"""Remember-forever cache stores for rendered avatar bytes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Protocol

from .errors import ResourceUnavailable
from .logging_setup import get_logger


_log = get_logger("cache")


class CacheStore(Protocol):
    def remember_forever(self, key: str, compute: Callable[[], bytes]) -> bytes:
        """Return the bytes stored under ``key``, computing and storing them once."""


def ensure_directory(path: Path) -> Path:
    if path.is_dir():
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ResourceUnavailable(f"cannot create cache directory {path}: {exc}") from exc
    _log.info(f"cache directory created path={path}", extra={"event": "cache_dir_created"})
    return path


class MemoryCacheStore:
    """Process-local store. Entries never expire."""

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def remember_forever(self, key: str, compute: Callable[[], bytes]) -> bytes:
        cached = self._entries.get(key)
        if cached is not None:
            return cached
        _log.debug(f"cache miss key={key}", extra={"event": "cache_miss"})
        value = compute()
        # Concurrent misses compute identical bytes; the last assignment wins.
        self._entries[key] = value
        return value


class FileCacheStore:
    """Flat directory of ``<key><suffix>`` files."""

    def __init__(self, directory: Path, suffix: str = ".png") -> None:
        self.directory = ensure_directory(Path(directory))
        self.suffix = suffix

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}{self.suffix}"

    def remember_forever(self, key: str, compute: Callable[[], bytes]) -> bytes:
        path = self.path_for(key)
        if path.exists():
            return path.read_bytes()

        _log.debug(f"cache miss key={key}", extra={"event": "cache_miss"})
        value = compute()
        self.write(path, value)
        return value

    def write(self, path: Path, value: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=str(self.directory), prefix=".tmp-", suffix=self.suffix)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
