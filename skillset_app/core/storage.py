"""Key-value storage backends for persisted client state.

The identity store keeps one JSON document under a single namespaced key,
the same way a browser keeps state in local storage. Two backends exist:

- MemoryStorage: a dict, used by tests and throw-away sessions
- FileStorage: one ``<key>.json`` file per key inside a directory

Reading never raises for a missing or unreadable entry; it returns None so the
caller can fall back to a fresh state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage that lives as long as the object."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)


class FileStorage:
    """Directory-backed storage; each key maps to ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        cleaned = key.strip()
        if not cleaned or "/" in cleaned or "\\" in cleaned or cleaned.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{cleaned}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read storage entry %s: %s", path, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        path.unlink(missing_ok=True)
