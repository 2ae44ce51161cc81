"""String stores used to persist caches between sessions."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from credit_resolver.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class MemoryStore:
    """Store which lives as long as the process."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, name: str) -> str | None:
        return self._items.get(name)

    def set_item(self, name: str, value: str) -> None:
        self._items[name] = value


class FileStore:
    """Store with one file per item name inside a directory.

    Writes go to a temporary file which then replaces the item, so a
    crash never leaves a half written item behind. The last write wins.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def get_item(self, name: str) -> str | None:
        path = self.path_for(name)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set_item(self, name: str, value: str) -> None:
        path = self.path_for(name)
        tmp_path = path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("Stored %s (%d chars)", path, len(value))
