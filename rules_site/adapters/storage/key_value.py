"""Key/value storage adapters — localStorage and sessionStorage analogues."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from rules_site.application.ports.key_value_storage import KeyValueStorage
from rules_site.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class MemoryStorage(KeyValueStorage):
    """Lives as long as the object: the per-session storage."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """Persistent storage in a single JSON object file.

    Every call re-reads the file so separate processes sharing the path see
    each other's writes. Writes go through a temp file and ``os.replace``.
    An unparsable file reads as empty; I/O errors raise StoreUnavailable.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StoreUnavailable(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Local storage file %s is corrupt, treating as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local storage file %s is not an object, treating as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, items: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".storage-", suffix=".tmp")
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {self._path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreUnavailable(f"Cannot write {self._path}: {e}") from e
