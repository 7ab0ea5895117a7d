from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from errors import StorageError
from json_store import atomic_write_json, read_json

from .interfaces import KeyValueDocumentStore
from .locks import GLOBAL_PATH_LOCKS


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - Returns an empty dict when the file is missing or empty.
    - Raises StorageError when the file holds anything but a JSON object.
    - Writes atomically.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def locked(self) -> threading.RLock:
        return GLOBAL_PATH_LOCKS.lock_for(self._path)

    def load(self) -> dict[str, Any]:
        with self.locked():
            raw = read_json(self._path)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise StorageError(f"{self._path} does not hold a JSON object")
        return raw

    def save(self, doc: dict[str, Any]) -> None:
        with self.locked():
            # Record field order is meaningful to readers of the file; keep it.
            atomic_write_json(self._path, doc, sort_keys=False)
