"""
KEY-VALUE STORAGE BACKENDS

Purpose:
- Durable local key-value storage for JSON documents
- One document per key, always written whole
- In-memory twin for tests and for running without a usable data dir

Backends:
- JsonFileBackend: <data_dir>/<key>.json, atomic replace on write
- MemoryBackend: process-local dict
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the storage backend cannot be read or written."""
    pass


class StorageCorruptError(StorageError):
    """Raised when a stored document cannot be decoded or has the wrong shape."""
    pass


class StorageBackend:
    """Contract shared by all backends. Values are JSON-serializable."""

    def read(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def write(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        return self.read(key) is not None

    def remove(self, key: str) -> None:
        raise NotImplementedError


# ══════════════════════════════════════════════════════════════
# FILE BACKEND
# ══════════════════════════════════════════════════════════════

class JsonFileBackend(StorageBackend):
    """
    Stores each key as a JSON file inside ``directory``.

    Writes go to a temp file in the same directory and are moved over the
    target with ``os.replace``, so readers only ever see a complete document.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageCorruptError(f"Stored document '{key}' could not be decoded: {e}") from e

    def has(self, key: str) -> bool:
        return self._path(key).exists()

    def write(self, key: str, value: Any) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Wrote document '{key}' to {path}")

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass


# ══════════════════════════════════════════════════════════════
# MEMORY BACKEND
# ══════════════════════════════════════════════════════════════

class MemoryBackend(StorageBackend):
    """Keeps documents in a dict. Values are deep-copied in and out."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._documents: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def read(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._documents.get(key))

    def has(self, key: str) -> bool:
        return key in self._documents

    def write(self, key: str, value: Any) -> None:
        self._documents[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._documents.pop(key, None)


def open_backend(data_dir: Union[str, Path]) -> StorageBackend:
    """
    Open the durable backend for ``data_dir``.

    Falls back to an in-memory backend when the directory cannot be created,
    so the dashboard still runs (without persistence across restarts).
    """
    try:
        return JsonFileBackend(data_dir)
    except OSError as e:
        logger.warning(f"Data directory {data_dir} unavailable ({e}); using in-memory storage")
        return MemoryBackend()
