# flightlogger/session/store.py
"""
Persistence for the single resumable flight session.

A store keeps one JSON blob under a fixed key. `save` overwrites it,
`load` returns None for anything absent or unreadable, `clear` removes it.
Storage errors are logged and swallowed so they never stall the polling loop.
"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional

from .data_models import PersistedSessionRecord
from .exceptions import SessionRecordError

logger = logging.getLogger(__name__)

SESSION_KEY = "flight_logger_session"


class SessionStore(ABC):
    """Save/load/clear of a PersistedSessionRecord, last write wins."""

    def save(self, record: PersistedSessionRecord) -> None:
        try:
            self._write_raw(json.dumps(record.to_dict()))
            logger.debug(f"Session saved (phase={record.phase}).")
        except (IOError, OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not save flight session: {e}")

    def load(self) -> Optional[PersistedSessionRecord]:
        try:
            raw = self._read_raw()
        except (IOError, OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            logger.warning(f"Could not read flight session: {e}")
            return None
        if raw is None:
            return None
        try:
            return PersistedSessionRecord.from_dict(json.loads(raw))
        except (ValueError, SessionRecordError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"Discarding unreadable flight session: {e}")
            return None

    def clear(self) -> None:
        try:
            self._delete_raw()
            logger.debug("Session cleared.")
        except (IOError, OSError) as e:
            logger.warning(f"Could not clear flight session: {e}")

    @abstractmethod
    def _read_raw(self) -> Optional[str]:
        ...

    @abstractmethod
    def _write_raw(self, raw: str) -> None:
        ...

    @abstractmethod
    def _delete_raw(self) -> None:
        ...


class KeyValueSessionStore(SessionStore):
    """Keeps the blob in any mapping with get/set/delete semantics (a dict by default)."""

    def __init__(self, backend: Optional[MutableMapping[str, str]] = None, key: str = SESSION_KEY):
        self.backend = {} if backend is None else backend
        self.key = key

    def _read_raw(self) -> Optional[str]:
        return self.backend.get(self.key)

    def _write_raw(self, raw: str) -> None:
        self.backend[self.key] = raw

    def _delete_raw(self) -> None:
        self.backend.pop(self.key, None)


class JsonFileSessionStore(SessionStore):
    """Keeps the blob in `<directory>/<key>.json`, replaced atomically on save."""
    DEFAULT_DIR = os.path.join(os.path.expanduser("~"), ".flightlogger")

    def __init__(self, directory: str = DEFAULT_DIR, key: str = SESSION_KEY):
        self.directory = directory
        self.path = os.path.join(directory, f"{key}.json")

    def _read_raw(self) -> Optional[str]:
        if not os.path.exists(self.path):
            return None
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

    def _write_raw(self, raw: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(raw)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _delete_raw(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
