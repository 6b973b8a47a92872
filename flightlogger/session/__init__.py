"""
flightlogger.session - persistence of the one resumable flight session.
"""

from .data_models import PersistedSessionRecord, SCHEMA_VERSION, upgrade_legacy_record
from .store import SessionStore, KeyValueSessionStore, JsonFileSessionStore, SESSION_KEY
from .exceptions import SessionRecordError

__all__ = [
    "PersistedSessionRecord",
    "SCHEMA_VERSION",
    "upgrade_legacy_record",
    "SessionStore",
    "KeyValueSessionStore",
    "JsonFileSessionStore",
    "SESSION_KEY",
    "SessionRecordError",
]
