# flightlogger/session/exceptions.py

class SessionRecordError(Exception):
    """A persisted session record cannot be decoded or upgraded."""
    def __init__(self, message="Unreadable session record", schema_version=None):
        self.schema_version = schema_version
        super().__init__(f"{message} [schema_version={schema_version}]" if schema_version is not None else message)
