# flightlogger/engine/exceptions.py
"""
Flight logger engine exceptions.
Only caller misuse raises; recoverable conditions are handled in place.
"""

class FlightLoggerError(Exception):
    """Base class for all flight logger engine errors"""
    pass

class TelemetryUnavailable(FlightLoggerError):
    """The simulator has no sample to offer this tick"""
    def __init__(self, message="Telemetry unavailable", source=None):
        self.source = source
        super().__init__(f"{message} [Source: {source}]" if source else message)

class SessionStateError(FlightLoggerError):
    """Operation not allowed in the current session state"""
    def __init__(self, operation, phase, message="Operation not allowed"):
        self.operation = operation
        self.phase = phase
        super().__init__(f"{message}: {operation} while {phase}")

class InvalidPhaseTransition(FlightLoggerError):
    """A session phase may only move forward"""
    def __init__(self, current, requested, message="Invalid phase transition"):
        self.current = current
        self.requested = requested
        super().__init__(f"{message}: {current} -> {requested}")
