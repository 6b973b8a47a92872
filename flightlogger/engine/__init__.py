"""
flightlogger.engine - flight phase detection and report assembly.
"""

from .core import FlightPhaseEngine, ManualResolver
from .config import EngineConfig, FlightLoggerConstants
from .data_models import FlightPhase, LandingQuality, TelemetrySample, FlightSession, FlightReport
from .classification import altitude_agl_ft, classify_landing, g_force, duration_minutes
from .exceptions import FlightLoggerError, TelemetryUnavailable, SessionStateError, InvalidPhaseTransition

__all__ = [
    "FlightPhaseEngine",
    "ManualResolver",
    "EngineConfig",
    "FlightLoggerConstants",
    "FlightPhase",
    "LandingQuality",
    "TelemetrySample",
    "FlightSession",
    "FlightReport",
    "altitude_agl_ft",
    "classify_landing",
    "g_force",
    "duration_minutes",
    "FlightLoggerError",
    "TelemetryUnavailable",
    "SessionStateError",
    "InvalidPhaseTransition",
]
