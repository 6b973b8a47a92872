"""
flightlogger.telemetry - pull-based telemetry sources for the engine.
"""

from .sources import (
    TelemetrySource,
    FlightGearTelemetrySource,
    ScriptedTelemetrySource,
    load_samples_jsonl,
    save_samples_jsonl,
)

__all__ = [
    "TelemetrySource",
    "FlightGearTelemetrySource",
    "ScriptedTelemetrySource",
    "load_samples_jsonl",
    "save_samples_jsonl",
]
