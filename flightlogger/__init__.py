"""
flightlogger - detects takeoff, landing and crashes from live flight
simulator telemetry and reports each completed flight.
"""

__version__ = "0.3.0"
