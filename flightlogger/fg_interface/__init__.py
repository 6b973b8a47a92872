"""
fg_interface - FlightGear property interface for the flight logger

Exposes the FGConnection class and its exceptions.
"""

from .core import FGConnection
from .exceptions import FGCommError, ConnectionTimeout, ProtocolError

__all__ = ['FGConnection', 'FGCommError', 'ConnectionTimeout', 'ProtocolError']
