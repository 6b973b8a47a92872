# flightlogger/fg_interface/core.py

import logging
import time
from typing import Dict, Any, Iterable, Optional

from .protocols.telnet import TelnetProtocol
from ..constants.connection import FGConnectionConstants

logger = logging.getLogger(__name__)

class FGConnection:
    """Reads FlightGear properties and wraps every answer in a standard response dict."""

    def __init__(self, host: str = FGConnectionConstants.DEFAULT_HOST,
                 port: int = FGConnectionConstants.DEFAULT_PORT,
                 timeout: float = FGConnectionConstants.DEFAULT_TIMEOUT_S):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._protocol: Optional[TelnetProtocol] = None

    @property
    def is_connected(self) -> bool:
        return self._protocol is not None

    def connect(self) -> Dict[str, Any]:
        """Opens the telnet session. Never raises; check response['success']."""
        try:
            self._protocol = TelnetProtocol(self.host, self.port, self.timeout)
            logger.info(f"Connected to FlightGear via Telnet ({self.host}:{self.port})")
            return self._format_response(
                success=True,
                message=f"Connected to FlightGear via Telnet ({self.host}:{self.port})",
                data={"protocol": "telnet", "host": self.host, "port": self.port}
            )
        except Exception as e:
            self._protocol = None
            return self._format_response(
                success=False, message=str(e),
                data={
                    "error_type": type(e).__name__, "host": self.host, "port": self.port,
                    "solution": f"Start FlightGear with --telnet={FGConnectionConstants.DEFAULT_TELNET_CONFIG}"
                }
            )

    def disconnect(self):
        """Closes the connection gracefully."""
        if self._protocol:
            self._protocol.close()
            self._protocol = None
            logger.info("FlightGear connection closed.")

    def get(self, property_path: str) -> Dict[str, Any]:
        """Reads one property."""
        if not self._protocol:
            return self._format_response(
                success=False, message="Not connected",
                data={"property": property_path, "required_action": "Call connect() first"}
            )

        try:
            value = self._protocol.get(property_path)
            return self._format_response(
                success=True, message=f"Read {property_path}",
                data={"property": property_path, "value": float(value)}
            )
        except Exception as e:
            return self._format_response(
                success=False, message=f"Failed to read {property_path}",
                data={"property": property_path, "error_type": type(e).__name__, "error_details": str(e)}
            )

    def get_many(self, property_paths: Iterable[str]) -> Dict[str, Any]:
        """Reads several properties; fails as a whole if any read fails."""
        values = {}
        for path in property_paths:
            response = self.get(path)
            if not response['success']:
                return response
            values[path] = response['data']['value']
        return self._format_response(success=True, message=f"Read {len(values)} properties", data={"values": values})

    def _format_response(self, success: bool, message: str, data: Dict = None) -> Dict[str, Any]:
        """Standardized response format for all methods."""
        return {
            "module": "fg_interface", "success": success, "message": message,
            "data": data or {}, "timestamp": time.time()
        }
