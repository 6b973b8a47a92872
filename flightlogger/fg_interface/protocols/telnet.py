# flightlogger/fg_interface/protocols/telnet.py

import socket
from ..exceptions import FGCommError, ConnectionTimeout, ProtocolError

class TelnetProtocol:
    """Handles low-level Telnet communication with the FlightGear property server."""

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self.timeout = timeout
        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        # Set the timeout BEFORE connecting so connect() honours it
        self.socket.settimeout(timeout)
        self.socket.connect((host, port))

    def get(self, property_path: str) -> float:
        """Sends 'get <property>' and returns the numeric value."""
        cmd = f"get {property_path}\r\n".encode()
        try:
            self.socket.settimeout(self.timeout)
            self.socket.send(cmd)
            raw = self.socket.recv(1024).decode()
        except socket.timeout as e:
            raise ConnectionTimeout(f"No answer for {property_path}") from e
        except OSError as e:
            raise FGCommError(f"Socket error reading {property_path}: {e}") from e
        return self._parse_response(raw)

    def _parse_response(self, response: str) -> float:
        # Plain mode answers "123.4", prompt mode answers "/path = '123.4' (double)"
        text = response.strip()
        try:
            return float(text.split(" ")[0])
        except (IndexError, ValueError):
            pass
        try:
            value = text.split("'")[1]
        except IndexError as e:
            raise ProtocolError(f"Failed to parse response: {response!r}") from e
        if value.lower() in ("true", "false"):
            return 1.0 if value.lower() == "true" else 0.0
        try:
            return float(value)
        except ValueError as e:
            raise ProtocolError(f"Failed to parse response: {response!r}") from e

    def close(self):
        """Closes the socket connection."""
        self.socket.close()
