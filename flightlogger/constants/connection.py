# flightlogger/constants/connection.py

class FGConnectionConstants:
    """Shared constants for FlightGear connections."""

    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 5500
    DEFAULT_TIMEOUT_S = 2.0
    DEFAULT_TELNET_CONFIG = f"telnet,socket,in,1,{DEFAULT_HOST},{DEFAULT_PORT},tcp"
