# flightlogger/airports/exceptions.py

class AirportDataError(Exception):
    """Airport reference data could not be fetched or decoded."""
    pass

class MalformedAirportRecord(AirportDataError):
    """A single airport entry lacks usable coordinates."""
    def __init__(self, icao, message="Malformed airport record"):
        self.icao = icao
        super().__init__(f"{message}: {icao}")
