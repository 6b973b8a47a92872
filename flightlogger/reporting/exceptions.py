# flightlogger/reporting/exceptions.py

class ReportDeliveryError(Exception):
    """A flight report could not be handed to its destination."""
    def __init__(self, destination, message="Report delivery failed"):
        self.destination = destination
        super().__init__(f"{message}: {destination}")
