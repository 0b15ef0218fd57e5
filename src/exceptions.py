"""Exception hierarchy for the commute traffic collector."""


class TrafficError(Exception):
    """Base exception for all collector errors."""


class DirectionsFetchError(TrafficError):
    """Network failure or non-200 response from the directions endpoint."""

    def __init__(self, message, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class DirectionsParseError(TrafficError):
    """Response body does not match the expected directions shape."""


class DirectionsApiError(TrafficError):
    """Directions API answered with an error status (e.g. REQUEST_DENIED)."""

    def __init__(self, status, error_message=None):
        self.status = status
        self.error_message = error_message
        message = f"Directions API returned {status}"
        if error_message:
            message += f": {error_message}"
        super().__init__(message)
