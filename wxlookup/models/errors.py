"""Error kinds raised while resolving a location and fetching its weather."""


class LookupFailure(Exception):
    """Base class for failures surfaced to the user as a message."""


class NotFoundError(LookupFailure):
    """Geocoding produced zero results."""


class NetworkError(LookupFailure):
    """Transport failure or non-success response from a remote service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeolocationError(LookupFailure):
    """Device location unavailable: permission denied, timeout or unsupported."""
