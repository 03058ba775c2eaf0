"""
Error taxonomy for the weather client.
Failures carry their data (HTTP status, geolocation reason) so callers
classify them with isinstance checks, never by reading message text.
"""


class WeatherError(Exception):
    """Base class for every failure a weather fetch can raise."""


class InvalidInput(WeatherError):
    """The query was rejected before any network call was made."""


class ProviderError(WeatherError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"Weather API error: {status} - {body[:200]}")


class TransportError(WeatherError):
    """The request never produced a usable response (network, timeout, bad JSON)."""


class GeolocationError(Exception):
    """Positioning failed. Logged only, never shown to the user."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"

    def __init__(self, reason: str, message: str = ""):
        self.reason = reason
        super().__init__(message or reason)
