"""
Geolocation capability.
Python has no navigator.geolocation, so the position is resolved from the
caller's IP address through an ip-api.com style endpoint.
"""
import httpx
import ipaddress
from abc import ABC, abstractmethod
from typing import Optional
from pydantic import ValidationError
from weather_app.core.config import settings
from weather_app.core.errors import GeolocationError
from weather_app.models.weather_model import CoordinatesQuery

# ip-api answers these for addresses it refuses to locate
_REFUSED_MESSAGES = {"private range", "reserved range"}


class Geolocator(ABC):
    """Base class for anything that can tell where the user is"""

    @abstractmethod
    async def locate(self) -> CoordinatesQuery:
        """Return the current position or raise GeolocationError"""
        pass


class IpGeolocator(Geolocator):

    def __init__(
        self,
        url: str = "http://ip-api.com/json",
        timeout: Optional[float] = 10.0,
        client_ip: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.client_ip = client_ip
        self.transport = transport

    @classmethod
    def from_settings(cls, client_ip: Optional[str] = None) -> "IpGeolocator":
        return cls(url=settings.GEOLOCATION_URL, timeout=settings.REQUEST_TIMEOUT, client_ip=client_ip)

    def lookup_url(self) -> str:
        """
        Public caller addresses are looked up directly. Loopback and private
        addresses fall back to the bare endpoint, which locates the public IP
        the request leaves from (the user's own, when run locally).
        """
        if self.client_ip and _is_public(self.client_ip):
            return f"{self.url}/{self.client_ip}"
        return self.url

    async def locate(self) -> CoordinatesQuery:
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(self.lookup_url())
                resp.raise_for_status()
                data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                raise GeolocationError(GeolocationError.POSITION_UNAVAILABLE, f"Lookup failed: {e!r}") from e

        if not isinstance(data, dict):
            raise GeolocationError(GeolocationError.POSITION_UNAVAILABLE, "Unexpected lookup payload")

        if data.get("status") == "fail":
            message = data.get("message", "")
            reason = (
                GeolocationError.PERMISSION_DENIED
                if message in _REFUSED_MESSAGES
                else GeolocationError.POSITION_UNAVAILABLE
            )
            raise GeolocationError(reason, message)

        try:
            return CoordinatesQuery(lat=data.get("lat"), lon=data.get("lon"))
        except ValidationError as e:
            raise GeolocationError(GeolocationError.POSITION_UNAVAILABLE, "Lookup returned no coordinates") from e


def _is_public(address: str) -> bool:
    try:
        return ipaddress.ip_address(address).is_global
    except ValueError:
        return False
