import httpx
import logging
from typing import Optional
from weather_app.core.errors import ProviderError, TransportError
from weather_app.core.logger import logs

class OpenWeatherRepository:
    """Gateway to the OpenWeatherMap "current weather" endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org",
        units: str = "metric",
        timeout: Optional[float] = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = f"{base_url.rstrip('/')}/data/2.5/weather"
        self.units = units
        self.timeout = timeout
        self.transport = transport

    async def fetch_current(self, params: dict) -> dict:
        """
        Issues the GET and returns the decoded JSON object.
        httpx encodes the query string, so raw city names are passed as-is.
        """
        query = {**params, "units": self.units, "appid": self.api_key}

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(self.url, params=query)
            except httpx.RequestError as e:
                raise TransportError(f"Request to weather provider failed: {e!r}") from e

        if not resp.is_success:
            raise ProviderError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise TransportError("Weather provider returned invalid JSON") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected weather payload type: {type(data).__name__}")

        logs.log(logging.DEBUG, f"Weather provider answered {resp.status_code}")
        return data
