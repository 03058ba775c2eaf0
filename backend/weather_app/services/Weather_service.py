import logging
from pydantic import ValidationError
from weather_app.core.config import settings
from weather_app.core.errors import InvalidInput, TransportError
from weather_app.core.logger import logs
from weather_app.models.weather_model import CityQuery, CoordinatesQuery, WeatherReport
from weather_app.repos.weather_repo import OpenWeatherRepository

EMPTY_CITY_MESSAGE = "Please enter a city name."

class WeatherService:
    def __init__(self, repo: OpenWeatherRepository):
        self.repo = repo

    @classmethod
    def from_settings(cls) -> "WeatherService":
        return cls(OpenWeatherRepository(
            api_key=settings.OPENWEATHER_API_KEY,
            base_url=settings.OPENWEATHER_BASE_URL,
            units=settings.OPENWEATHER_UNITS,
            timeout=settings.REQUEST_TIMEOUT,
        ))

    async def fetch_by_city(self, name: str) -> WeatherReport:
        try:
            query = CityQuery(city=name or "")
        except ValidationError as e:
            raise InvalidInput(EMPTY_CITY_MESSAGE) from e

        logs.log(logging.INFO, f"Fetching weather for city '{query.city}'")
        data = await self.repo.fetch_current({"q": query.city})
        return self._parse(data)

    async def fetch_by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        try:
            query = CoordinatesQuery(lat=lat, lon=lon)
        except ValidationError as e:
            raise InvalidInput("Invalid coordinates. Latitude must be within -90..90 and longitude within -180..180.") from e

        logs.log(logging.INFO, f"Fetching weather at {query.lat}, {query.lon}")
        data = await self.repo.fetch_current({"lat": query.lat, "lon": query.lon})
        return self._parse(data)

    def _parse(self, data: dict) -> WeatherReport:
        # Values are trusted to be metric because units=metric is always requested
        try:
            return WeatherReport.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Malformed weather payload: {e.error_count()} error(s)") from e
