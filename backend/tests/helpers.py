import httpx

from weather_app.repos.weather_repo import OpenWeatherRepository
from weather_app.services.Weather_service import WeatherService

BASE_URL = "https://owm.test"
WEATHER_URL = f"{BASE_URL}/data/2.5/weather"


def make_payload(**overrides) -> dict:
    payload = {
        "name": "London",
        "sys": {"country": "GB"},
        "main": {"temp": 21.7, "feels_like": 20.2, "humidity": 64},
        "weather": [{"description": "light rain", "icon": "10d"}],
        "wind": {"speed": 4.1},
    }
    payload.update(overrides)
    return payload


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, json=None, text=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated {self.exc.__name__}", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)


def make_service(handler: RecordingHandler) -> WeatherService:
    repo = OpenWeatherRepository(
        api_key="test-key",
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )
    return WeatherService(repo)
