import pytest
from fastapi.testclient import TestClient

from helpers import RecordingHandler, make_payload, make_service
from weather_app.core.errors import GeolocationError
from weather_app.main import app
from weather_app.models.weather_model import CoordinatesQuery
from weather_app.repos.location_repo import Geolocator
from weather_app.routes.weather_route import get_geolocator_factory, get_weather_service


class FixedGeolocator(Geolocator):
    def __init__(self, position=None, error=None):
        self.position = position
        self.error = error

    async def locate(self) -> CoordinatesQuery:
        if self.error:
            raise self.error
        return self.position


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def use_handler(handler: RecordingHandler):
    app.dependency_overrides[get_weather_service] = lambda: make_service(handler)


def use_geolocator(geolocator, seen_ips=None):
    def factory(client_ip):
        if seen_ips is not None:
            seen_ips.append(client_ip)
        return geolocator
    app.dependency_overrides[get_geolocator_factory] = lambda: factory


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root_lists_endpoints(client):
    body = client.get("/").json()

    assert "search" in body["endpoints"]
    assert body["status"] == "running"


def test_search_returns_rendered_snapshot(client):
    handler = RecordingHandler(json=make_payload())
    use_handler(handler)

    response = client.get("/weather/search", params={"city": "London"})

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "rendered"
    assert body["city"] == "London, GB"
    assert body["temperature"] == "22°C"
    assert body["icon_visible"] is True
    assert body["loading"] is False
    assert body["error_message"] is None
    assert body["search_input"] == "London"


def test_search_blank_city_is_prompted(client):
    handler = RecordingHandler(json=make_payload())
    use_handler(handler)

    body = client.get("/weather/search", params={"city": "  "}).json()

    assert body["state"] == "error"
    assert body["error_message"] == "Please enter a city name."
    assert handler.requests == []


def test_search_missing_city_param_is_prompted(client):
    use_handler(RecordingHandler(json=make_payload()))

    body = client.get("/weather/search").json()

    assert body["error_message"] == "Please enter a city name."


def test_search_not_found(client):
    use_handler(RecordingHandler(status_code=404, json={"cod": "404", "message": "city not found"}))

    response = client.get("/weather/search", params={"city": "Atlantis"})

    assert response.status_code == 200
    assert response.json()["error_message"] == "City not found. Try a different city name."


def test_coordinates_endpoint(client):
    handler = RecordingHandler(json=make_payload(name="Greenwich"))
    use_handler(handler)

    body = client.get("/weather/coordinates", params={"lat": 51.48, "lon": 0.0}).json()

    assert body["city"] == "Greenwich, GB"
    assert float(handler.requests[0].url.params["lat"]) == 51.48


def test_coordinates_out_of_range(client):
    use_handler(RecordingHandler(json=make_payload()))

    body = client.get("/weather/coordinates", params={"lat": 100, "lon": 0}).json()

    assert body["state"] == "error"
    assert body["error_message"].startswith("Invalid coordinates")


def test_location_renders_and_passes_caller_ip(client):
    use_handler(RecordingHandler(json=make_payload(name="Lyon", sys={"country": "FR"})))
    seen_ips = []
    use_geolocator(FixedGeolocator(CoordinatesQuery(lat=45.76, lon=4.83)), seen_ips)

    body = client.get("/weather/location").json()

    assert body["state"] == "rendered"
    assert body["city"] == "Lyon, FR"
    assert seen_ips == ["testclient"]


def test_location_failure_stays_idle(client):
    handler = RecordingHandler(json=make_payload())
    use_handler(handler)
    use_geolocator(FixedGeolocator(error=GeolocationError(GeolocationError.PERMISSION_DENIED)))

    body = client.get("/weather/location").json()

    assert body["state"] == "idle"
    assert body["error_message"] is None
    assert body["loading"] is False
    assert handler.requests == []


def test_location_disabled_stays_idle(client):
    handler = RecordingHandler(json=make_payload())
    use_handler(handler)
    use_geolocator(None)

    body = client.get("/weather/location").json()

    assert body["state"] == "idle"
    assert handler.requests == []
