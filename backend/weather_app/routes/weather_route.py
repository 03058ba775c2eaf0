from fastapi import APIRouter, Depends, Query, Request
from typing import Callable, Optional

from weather_app.core.config import settings
from weather_app.models.display_model import SurfaceSnapshot
from weather_app.repos.location_repo import Geolocator, IpGeolocator
from weather_app.services.Client_service import WeatherClient
from weather_app.services.display_surface import MemorySurface
from weather_app.services.Weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])

GeolocatorFactory = Callable[[Optional[str]], Optional[Geolocator]]

# --- Dependency Injection ---
def get_weather_service() -> WeatherService:
    return WeatherService.from_settings()

def get_geolocator_factory() -> GeolocatorFactory:
    def factory(client_ip: Optional[str]) -> Optional[Geolocator]:
        if not settings.GEOLOCATION_ENABLED:
            return None
        return IpGeolocator.from_settings(client_ip)
    return factory

@router.get("/search", response_model=SurfaceSnapshot)
async def search_endpoint(
    city: str = Query("", description="Raw text from the search input"),
    service: WeatherService = Depends(get_weather_service)
):
    """
    Runs a search exactly as the form submit does. Failures are part of the
    snapshot (error_message), so the status code is always 200.
    """
    surface = MemorySurface(search_text=city)
    client = WeatherClient(service, surface)
    await client.on_search_submit()
    return surface.snapshot(client.state)

@router.get("/coordinates", response_model=SurfaceSnapshot)
async def coordinates_endpoint(
    lat: float = Query(...),
    lon: float = Query(...),
    service: WeatherService = Depends(get_weather_service)
):
    surface = MemorySurface()
    client = WeatherClient(service, surface)
    await client.show_coordinates(lat, lon)
    return surface.snapshot(client.state)

@router.get("/location", response_model=SurfaceSnapshot)
async def location_endpoint(
    request: Request,
    service: WeatherService = Depends(get_weather_service),
    geolocator_factory: GeolocatorFactory = Depends(get_geolocator_factory)
):
    """Best effort: an unknown position leaves the snapshot idle, never an error."""
    client_ip = request.client.host if request.client else None
    surface = MemorySurface()
    client = WeatherClient(service, surface, geolocator=geolocator_factory(client_ip))
    await client.load_current_location()
    return surface.snapshot(client.state)
