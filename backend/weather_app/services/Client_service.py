"""
WeatherClient: the request/render flow behind the search form and the
"use my location" action.

Concurrency model (single event loop, suspension at each network call):
- The loading indicator follows an in-flight counter: visible while any
  fetch is outstanding, hidden when the last one completes.
- Every action takes a ticket. Only the completion holding the newest
  ticket may write to the surface; older completions are logged and
  dropped. The superseded HTTP request itself still runs to completion.
"""
import logging
from typing import Awaitable, Optional
from weather_app.core.config import settings
from weather_app.core.errors import GeolocationError, InvalidInput, ProviderError, WeatherError
from weather_app.core.logger import logs
from weather_app.models.display_model import DisplayState
from weather_app.models.weather_model import WeatherReport
from weather_app.repos.location_repo import Geolocator
from weather_app.services.Display_service import build_view
from weather_app.services.display_surface import DisplaySurface
from weather_app.services.Weather_service import EMPTY_CITY_MESSAGE, WeatherService

CITY_NOT_FOUND_MESSAGE = "City not found. Try a different city name."
INVALID_API_KEY_MESSAGE = "Invalid API key. Set OPENWEATHER_API_KEY to a valid OpenWeatherMap key."
GENERIC_ERROR_MESSAGE = "Could not fetch weather. Check your network connection or the logs for details."


def message_for(error: WeatherError) -> str:
    """Map a fetch failure to the text shown to the user."""
    if isinstance(error, InvalidInput):
        return str(error)
    if isinstance(error, ProviderError):
        if error.status == 404:
            return CITY_NOT_FOUND_MESSAGE
        if error.status == 401:
            return INVALID_API_KEY_MESSAGE
    return GENERIC_ERROR_MESSAGE


class WeatherClient:
    def __init__(
        self,
        service: WeatherService,
        surface: DisplaySurface,
        geolocator: Optional[Geolocator] = None,
        icon_host: str = settings.OPENWEATHER_ICON_URL,
    ):
        self.service = service
        self.surface = surface
        self.geolocator = geolocator
        self.icon_host = icon_host
        self._settled = DisplayState.IDLE
        self._in_flight = 0
        self._ticket = 0

    @property
    def state(self) -> DisplayState:
        if self._in_flight > 0:
            return DisplayState.LOADING
        return self._settled

    @property
    def in_flight(self) -> int:
        return self._in_flight

    # ===== Surface writes =====

    def render(self, report: WeatherReport) -> None:
        view = build_view(report, self.icon_host)
        s = self.surface

        if s.error:
            s.error.set_text("")
        if s.city:
            s.city.set_text(view.city_text)
        if s.temperature:
            s.temperature.set_text(view.temperature_text)
        if s.description:
            s.description.set_text(view.description_text)
        if s.details:
            s.details.set_lines(view.detail_lines)
        if s.icon:
            if view.icon_url:
                s.icon.show(view.icon_url, view.icon_alt)
            else:
                # Hide rather than leave the previous city's icon on screen
                s.icon.hide()

        self._settled = DisplayState.RENDERED

    def report_error(self, message: str) -> None:
        if self.surface.error:
            self.surface.error.set_text(message)
        elif self.surface.alert:
            self.surface.alert(message)
        else:
            logs.log(logging.WARNING, f"No error surface available: {message}")
        self._settled = DisplayState.ERROR

    # ===== Actions =====

    async def on_search_submit(self, raw_input: Optional[str] = None) -> None:
        if raw_input is None:
            raw_input = self.surface.search_input.get_value() if self.surface.search_input else ""

        if not raw_input.strip():
            self._ticket += 1
            self.report_error(EMPTY_CITY_MESSAGE)
            return

        await self._fetch_and_render(self.service.fetch_by_city(raw_input))

    async def show_coordinates(self, lat: float, lon: float) -> None:
        """Explicit coordinate query; failures are surfaced like a search."""
        await self._fetch_and_render(self.service.fetch_by_coordinates(lat, lon))

    async def load_current_location(self) -> None:
        if self.geolocator is None:
            return

        ticket = self._begin()
        try:
            try:
                position = await self.geolocator.locate()
            except GeolocationError as e:
                logs.log(logging.WARNING, f"Geolocation error ({e.reason}): {e}")
                return

            try:
                report = await self.service.fetch_by_coordinates(position.lat, position.lon)
            except WeatherError as e:
                logs.log(logging.ERROR, f"Geolocation fetch error: {e!r}")
                return

            if self._is_current(ticket, "location"):
                self.render(report)
        finally:
            self._finish()

    # ===== Helpers =====

    async def _fetch_and_render(self, fetch: Awaitable[WeatherReport]) -> None:
        ticket = self._begin()
        try:
            try:
                report = await fetch
            except WeatherError as e:
                message = message_for(e)
                if message == GENERIC_ERROR_MESSAGE:
                    logs.log(logging.ERROR, f"Weather fetch failed: {e!r}")
                else:
                    logs.log(logging.WARNING, f"Weather fetch rejected: {e}")
                if self._is_current(ticket, "error"):
                    self.report_error(message)
                return

            if self._is_current(ticket, "render"):
                self.render(report)
        finally:
            self._finish()

    def _begin(self) -> int:
        self._ticket += 1
        self._in_flight += 1
        if self.surface.loader:
            self.surface.loader.set_visible(True)
        return self._ticket

    def _finish(self) -> None:
        self._in_flight -= 1
        if self.surface.loader:
            self.surface.loader.set_visible(self._in_flight > 0)

    def _is_current(self, ticket: int, outcome: str) -> bool:
        if ticket == self._ticket:
            return True
        logs.log(logging.WARNING, f"Discarding superseded {outcome} (ticket {ticket}, latest {self._ticket})")
        return False
