"""
Pure projection from a WeatherReport onto display text.
Nothing here touches the surface, so the same view can be painted twice
with identical results.
"""
import math
from typing import Optional
from weather_app.models.display_model import WeatherView
from weather_app.models.weather_model import WeatherReport

DEFAULT_ICON_HOST = "https://openweathermap.org"


def is_shown(value: Optional[float]) -> bool:
    """Absent and non-finite readings are left off the display."""
    return value is not None and math.isfinite(value)


def format_temperature(value: float) -> str:
    if not is_shown(value):
        return "--"
    # Half-up, like Math.round: 21.5 -> 22, -2.5 -> -2
    return f"{math.floor(value + 0.5)}°C"


def format_number(value: float) -> str:
    """3.0 -> '3', 3.5 -> '3.5'"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def icon_url(code: str, host: str = DEFAULT_ICON_HOST) -> str:
    return f"{host.rstrip('/')}/img/wn/{code}@2x.png"


def capitalize_first(text: Optional[str]) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def build_view(report: WeatherReport, icon_host: str = DEFAULT_ICON_HOST) -> WeatherView:
    main = report.main
    condition = report.condition
    description = condition.description if condition else None
    icon_code = condition.icon if condition else None

    detail_lines = []
    if main and is_shown(main.feels_like):
        detail_lines.append(f"Feels like: {format_temperature(main.feels_like)}")
    if main and is_shown(main.humidity):
        detail_lines.append(f"Humidity: {format_number(main.humidity)}%")
    if report.wind and is_shown(report.wind.speed):
        detail_lines.append(f"Wind: {format_number(report.wind.speed)} m/s")

    return WeatherView(
        city_text=report.location_label or "Unknown location",
        temperature_text=format_temperature(main.temp) if main else "--",
        description_text=capitalize_first(description),
        icon_url=icon_url(icon_code, icon_host) if icon_code else None,
        icon_alt=description or "weather icon",
        detail_lines=detail_lines,
    )
