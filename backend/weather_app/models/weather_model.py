from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

# --- Queries ---
class CityQuery(BaseModel):
    city: str

    @field_validator("city")
    @classmethod
    def strip_city(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("City is required")
        return value

class CoordinatesQuery(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

# --- Provider body (OpenWeatherMap /data/2.5/weather) ---
# Every field is optional: a missing piece degrades the display, it never fails the fetch.
class SysInfo(BaseModel):
    country: Optional[str] = None

class MainInfo(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    temp: Optional[float] = None
    feels_like: Optional[float] = None
    humidity: Optional[float] = None  # Percentage

class Condition(BaseModel):
    description: Optional[str] = None
    icon: Optional[str] = None

class WindInfo(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    speed: Optional[float] = None  # m/s with units=metric

class WeatherReport(BaseModel):
    name: Optional[str] = None
    sys: Optional[SysInfo] = None
    main: Optional[MainInfo] = None
    weather: Optional[List[Condition]] = None
    wind: Optional[WindInfo] = None

    @property
    def condition(self) -> Optional[Condition]:
        """First weather condition, the only one the display uses."""
        if not self.weather:
            return None
        return self.weather[0]

    @property
    def location_label(self) -> str:
        if not self.name:
            return ""
        if self.sys and self.sys.country:
            return f"{self.name}, {self.sys.country}"
        return self.name
