from pydantic import BaseModel
from typing import Optional, List
from enum import Enum

class DisplayState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERROR = "error"

class WeatherView(BaseModel):
    """Text and image content projected from a WeatherReport"""
    city_text: str
    temperature_text: str
    description_text: str = ""
    icon_url: Optional[str] = None  # None hides the icon
    icon_alt: str = "weather icon"
    detail_lines: List[str] = []

class SurfaceSnapshot(BaseModel):
    """What the page should show after an action, returned by the API"""
    state: DisplayState
    loading: bool = False
    search_input: Optional[str] = None
    city: Optional[str] = None
    temperature: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    icon_alt: Optional[str] = None
    icon_visible: bool = False
    details: List[str] = []
    error_message: Optional[str] = None
    alert: Optional[str] = None
