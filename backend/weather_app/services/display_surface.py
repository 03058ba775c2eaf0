"""
Display surface handed to the WeatherClient.
Each slot is an optional handle; an absent slot is simply skipped, so a
page that only has some of the elements still works.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from weather_app.models.display_model import DisplayState, SurfaceSnapshot


class TextSlot(ABC):
    @abstractmethod
    def set_text(self, text: str) -> None:
        pass


class ImageSlot(ABC):
    @abstractmethod
    def show(self, src: str, alt: str) -> None:
        pass

    @abstractmethod
    def hide(self) -> None:
        pass


class DetailsSlot(ABC):
    @abstractmethod
    def set_lines(self, lines: List[str]) -> None:
        pass


class IndicatorSlot(ABC):
    @abstractmethod
    def set_visible(self, visible: bool) -> None:
        pass


class InputSlot(ABC):
    @abstractmethod
    def get_value(self) -> str:
        pass


@dataclass
class DisplaySurface:
    search_input: Optional[InputSlot] = None
    city: Optional[TextSlot] = None
    temperature: Optional[TextSlot] = None
    description: Optional[TextSlot] = None
    icon: Optional[ImageSlot] = None
    details: Optional[DetailsSlot] = None
    error: Optional[TextSlot] = None
    loader: Optional[IndicatorSlot] = None
    alert: Optional[Callable[[str], None]] = None


# --- In-memory slots ---

class MemoryText(TextSlot):
    def __init__(self):
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text


class MemoryImage(ImageSlot):
    def __init__(self):
        self.src: Optional[str] = None
        self.alt: Optional[str] = None
        self.visible = False

    def show(self, src: str, alt: str) -> None:
        self.src = src
        self.alt = alt
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class MemoryDetails(DetailsSlot):
    def __init__(self):
        self.lines: List[str] = []

    def set_lines(self, lines: List[str]) -> None:
        self.lines = list(lines)


class MemoryIndicator(IndicatorSlot):
    def __init__(self):
        self.visible = False

    def set_visible(self, visible: bool) -> None:
        self.visible = visible


class MemoryInput(InputSlot):
    def __init__(self, value: str = ""):
        self.value = value

    def get_value(self) -> str:
        return self.value


SLOT_NAMES = ("search_input", "city", "temperature", "description", "icon", "details", "error", "loader")


class MemorySurface(DisplaySurface):
    """
    Surface that keeps everything in memory. The backend renders into one of
    these per request and returns its snapshot; tests use it as the fake page.
    `omit` drops slots by name, `alert` can be disabled with with_alert=False.
    """

    def __init__(self, search_text: str = "", omit: Iterable[str] = (), with_alert: bool = True):
        self.alerts: List[str] = []
        slots = {
            "search_input": MemoryInput(search_text),
            "city": MemoryText(),
            "temperature": MemoryText(),
            "description": MemoryText(),
            "icon": MemoryImage(),
            "details": MemoryDetails(),
            "error": MemoryText(),
            "loader": MemoryIndicator(),
        }
        for name in omit:
            slots[name] = None
        super().__init__(alert=self.alerts.append if with_alert else None, **slots)

    def snapshot(self, state: DisplayState) -> SurfaceSnapshot:
        return SurfaceSnapshot(
            state=state,
            loading=self.loader.visible if self.loader else False,
            search_input=self.search_input.value if self.search_input else None,
            city=self.city.text if self.city else None,
            temperature=self.temperature.text if self.temperature else None,
            description=self.description.text if self.description else None,
            icon_url=self.icon.src if self.icon and self.icon.visible else None,
            icon_alt=self.icon.alt if self.icon and self.icon.visible else None,
            icon_visible=self.icon.visible if self.icon else False,
            details=self.details.lines if self.details else [],
            error_message=(self.error.text or None) if self.error else None,
            alert=self.alerts[-1] if self.alerts else None,
        )
