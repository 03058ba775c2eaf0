from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shipped defaults (here and in .env.example); the provider answers 401 to all of them
PLACEHOLDER_API_KEYS = {"", "your-key-here", "your_api_key_here"}

class Settings(BaseSettings):
    # OpenWeatherMap Configuration
    OPENWEATHER_API_KEY: str = "your-key-here"
    OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org"
    OPENWEATHER_ICON_URL: str = "https://openweathermap.org"
    OPENWEATHER_UNITS: str = "metric"

    # Seconds; None disables the timeout entirely
    REQUEST_TIMEOUT: Optional[float] = 10.0

    # Geolocation (IP based, replaces the browser geolocation API)
    GEOLOCATION_ENABLED: bool = True
    GEOLOCATION_URL: str = "http://ip-api.com/json"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    @property
    def api_key_configured(self) -> bool:
        return self.OPENWEATHER_API_KEY.strip() not in PLACEHOLDER_API_KEYS

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
