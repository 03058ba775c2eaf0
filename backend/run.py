#!/usr/bin/env python3
"""
Weather Lookup Backend - Run Script
Checks the environment and the OpenWeatherMap key, then starts uvicorn.
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def fail(message, *hints):
    print_colored(f"❌ {message}", "red")
    for hint in hints:
        print(f"  {hint}")
    sys.exit(1)

def load_settings():
    """Read configuration exactly as the server will (environment, .env, ../.env)."""
    from pydantic import ValidationError
    from weather_app.core.config import Settings

    try:
        return Settings()
    except ValidationError as e:
        fail(f"Invalid configuration: {e.error_count()} error(s)", str(e))

def main():
    print_colored("🌤️  Starting Weather Lookup Backend...", "blue")

    if not Path("weather_app/main.py").exists():
        fail("weather_app/main.py not found.", "Run this script from the backend directory.")

    if not os.environ.get("VIRTUAL_ENV"):
        fail(
            "Virtual environment not activated.",
            "source venv/bin/activate  # On macOS/Linux",
            "venv\\Scripts\\activate     # On Windows",
        )

    try:
        import fastapi
        import uvicorn
        import pydantic_settings
    except ImportError as e:
        fail(f"Missing dependency: {e.name}", "pip install -e ..")

    config = load_settings()
    if not config.api_key_configured:
        fail(
            "OPENWEATHER_API_KEY is not configured.",
            "Add it to .env in the project root (see .env.example):",
            "OPENWEATHER_API_KEY=<your OpenWeatherMap key>",
        )

    print_colored("✅ Configuration OK", "green")
    print(f"📍 Provider:    {config.OPENWEATHER_BASE_URL} (units={config.OPENWEATHER_UNITS})")
    print(f"📍 Geolocation: {'on' if config.GEOLOCATION_ENABLED else 'off'}")
    print(f"📍 Timeout:     {config.REQUEST_TIMEOUT}s")
    print("📍 API docs:    http://localhost:8000/docs")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "weather_app.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8000"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        fail(f"Error starting server: {e}")

if __name__ == "__main__":
    main()
