#!/usr/bin/env python3
"""
Weather Lookup Frontend - Run Script
Starts the Streamlit page against the backend named by BACKEND_URL
(or --backend-url), after confirming that backend answers /health.
"""

import argparse
import os
import sys
import subprocess
from pathlib import Path

import requests

DEFAULT_BACKEND_URL = "http://localhost:8000"

def parse_args():
    parser = argparse.ArgumentParser(description="Run the Weather Lookup page")
    parser.add_argument(
        "--backend-url",
        default=os.environ.get("BACKEND_URL", DEFAULT_BACKEND_URL),
        help="Weather Lookup backend base URL (default: $BACKEND_URL or %(default)s)",
    )
    parser.add_argument("--port", type=int, default=8501, help="Streamlit port")
    parser.add_argument("--skip-health", action="store_true", help="Start even if the backend is down")
    return parser.parse_args()

def backend_status(backend_url):
    """Return the service name reported by /health, or None when unreachable"""
    try:
        response = requests.get(f"{backend_url}/health", timeout=2)
        response.raise_for_status()
        return response.json().get("service", "unknown")
    except (requests.exceptions.RequestException, ValueError):
        return None

def main():
    args = parse_args()
    backend_url = args.backend_url.rstrip("/")
    app_path = Path(__file__).resolve().parent / "app.py"

    print(f"🌤️  Weather Lookup page -> backend {backend_url}")

    if not args.skip_health:
        service = backend_status(backend_url)
        if service is None:
            print(f"❌ No healthy backend at {backend_url}.")
            print("   Start it with: cd backend && python run.py")
            print("   or rerun with --skip-health")
            sys.exit(1)
        print(f"✅ Backend '{service}' is up")

    # app.py reads BACKEND_URL from its environment
    env = {**os.environ, "BACKEND_URL": backend_url}
    print(f"📍 Page: http://localhost:{args.port}")

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit",
            "run", str(app_path),
            "--server.port", str(args.port)
        ], env=env, check=True)
    except KeyboardInterrupt:
        print("\n👋 Frontend server stopped.")
    except subprocess.CalledProcessError as e:
        print(f"\n❌ Error starting Streamlit: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
