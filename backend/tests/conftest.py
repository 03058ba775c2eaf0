import os
import tempfile

# Settings and the logger are built at import time, so point them somewhere harmless first
os.environ.setdefault("LOG_DIRECTORY", os.path.join(tempfile.gettempdir(), "weather-lookup-test-logs"))
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")

import pytest

from helpers import RecordingHandler, make_payload


@pytest.fixture
def payload():
    return make_payload()


@pytest.fixture
def ok_handler(payload):
    return RecordingHandler(json=payload)
