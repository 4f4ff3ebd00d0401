"""
Pytest configuration for all tests.
Sets up environment variables and fixtures used across test modules.
"""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest


# Set environment variable BEFORE any other imports
# This must happen at module import time to affect config.py initialization
os.environ['TESTING'] = 'true'

REPO_ROOT = Path(__file__).resolve().parent.parent

VALID_HCL = """
scope {
  start    = "2024-01-01 00:00:00 +0000"
  end      = "2024-01-31 23:59:59 +0000"
  affected = "Example Corp customers"
}

breach {
  defaced_malware = false
  address         = true
  name            = true
  gender          = false
  birthday        = false
  tel             = false
  card            = false
  securitycode    = false
  token           = false
}

web {
  endpoint = "/sorry"
}
"""


@pytest.fixture
def write_hcl(tmp_path):
    """Write HCL text to a temporary settings file and return its path."""
    def _write(text=VALID_HCL, name="setting.hcl"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def incident_config():
    """Scenario A incident: January 2024, address and name exposed."""
    from models import BreachCategories, IncidentConfiguration, IncidentWindow, WebSettings

    return IncidentConfiguration(
        window=IncidentWindow(
            start=datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
            end=datetime(2024, 1, 31, 23, 59, 59, tzinfo=timezone.utc),
        ),
        affected="Example Corp customers",
        breach=BreachCategories(address=True, name=True),
        web=WebSettings(endpoint="/sorry"),
    )


@pytest.fixture
def settings():
    """Testing settings pointing at the repository templates and assets."""
    from config import AppConfig

    return AppConfig(
        testing=True,
        https_enabled=False,
        templates_dir=str(REPO_ROOT / "templates"),
        assets_dir=str(REPO_ROOT / "assets"),
        display_timezone="UTC",
    )


@pytest.fixture
def frozen_clock():
    """Clock returning a settable instant; defaults to mid-January 2024."""
    class FrozenClock:
        def __init__(self):
            self.now = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
            self.calls = 0

        def __call__(self):
            self.calls += 1
            return self.now

    return FrozenClock()
