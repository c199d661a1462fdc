"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class FakeTransport:
    """In-memory ForecastTransport: returns `body` or raises `error`."""

    def __init__(self, body: Any = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: list[tuple[str, dict, dict]] = []

    async def get_json(self, url: str, params: dict, headers: dict) -> Any:
        self.calls.append((url, params, headers))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def stormglass_3_hours() -> dict:
    """Three hours of StormGlass data; the last one has no noaa windSpeed."""
    with open(FIXTURE_DIR / "stormglass_weather_3_hours.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "stormglass": {"source": "noaa", "timeout_seconds": 5.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def no_token(monkeypatch):
    """Tests start without a StormGlass credential in the environment."""
    monkeypatch.delenv("STORMGLASSTOKEN", raising=False)


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch, tmp_path):
    """CLI default config resolution starts from an empty working directory."""
    monkeypatch.delenv("SURFCAST_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
