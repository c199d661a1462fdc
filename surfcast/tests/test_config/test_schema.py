"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from surfcast.config.schema import SpotConfig, StormGlassConfig, SurfcastConfig


class TestSurfcastConfig:
    def test_defaults(self):
        config = SurfcastConfig()
        assert config.stormglass.base_url == "https://api.stormglass.io/v2"
        assert config.stormglass.source == "noaa"
        assert config.spots == []

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            SurfcastConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            StormGlassConfig(source="noaa", bogus=True)

    def test_spot_lookup(self):
        config = SurfcastConfig(
            spots=[SpotConfig(name="Manly", slug="manly", lat=-33.79, lng=151.28)]
        )
        assert config.spot("manly").name == "Manly"
        assert config.spot("missing") is None


class TestStormGlassConfig:
    def test_empty_source_rejected(self):
        with pytest.raises(ValidationError):
            StormGlassConfig(source="")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            StormGlassConfig(timeout_seconds=0)


class TestSpotConfig:
    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            SpotConfig(name="X", slug="x", lat=91.0, lng=0.0)

    def test_longitude_bounds(self):
        with pytest.raises(ValidationError):
            SpotConfig(name="X", slug="x", lat=0.0, lng=-180.5)
