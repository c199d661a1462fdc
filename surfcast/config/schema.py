"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class SpotConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class StormGlassConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.stormglass.io/v2"
    source: str = Field(default="noaa", min_length=1)
    token_env: str = Field(default="STORMGLASSTOKEN", min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    # Zero-valued readings are treated as missing unless disabled.
    drop_zero_readings: bool = True


class SurfcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    stormglass: StormGlassConfig = StormGlassConfig()
    spots: list[SpotConfig] = []

    def spot(self, slug: str) -> SpotConfig | None:
        for s in self.spots:
            if s.slug == slug:
                return s
        return None
