"""StormGlass forecast data models."""

from dataclasses import dataclass
from typing import TypeAlias, TypedDict

# Source name -> value. One quantity may be reported by several models.
PointSource: TypeAlias = dict[str, float]

FORECAST_PARAMS: tuple[str, ...] = (
    "swellDirection",
    "swellHeight",
    "swellPeriod",
    "waveDirection",
    "waveHeight",
    "windDirection",
    "windSpeed",
)


class RawPoint(TypedDict, total=False):
    time: str
    waveHeight: PointSource
    waveDirection: PointSource
    swellDirection: PointSource
    swellHeight: PointSource
    swellPeriod: PointSource
    windDirection: PointSource
    windSpeed: PointSource


class ForecastResponse(TypedDict, total=False):
    hours: list[RawPoint]


@dataclass(frozen=True)
class ForecastPoint:
    time: str  # ISO-8601, copied verbatim
    wave_height: float
    wave_direction: float
    swell_direction: float
    swell_height: float
    swell_period: float
    wind_direction: float
    wind_speed: float

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "waveHeight": self.wave_height,
            "waveDirection": self.wave_direction,
            "swellDirection": self.swell_direction,
            "swellHeight": self.swell_height,
            "swellPeriod": self.swell_period,
            "windDirection": self.wind_direction,
            "windSpeed": self.wind_speed,
        }
