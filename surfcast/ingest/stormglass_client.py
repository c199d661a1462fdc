"""StormGlass point forecast client: fetch, validate and normalize hourly samples."""

import json
import logging
import os
from enum import StrEnum
from typing import Any

import httpx

from surfcast.config.schema import StormGlassConfig
from surfcast.ingest.transport import ForecastTransport, HttpxTransport
from surfcast.models.forecast import FORECAST_PARAMS, ForecastPoint, RawPoint

logger = logging.getLogger(__name__)

STORMGLASS_BASE_URL = "https://api.stormglass.io/v2"
STORMGLASS_SOURCE = "noaa"
TOKEN_ENV = "STORMGLASSTOKEN"


class StormGlassErrorKind(StrEnum):
    RESPONSE = "response"  # service answered with a non-success status
    REQUEST = "request"  # anything else during the request


class StormGlassError(Exception):
    """Raised for every failed fetch. `kind` tells the two failure modes apart."""

    _PREFIXES = {
        StormGlassErrorKind.RESPONSE: "Unexpected error returned by the StormGlass service",
        StormGlassErrorKind.REQUEST: "Unexpected error when trying to communicate to StormGlass",
    }

    def __init__(
        self,
        kind: StormGlassErrorKind,
        message: str,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.detail = message
        self.message = f"{self._PREFIXES[kind]}: {message}"
        self.status_code = status_code
        super().__init__(self.message)

    def __reduce__(self):
        return (self.__class__, (self.kind, self.detail, self.status_code))

    @classmethod
    def response(cls, body: str, status_code: int) -> "StormGlassError":
        return cls(
            StormGlassErrorKind.RESPONSE,
            f"Error: {body} Code: {status_code}",
            status_code,
        )

    @classmethod
    def request(cls, message: str) -> "StormGlassError":
        return cls(StormGlassErrorKind.REQUEST, message)


class StormGlassClient:
    def __init__(
        self,
        transport: ForecastTransport | None = None,
        base_url: str = STORMGLASS_BASE_URL,
        source: str = STORMGLASS_SOURCE,
        token_env: str = TOKEN_ENV,
        drop_zero_readings: bool = True,
    ):
        self.transport = transport or HttpxTransport()
        self.base_url = base_url
        self.source = source
        self.token_env = token_env
        self.drop_zero_readings = drop_zero_readings
        self.params = ",".join(FORECAST_PARAMS)

    @classmethod
    def from_config(
        cls, config: StormGlassConfig, transport: ForecastTransport | None = None
    ) -> "StormGlassClient":
        return cls(
            transport=transport or HttpxTransport(timeout=config.timeout_seconds),
            base_url=config.base_url,
            source=config.source,
            token_env=config.token_env,
            drop_zero_readings=config.drop_zero_readings,
        )

    async def fetch_points(self, lat: float, lng: float) -> list[ForecastPoint]:
        """Fetch hourly points for a coordinate pair.

        Returns only hours where every quantity is reported by `self.source`.
        Raises StormGlassError on any failure; nothing is retried.
        """
        url = f"{self.base_url}/weather/point"
        params = {
            "lat": lat,
            "lng": lng,
            "params": self.params,
            "source": self.source,
        }
        headers = {"Authorization": os.environ.get(self.token_env, "")}
        try:
            body = await self.transport.get_json(url, params, headers)
            return self.normalize_response(body)
        except Exception as e:
            resp = getattr(e, "response", None)
            status_code = _status_code(e, resp)
            if status_code is not None:
                body = _serialize_body(resp) if resp is not None else str(e)
                logger.error(
                    "StormGlass %d for lat=%s lng=%s: %s", status_code, lat, lng, body
                )
                raise StormGlassError.response(body, status_code) from e
            logger.error("StormGlass request failed for lat=%s lng=%s: %s", lat, lng, e)
            raise StormGlassError.request(str(e)) from e

    def normalize_response(self, body: dict[str, Any]) -> list[ForecastPoint]:
        hours: list[RawPoint] = body.get("hours") or []
        points = [
            ForecastPoint(
                time=p["time"],
                wave_height=p["waveHeight"][self.source],
                wave_direction=p["waveDirection"][self.source],
                swell_direction=p["swellDirection"][self.source],
                swell_height=p["swellHeight"][self.source],
                swell_period=p["swellPeriod"][self.source],
                wind_direction=p["windDirection"][self.source],
                wind_speed=p["windSpeed"][self.source],
            )
            for p in hours
            if self.is_valid_point(p)
        ]
        if len(points) < len(hours):
            logger.info(
                "Dropped %d of %d hours missing %s readings",
                len(hours) - len(points), len(hours), self.source,
            )
        return points

    def is_valid_point(self, point: RawPoint) -> bool:
        if not point.get("time"):
            return False
        for name in FORECAST_PARAMS:
            value = (point.get(name) or {}).get(self.source)
            if self.drop_zero_readings:
                # Zero readings count as missing, matching the upstream filter.
                if not value:
                    return False
            elif value is None:
                return False
        return True


def _status_code(err: Exception, resp: Any) -> int | None:
    """Status carried by a transport error, on its response or on the error itself."""
    if resp is not None:
        status = getattr(resp, "status_code", None) or getattr(resp, "status", None)
    else:
        status = getattr(err, "status_code", None)
    return status if isinstance(status, int) and status else None


def _serialize_body(resp: Any) -> str:
    if isinstance(resp, httpx.Response):
        try:
            return json.dumps(resp.json(), separators=(",", ":"))
        except ValueError:
            return resp.text
    data = getattr(resp, "data", None)
    if data is None:
        data = getattr(resp, "text", "")
    if isinstance(data, str):
        return data
    return json.dumps(data, separators=(",", ":"))
