"""YAML config loader and dotted-key access."""

import os
from pathlib import Path
from typing import Any

import yaml

from surfcast.config.defaults import DEFAULT_SPOTS
from surfcast.config.schema import SurfcastConfig


def load_config(path: str | Path | None = None) -> SurfcastConfig:
    """Load and validate config from a YAML file.

    A missing path yields the defaults. If no spots are specified, injects
    DEFAULT_SPOTS.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("spots"):
        raw["spots"] = [s.model_dump() for s in DEFAULT_SPOTS]

    return SurfcastConfig(**raw)


def get_config_value(config: SurfcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'stormglass.source'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def read_token(config: SurfcastConfig) -> str:
    """Return the StormGlass credential from the environment, or ''."""
    return os.environ.get(config.stormglass.token_env, "")
