"""CLI entry point for the surf forecast client."""

import argparse
import asyncio
import json
import logging
import os
import sys

from surfcast.config.loader import get_config_value, load_config, read_token
from surfcast.config.schema import SurfcastConfig
from surfcast.ingest.stormglass_client import StormGlassClient, StormGlassError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "ops/configs/default.yaml"
CONFIG_ENV = "SURFCAST_CONFIG"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="surfcast",
        description="StormGlass marine forecast client",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Config YAML path (default: ${CONFIG_ENV} or {DEFAULT_CONFIG})",
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch normalized forecast points")
    fetch_p.add_argument("--spot", help="Configured spot slug")
    fetch_p.add_argument("--lat", type=float, help="Latitude")
    fetch_p.add_argument("--lng", type=float, help="Longitude")

    # spots
    sub.add_parser("spots", help="List configured spots")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. stormglass.source")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(_config_path(args.config))

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "spots":
        return _cmd_spots(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _config_path(arg: str | None) -> str | None:
    """--config, then $SURFCAST_CONFIG, then the repo default if present."""
    if arg:
        return arg
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return env_path
    if os.path.exists(DEFAULT_CONFIG):
        return DEFAULT_CONFIG
    return None


def _cmd_fetch(config: SurfcastConfig, args) -> int:
    if args.spot:
        spot = config.spot(args.spot)
        if spot is None:
            print(f"Error: unknown spot '{args.spot}'", file=sys.stderr)
            return 1
        lat, lng = spot.lat, spot.lng
    elif args.lat is not None and args.lng is not None:
        lat, lng = args.lat, args.lng
    else:
        print("Error: use --spot or both --lat and --lng", file=sys.stderr)
        return 1

    if not read_token(config):
        logger.warning(
            "%s not set, sending empty Authorization header",
            config.stormglass.token_env,
        )

    client = StormGlassClient.from_config(config.stormglass)
    try:
        points = asyncio.run(client.fetch_points(lat, lng))
    except StormGlassError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(json.dumps([p.to_dict() for p in points], indent=2))
    return 0


def _cmd_spots(config: SurfcastConfig) -> int:
    for s in config.spots:
        print(f"{s.slug}: {s.name} ({s.lat}, {s.lng})")
    return 0


def _cmd_config(config: SurfcastConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError):
            print(f"Error: config key not found: {args.key}", file=sys.stderr)
            return 1
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Error: use 'config show' or 'config get KEY'", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
