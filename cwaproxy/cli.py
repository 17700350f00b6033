"""CLI entry point for the CWA weather proxy."""

import argparse
import json
import logging

from pydantic import BaseModel

from cwaproxy.config.defaults import CITY_ALIASES
from cwaproxy.config.loader import (
    DEFAULT_CONFIG,
    get_config_value,
    load_config,
    masked_config_json,
)
from cwaproxy.handler import ForecastRequestHandler
from cwaproxy.models.errors import ForecastError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cwaproxy",
        description="CWA 36-hour forecast proxy",
    )
    parser.add_argument(
        "--config", help=f"Config YAML path (default: {DEFAULT_CONFIG})"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", help="Override server.host")
    serve_p.add_argument("--port", type=int, help="Override server.port")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch one city's forecast")
    fetch_p.add_argument("city", help="City token, e.g. taipei")

    # cities
    sub.add_parser("cities", help="List supported city tokens")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Read one config value")
    get_p.add_argument("key", help="Dotted key, e.g. cwa.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "cities":
        return _cmd_cities()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from cwaproxy.api import create_app

    if not config.cwa.api_key:
        logger.warning("CWA_API_KEY not set; /weather requests will fail with 500")
    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_fetch(config, args) -> int:
    handler = ForecastRequestHandler(config)
    try:
        result = handler.handle(args.city)
    except ForecastError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2))
        return 1
    print(json.dumps(
        {"success": True, "data": result.to_dict()},
        ensure_ascii=False, indent=2,
    ))
    return 0


def _cmd_cities() -> int:
    for token, name in CITY_ALIASES.items():
        print(f"{token:<15} {name}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, AttributeError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, BaseModel):
            data = json.loads(value.model_dump_json())
            if data.get("api_key"):
                data["api_key"] = "****"
            value = json.dumps(data, indent=2, ensure_ascii=False)
        elif args.key == "cwa.api_key" and value:
            value = "****"
        print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
