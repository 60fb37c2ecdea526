"""CLI entry point for the weather lookup widget."""

import argparse
import asyncio
import logging

from tenki.config.loader import (
    ConfigError,
    get_config_value,
    load_config,
    set_config_value,
)
from tenki.config.schema import ProviderKind
from tenki.ingest.factory import build_provider
from tenki.presentation.formatters import (
    format_catalog_text,
    format_state_json,
    format_weather_text,
)
from tenki.session.controller import FetchController

DEFAULT_CONFIG = "ops/configs/default.yaml"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8777


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tenki",
        description="Current weather for major Japanese cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--simulate", action="store_true", help="Force the simulated provider"
    )

    sub = parser.add_subparsers(dest="command")

    # cities
    sub.add_parser("cities", help="List selectable cities")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch current weather for a city")
    fetch_p.add_argument("city_id", help="City id, e.g. tokyo")
    fetch_p.add_argument("--json", action="store_true", help="Print session state as JSON")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Validate and show a config change")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the widget dashboard")
    serve_p.add_argument("--host", default=DEFAULT_HOST)
    serve_p.add_argument("--port", type=int, default=DEFAULT_PORT)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    if args.simulate:
        config = config.model_copy(
            update={
                "provider": config.provider.model_copy(
                    update={"kind": ProviderKind.SIMULATED}
                )
            }
        )

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "cities":
        return _cmd_cities()
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_cities() -> int:
    print(format_catalog_text())
    return 0


def _cmd_fetch(config, args) -> int:
    try:
        provider = build_provider(config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    # One-shot command: always select then fetch explicitly.
    controller = FetchController(provider, auto_fetch=False, clear_on_select=True)

    async def run() -> None:
        controller.select_city(args.city_id)
        await controller.fetch_weather()

    asyncio.run(run())
    state = controller.state

    if args.json:
        print(format_state_json(state))
    elif state.error_message is not None:
        print(f"Error: {state.error_message}")
    elif state.current_weather is not None:
        print(format_weather_text(state.current_weather))
    return 0 if state.error_message is None and state.current_weather is not None else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from tenki.dashboard import create_app

    try:
        app = create_app(config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    uvicorn.run(app, host=args.host, port=args.port)
    return 0
