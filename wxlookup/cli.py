"""CLI entry point for weather lookups."""

import argparse
import asyncio
import logging

import httpx
from pydantic import ValidationError

from wxlookup.config.loader import get_config_value, load_config
from wxlookup.config.schema import AppConfig
from wxlookup.models.common import UnitSystem
from wxlookup.pipeline.resolution import PipelineState
from wxlookup.pipeline.session import WeatherSession
from wxlookup.reporting.formatters import (
    format_suggestions,
    format_view_json,
    format_view_text,
)

DEFAULT_CONFIG = "wxlookup.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wxlookup",
        description="Current weather and 5-day forecast for any place",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--units", choices=[u.value for u in UnitSystem], help="Display units"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the weather view as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    weather_p = sub.add_parser(
        "weather", help='Weather for a place name, postal code or "lat, lon"'
    )
    weather_p.add_argument("query", nargs="+")

    sub.add_parser("here", help="Weather at the configured device location")

    suggest_p = sub.add_parser("suggest", help="List matching places")
    suggest_p.add_argument("text", nargs="+")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. ui.units")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: invalid config {args.config}:\n{e}")
        return 1
    if args.units:
        config = config.model_copy(
            update={"ui": config.ui.model_copy(update={"units": UnitSystem(args.units)})}
        )

    if args.command == "weather":
        return asyncio.run(_cmd_weather(config, args))
    elif args.command == "here":
        return asyncio.run(_cmd_here(config, args))
    elif args.command == "suggest":
        return asyncio.run(_cmd_suggest(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _http_client(config: AppConfig) -> httpx.AsyncClient:
    if config.http.timeout_s is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=config.http.timeout_s)


async def _cmd_weather(config: AppConfig, args) -> int:
    query = " ".join(args.query)
    if not query.strip():
        print("Error: enter a location")
        return 1
    async with _http_client(config) as client:
        session = WeatherSession.from_config(config, client)
        await session.submit(query)
        return _print_outcome(session, args)


async def _cmd_here(config: AppConfig, args) -> int:
    async with _http_client(config) as client:
        session = WeatherSession.from_config(config, client)
        await session.use_my_location()
        return _print_outcome(session, args)


async def _cmd_suggest(config: AppConfig, args) -> int:
    async with _http_client(config) as client:
        session = WeatherSession.from_config(config, client)
        session.edit_query(" ".join(args.text))
        await session.autosuggest.wait()
        suggestions = session.snapshot().suggestions
    if not suggestions:
        print("No suggestions")
        return 1
    print(format_suggestions(suggestions))
    return 0


def _print_outcome(session: WeatherSession, args) -> int:
    snap = session.snapshot()
    if snap.state == PipelineState.FAILED or snap.view is None:
        print(f"Error: {snap.error_message or 'Something went wrong'}")
        return 1
    if args.json:
        print(format_view_json(snap.view))
    else:
        print(format_view_text(snap.view, snap.units))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1
