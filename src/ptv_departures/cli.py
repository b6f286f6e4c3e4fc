"""CLI for querying the PTV Timetable API."""

import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from ptv_departures.adapters.config import AppConfig
from ptv_departures.adapters.ptv_api import AiohttpTransport, PtvProvider
from ptv_departures.domain.errors import PtvError
from ptv_departures.domain.models import (
    Departure,
    HealthStatus,
    Location,
    Point,
    StationDepartures,
)

logger = logging.getLogger(__name__)


def location_to_dict(location: Location) -> dict[str, Any]:
    """Convert a location to a JSON-serializable dict."""
    return {
        "id": location.id,
        "name": location.name,
        "place": location.place,
        "latitude": location.lat / 1e6 if location.lat is not None else None,
        "longitude": location.lon / 1e6 if location.lon is not None else None,
        "products": sorted(product.value for product in location.products),
    }


def departure_to_dict(departure: Departure) -> dict[str, Any]:
    """Convert a departure to a JSON-serializable dict."""
    return {
        "planned_time": departure.planned_time.isoformat(),
        "predicted_time": (
            departure.predicted_time.isoformat() if departure.predicted_time else None
        ),
        "line": departure.line.label,
        "product": departure.line.product.value,
        "destination": departure.destination.name,
    }


def _format_location(location: Location) -> str:
    place = f" ({location.place})" if location.place else ""
    return f"  {location.name}{place}\n    ID: {location.id}"


def _format_departure(departure: Departure) -> str:
    time_str = departure.time.strftime("%H:%M")
    marker = "*" if departure.is_realtime else " "
    return f"  {time_str}{marker} {departure.line.label} -> {departure.destination.name}"


def _print_locations(locations: list[Location], as_json: bool, empty_message: str) -> None:
    if as_json:
        print(json.dumps([location_to_dict(loc) for loc in locations], indent=2))
        return
    if not locations:
        print(empty_message, file=sys.stderr)
        sys.exit(1)
    print(f"\nFound {len(locations)} location(s):\n")
    for location in locations:
        print(_format_location(location))
        print()


def _print_board(group: StationDepartures, as_json: bool) -> None:
    if as_json:
        print(
            json.dumps(
                {
                    "station": location_to_dict(group.location) if group.location else None,
                    "departures": [departure_to_dict(d) for d in group.departures],
                },
                indent=2,
            )
        )
        return
    if group.location:
        print(f"\nDepartures from {group.location.name}:\n")
    for departure in group.departures:
        print(_format_departure(departure))
    if not group.departures:
        print("No departures.")


def _print_health(status: HealthStatus, as_json: bool) -> None:
    if as_json:
        print(json.dumps(status.model_dump(by_alias=True), indent=2))
        return
    failed = status.failed_checks()
    print("PTV API is healthy." if not failed else f"Degraded checks: {', '.join(failed)}")


async def run_command(args: Any, config: AppConfig) -> None:
    """Execute a parsed CLI command against the PTV API."""
    async with aiohttp.ClientSession() as session:
        transport = AiohttpTransport(session, timeout_seconds=config.timeout_seconds)
        provider = PtvProvider(config.credentials(), transport, base_url=config.base_url)

        if args.command == "health":
            status = await provider.check_health()
            _print_health(status, args.json)

        elif args.command == "search":
            result = await provider.suggest_locations(args.query)
            _print_locations(result.locations, args.json, f"No stops found for '{args.query}'")

        elif args.command == "nearby":
            nearby = await provider.query_nearby_locations(
                Point.from_degrees(args.latitude, args.longitude),
                max_distance=args.max_distance,
                max_locations=args.max_results,
            )
            _print_locations(nearby.locations, args.json, "No stops found nearby")

        elif args.command == "departures":
            limit = args.limit or config.max_departures
            board = await provider.query_departures(args.stop_id, max_departures=limit)
            _print_board(board.station_departures[0], args.json)


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="PTV (Melbourne) Timetable API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Credentials are read from PTV_DEVID and PTV_API_KEY (or a .env file).

Examples:
  # Check the API is usable
  ptv-departures health

  # Search for stops
  ptv-departures search "Flinders Street"

  # Stops within 500 m
  ptv-departures nearby -37.817993 144.981916 --max-distance 500

  # Departure board of a stop
  ptv-departures departures 1071 --limit 3
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    health_parser = subparsers.add_parser("health", help="Run the API health check")
    health_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Stop name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Find stops near a coordinate")
    nearby_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    nearby_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    nearby_parser.add_argument(
        "--max-distance", type=int, default=0, help="Distance bound in meters (0 = unbounded)"
    )
    nearby_parser.add_argument(
        "--max-results", type=int, default=0, help="Maximum number of stops (0 = unlimited)"
    )
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show a stop's departures")
    departures_parser.add_argument("stop_id", help="PTV stop id (e.g., 1071)")
    departures_parser.add_argument(
        "--limit", type=int, default=0, help="Departures per destination"
    )
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        await run_command(args, AppConfig())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (PtvError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
