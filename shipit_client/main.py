#!/usr/bin/env python3
"""CLI entry point for quick lookups against the Shipit API."""

import argparse
import csv
import logging
import sys

from shipit_client.config import MODE_URLS, Settings
from shipit_client.connector import ShipitConnector
from shipit_client.errors import HTTPError, ShipitError
from shipit_client.models import UNSET


def _value(value, default=""):
    return default if value is UNSET or value is None else value


def _print_agents(agents):
    """Print service points in the order the API ranked them."""
    print(f"\n{'=' * 70}")
    print("  SERVICE POINTS")
    print(f"  {len(agents)} location(s)")
    print(f"{'=' * 70}\n")

    for i, agent in enumerate(agents, 1):
        print(f"  {i}. {agent.name} ({agent.id})")
        print(f"    Address: {agent.address1}, {agent.zipcode} {agent.city}, {agent.country_code}")
        carrier = _value(agent.carrier)
        if carrier:
            print(f"    Carrier: {carrier}")
        distance = _value(agent.distance_in_kilometers, None)
        if distance is not None:
            print(f"    Distance: {distance:.2f} km")
        print()


def _export_csv(agents, path):
    """Export service points to a CSV file."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "rank", "id", "name", "address", "zipcode", "city",
            "country", "carrier", "latitude", "longitude", "distance_km",
        ])
        for i, agent in enumerate(agents, 1):
            writer.writerow([
                i, agent.id, agent.name, agent.address1, agent.zipcode, agent.city,
                agent.country_code, _value(agent.carrier), _value(agent.latitude),
                _value(agent.longitude), _value(agent.distance_in_kilometers),
            ])
    print(f"Service points exported to {path}")


def _build_connector(args) -> ShipitConnector:
    """Instantiate the connector from CLI arguments and the environment.

    Args:
        args: Parsed argparse namespace.

    Returns:
        A ShipitConnector for the selected mode.
    """
    settings = Settings.from_env(
        api_token=args.token,
        mode=args.mode,
        base_url=args.base_url,
    )
    return settings.connector()


def _cmd_methods(connector, args):
    methods = connector.shipping_methods.list().data
    if not methods:
        print("No shipping methods available.")
        return
    for method in methods:
        print(f"  {method.service_id:<24} {method.carrier:<16} {_value(method.service_name)}")


def _cmd_details(connector, args):
    details = connector.shipping_methods.details(args.service_id)
    print(f"Service: {details.service_id}")
    strings = _value(details.strings_en, {})
    if isinstance(strings, dict):
        for key, text in strings.items():
            print(f"  {key}: {text}")


def _cmd_agents(connector, args):
    query = {"postcode": args.postcode, "country": args.country}
    if args.service_id:
        ids = args.service_id
        query["serviceId"] = ids[0] if len(ids) == 1 else ids
    if args.type:
        query["type"] = args.type

    agents = connector.agents.get(query).locations
    if not agents:
        print("No service points found.")
        return

    _print_agents(agents)
    if args.csv:
        _export_csv(agents, args.csv)


def _cmd_track(connector, args):
    link = connector.tracking.link(args.tracking_number)
    print(f"{link.tracking_number}: {link.tracking_url}")


def _cmd_me(connector, args):
    me = connector.user.current()
    print(f"{me.name} <{me.email}> (id {me.id})")


def _cmd_countries(connector, args):
    countries = connector.postal_codes.country_info().countries
    items = countries.items() if isinstance(countries, dict) else enumerate(countries)
    for key, info in items:
        print(f"  {key}: {info}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Look up shipping methods, service points and tracking links on Shipit.",
    )
    parser.add_argument(
        "--token",
        help="Shipit API token (overrides SHIPIT_API_TOKEN env var).",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODE_URLS),
        help='API environment (overrides SHIPIT_MODE env var, default: "test").',
    )
    parser.add_argument(
        "--base-url",
        help="Explicit API base URL (overrides --mode and SHIPIT_BASE_URL).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every HTTP call.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    methods = subparsers.add_parser("methods", help="List every bookable shipping method.")
    methods.set_defaults(func=_cmd_methods)

    details = subparsers.add_parser("details", help="Show descriptions of one service.")
    details.add_argument("service_id", help='Service ID, e.g. "posti.po2103".')
    details.set_defaults(func=_cmd_details)

    agents = subparsers.add_parser("agents", help="Find service points near a postcode.")
    agents.add_argument("--postcode", required=True)
    agents.add_argument("--country", required=True, help="Two-letter country code.")
    agents.add_argument(
        "--service-id",
        action="append",
        help="Restrict to a service ID (repeatable).",
    )
    agents.add_argument("--type", help='Location type, e.g. "parcel_locker".')
    agents.add_argument("--csv", metavar="FILE", help="Export the service points to a CSV file.")
    agents.set_defaults(func=_cmd_agents)

    track = subparsers.add_parser("track", help="Print the public tracking link of a shipment.")
    track.add_argument("tracking_number")
    track.set_defaults(func=_cmd_track)

    me = subparsers.add_parser("me", help="Show the authenticated user.")
    me.set_defaults(func=_cmd_me)

    countries = subparsers.add_parser("countries", help="Show postal code metadata per country.")
    countries.set_defaults(func=_cmd_countries)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        connector = _build_connector(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        args.func(connector, args)
    except HTTPError as exc:
        print(f"Error: HTTP {exc.status_code} ({exc.code}): {exc.message}", file=sys.stderr)
        sys.exit(1)
    except ShipitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
