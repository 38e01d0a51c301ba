"""Command line interface for the free parking window finder."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime, timedelta
from typing import Optional

import requests

from . import config
from .ingest import ParkingDataClient, parse_calendar, parse_features
from .suspensions import summarize_suspensions
from .transform import aggregate_and_rank, build_report

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got {value!r}")


def _load_json(path: str) -> dict:
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the best upcoming free parking windows in NYC")
    parser.add_argument("command", choices=["best-times", "suspensions", "report"], help="Message to build")
    parser.add_argument("--lat", dest="lat", type=float, default=None, help="Latitude of the parking location")
    parser.add_argument("--lon", dest="lon", type=float, default=None, help="Longitude of the parking location")
    parser.add_argument("--place", dest="place", default=config.DEFAULT_PLACE, help="Place name used in the message")
    parser.add_argument("--top", dest="top_n", type=int, default=config.DEFAULT_TOP_N, help="Number of windows to report")
    parser.add_argument("--date", dest="on_date", type=_parse_date, default=None, help="Regulation date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--radius", dest="radius", type=int, default=config.DEFAULT_RADIUS_METERS, help="Search radius in meters")
    parser.add_argument("--days", dest="days", type=int, default=config.CALENDAR_LOOKAHEAD_DAYS, help="Calendar lookahead in days")
    parser.add_argument("--subscription-key", dest="subscription_key", default=None, help="NYC API subscription key")
    parser.add_argument("--features-file", dest="features_file", default=None, help="Read an OpenCurb payload from a JSON file")
    parser.add_argument("--calendar-file", dest="calendar_file", default=None, help="Read a calendar payload from a JSON file")
    parser.add_argument("--snapshot", dest="snapshot_path", default=None, help="Append fetched payloads as newline-delimited JSON")
    parser.add_argument("--verbose", dest="verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    needs_location = args.command in {"best-times", "report"} and not args.features_file
    if needs_location and (args.lat is None or args.lon is None):
        parser.error("--lat and --lon are required unless --features-file is given")
    return args


def _best_times_message(args: argparse.Namespace, client: ParkingDataClient) -> str:
    if args.features_file:
        payload = _load_json(args.features_file)
    else:
        payload = client.fetch_regulations(args.lat, args.lon, on_date=args.on_date, radius=args.radius)
    _, message = aggregate_and_rank(parse_features(payload), args.top_n, config.BUSINESS_HOURS, place=args.place)
    return message


def _suspensions_message(args: argparse.Namespace, client: ParkingDataClient) -> str:
    if args.calendar_file:
        payload = _load_json(args.calendar_file)
    else:
        start = date.today()
        payload = client.fetch_calendar(start, start + timedelta(days=args.days))
    return summarize_suspensions(parse_calendar(payload))


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    client = ParkingDataClient(subscription_key=args.subscription_key, snapshot_path=args.snapshot_path)
    try:
        if args.command == "best-times":
            message = _best_times_message(args, client)
        elif args.command == "suspensions":
            message = _suspensions_message(args, client)
        elif args.command == "report":
            message = build_report(_best_times_message(args, client), _suspensions_message(args, client))
        else:
            raise ValueError(f"Unsupported command: {args.command}")
    except (requests.RequestException, OSError, ValueError):
        logger.exception("Failed to build %s message", args.command)
        print(config.FAILURE_MESSAGE)
        return 1

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
