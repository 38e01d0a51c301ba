"""NYC free parking window finder."""

from .cli import main as cli_main
from .ingest import ParkingDataClient, parse_calendar, parse_features
from .rules import MalformedRuleText, ParkingDataError, RegulationFeature, TimeLabel, UnparseableTimeToken
from .suspensions import CalendarDay, CalendarItem, summarize_suspensions
from .transform import RankedWindow, aggregate_and_rank, build_report

__all__ = [
    "cli_main",
    "ParkingDataClient",
    "parse_calendar",
    "parse_features",
    "MalformedRuleText",
    "ParkingDataError",
    "RegulationFeature",
    "TimeLabel",
    "UnparseableTimeToken",
    "CalendarDay",
    "CalendarItem",
    "summarize_suspensions",
    "RankedWindow",
    "aggregate_and_rank",
    "build_report",
]
