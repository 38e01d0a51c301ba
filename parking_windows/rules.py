"""Parse OpenCurb regulation sentences into recurring weekly time labels."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from . import config

logger = logging.getLogger(__name__)


WEEKDAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

WEEKDAY_ABBREVIATIONS = {name[:3].upper(): index for index, name in enumerate(WEEKDAY_NAMES)}

MONTH_ABBREVIATIONS = {
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
}

# e.g. "Nov 12 Mon 9:00am"
TIME_TOKEN_RE = re.compile(
    r"^(?P<month>[A-Za-z]{3})\s+(?P<day>\d{1,2})\s+(?P<weekday>[A-Za-z]{3})\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>[AaPp][Mm])$"
)

RULE_WINDOW_RE = re.compile(r"\bFrom\b(?P<start>.*?)\bUntil\b", re.DOTALL)


class ParkingDataError(ValueError):
    """Base class for records that cannot be turned into parking windows."""


class MalformedRuleText(ParkingDataError):
    """A free parking rule without a ``From ... Until`` clause."""


class UnparseableTimeToken(ParkingDataError):
    """A start time that does not look like ``Nov 12 Mon 9:00am``."""


@dataclass(frozen=True)
class RegulationFeature:
    """One curb segment's active rule, as returned by OpenCurb."""

    rule_text: str


@dataclass(frozen=True)
class TimeLabel:
    """A recurring weekly moment; used as the aggregation key."""

    weekday: int  # 0=Monday .. 6=Sunday
    hour: int  # 0..23
    minute: int

    def render(self) -> str:
        hour_12 = self.hour % 12 or 12
        meridiem = "am" if self.hour < 12 else "pm"
        return f"{WEEKDAY_NAMES[self.weekday]} at {hour_12:02d}:{self.minute:02d}{meridiem}"

    def __str__(self) -> str:
        return self.render()


def is_free_parking(rule_text: str) -> bool:
    return config.FREE_PARKING_MARKER in rule_text


def extract_start_token(rule_text: str) -> Optional[str]:
    """Return the start time embedded in a free parking rule.

    Returns ``None`` for rules that are not free parking allowances. Raises
    :class:`MalformedRuleText` when the rule is a free parking allowance but
    lacks the ``From <start> Until <end>`` clause.
    """
    if not is_free_parking(rule_text):
        return None

    match = RULE_WINDOW_RE.search(rule_text)
    if not match:
        raise MalformedRuleText(f"No 'From ... Until' clause in rule: {rule_text!r}")

    token = match.group("start").strip()
    if token.endswith("."):
        token = token[:-1]
    return token


def _to_24_hour(hour: int, meridiem: str) -> int:
    if meridiem == "pm" and hour != 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


def parse_time_token(token: str) -> TimeLabel:
    match = TIME_TOKEN_RE.match(token.strip())
    if not match:
        raise UnparseableTimeToken(f"Unexpected time format: {token!r}")

    if match.group("month").upper() not in MONTH_ABBREVIATIONS:
        raise UnparseableTimeToken(f"Unknown month in time token: {token!r}")
    if not 1 <= int(match.group("day")) <= 31:
        raise UnparseableTimeToken(f"Day out of range in time token: {token!r}")

    weekday = WEEKDAY_ABBREVIATIONS.get(match.group("weekday").upper())
    if weekday is None:
        raise UnparseableTimeToken(f"Unknown weekday in time token: {token!r}")

    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    if not 1 <= hour <= 12 or minute > 59:
        raise UnparseableTimeToken(f"Time out of range in time token: {token!r}")

    return TimeLabel(
        weekday=weekday,
        hour=_to_24_hour(hour, match.group("meridiem").lower()),
        minute=minute,
    )


def parse_rule(feature: RegulationFeature) -> Optional[TimeLabel]:
    """Run a feature through start-token extraction and time parsing.

    ``None`` means the feature is not a free parking rule; parsing failures
    propagate as :class:`ParkingDataError`.
    """
    token = extract_start_token(feature.rule_text)
    if token is None:
        logger.debug("Skipping non free parking rule: %s", feature.rule_text)
        return None
    return parse_time_token(token)


__all__ = [
    "ParkingDataError",
    "MalformedRuleText",
    "UnparseableTimeToken",
    "RegulationFeature",
    "TimeLabel",
    "WEEKDAY_NAMES",
    "is_free_parking",
    "extract_start_token",
    "parse_time_token",
    "parse_rule",
]
