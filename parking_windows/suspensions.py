"""Summarize alternate side parking suspensions from the NYC calendar."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from . import config
from .grammar import join_phrases
from .rules import WEEKDAY_NAMES

logger = logging.getLogger(__name__)


TRAILING_YEAR_RE = re.compile(r"\s+\d{4}$")


@dataclass(frozen=True)
class CalendarItem:
    type: str
    status: str
    details: Optional[str] = None
    exception_name: Optional[str] = None

    @property
    def is_alternate_side_suspension(self) -> bool:
        return self.type == config.ALTERNATE_SIDE_TYPE and self.status == config.SUSPENDED_STATUS

    @property
    def suspends_meters(self) -> bool:
        return bool(self.details) and config.METERS_SUSPENDED_PHRASE in self.details


@dataclass(frozen=True)
class CalendarDay:
    date: date
    items: List[CalendarItem] = field(default_factory=list)

    def formatted_date(self) -> str:
        return f"{WEEKDAY_NAMES[self.date.weekday()]}, {self.date:%m/%d}"


@dataclass
class SuspensionSummary:
    dates: List[str] = field(default_factory=list)
    exception_names: List[str] = field(default_factory=list)

    def add_exception(self, name: str) -> None:
        if name not in self.exception_names:
            self.exception_names.append(name)


def strip_year(name: str) -> str:
    """Drop a trailing four digit year, e.g. "Christmas Day 2023" -> "Christmas Day"."""
    return TRAILING_YEAR_RE.sub("", name)


def collect_suspensions(days: Iterable[CalendarDay]) -> SuspensionSummary:
    summary = SuspensionSummary()
    for day in days:
        for item in day.items:
            if not item.is_alternate_side_suspension:
                continue
            summary.dates.append(day.formatted_date())
            if not item.suspends_meters:
                continue
            if not item.exception_name:
                logger.warning("Meter suspension on %s has no exception name", day.date)
                continue
            summary.add_exception(strip_year(item.exception_name))

    logger.debug(
        "Found %s suspended days and %s meter exceptions",
        len(summary.dates),
        len(summary.exception_names),
    )
    return summary


def render_suspensions(summary: SuspensionSummary) -> str:
    message = ""
    if summary.dates:
        message += f"By the way, alternate side parking is suspended on {join_phrases(summary.dates)}. "
    if summary.exception_names:
        message += f"Meters are in effect except for {join_phrases(summary.exception_names)}."
    return message.strip()


def summarize_suspensions(days: Iterable[CalendarDay]) -> str:
    return render_suspensions(collect_suspensions(days))


__all__ = [
    "CalendarItem",
    "CalendarDay",
    "SuspensionSummary",
    "strip_year",
    "collect_suspensions",
    "render_suspensions",
    "summarize_suspensions",
]
