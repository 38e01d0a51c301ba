"""Aggregate free parking windows and rank them by how many streets open up."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from . import config
from .grammar import ordinal
from .rules import ParkingDataError, RegulationFeature, TimeLabel, parse_rule

logger = logging.getLogger(__name__)


NO_RESULTS_MESSAGE = "No free parking times found."


@dataclass(frozen=True)
class RankedWindow:
    label: TimeLabel
    count: int

    @property
    def time(self) -> str:
        return self.label.render()


def aggregate_free_parking_times(features: Iterable[RegulationFeature]) -> Dict[TimeLabel, int]:
    """Count how many features lift their restrictions at each weekly moment.

    Rules that are not free parking allowances are ignored. Rules that are,
    but whose start time cannot be read, are logged and skipped so that one
    bad record never hides the rest of the batch.
    """
    bucket: Dict[TimeLabel, int] = {}
    skipped = 0
    for feature in features:
        try:
            label = parse_rule(feature)
        except ParkingDataError as exc:
            skipped += 1
            logger.warning("Skipping regulation: %s", exc)
            continue
        if label is None:
            continue
        bucket[label] = bucket.get(label, 0) + 1

    if skipped:
        logger.info("Skipped %s malformed regulations", skipped)
    logger.debug("Aggregated %s distinct free parking times", len(bucket))
    return bucket


def rank_business_hours(
    bucket: Dict[TimeLabel, int],
    top_n: int = config.DEFAULT_TOP_N,
    hour_range: Tuple[int, int] = config.BUSINESS_HOURS,
) -> List[RankedWindow]:
    """Keep windows starting inside ``hour_range`` and return the ``top_n`` busiest.

    Ties keep the bucket's iteration order.
    """
    if not bucket or top_n <= 0:
        return []

    start_hour, end_hour = hour_range
    df = pd.DataFrame({"label": list(bucket.keys()), "count": list(bucket.values())})
    df["hour"] = df["label"].map(lambda label: label.hour)
    df = df[(df["hour"] >= start_hour) & (df["hour"] < end_hour)]
    df = df.sort_values(by=["count"], ascending=False, kind="stable").head(top_n)

    return [RankedWindow(label=label, count=int(count)) for label, count in zip(df["label"], df["count"])]


def render_best_times(ranked: List[RankedWindow], place: str = config.DEFAULT_PLACE) -> str:
    if not ranked:
        return NO_RESULTS_MESSAGE

    best = ranked[0]
    paragraphs = [
        f"The best time to park near {place} is {best.time}, with alternate-side parking "
        f"restrictions ending on {best.count} nearby streets."
    ]
    for rank, window in enumerate(ranked[1:], start=2):
        paragraphs.append(
            f"The {ordinal(rank)} best time to park is {window.time}, with alternate-side parking "
            f"restrictions ending on {window.count} nearby streets."
        )
    return "\n\n".join(paragraphs)


def aggregate_and_rank(
    features: Iterable[RegulationFeature],
    top_n: int = config.DEFAULT_TOP_N,
    hour_range: Tuple[int, int] = config.BUSINESS_HOURS,
    *,
    place: str = config.DEFAULT_PLACE,
) -> Tuple[List[RankedWindow], str]:
    bucket = aggregate_free_parking_times(features)
    ranked = rank_business_hours(bucket, top_n, hour_range)
    logger.info("Ranked %s of %s free parking times", len(ranked), len(bucket))
    return ranked, render_best_times(ranked, place)


def build_report(best_times_message: str, suspension_message: str = "") -> str:
    """Concatenate the best-times and suspension messages into one reply."""
    parts = [best_times_message]
    if suspension_message:
        parts.append(suspension_message)
    return "\n\n".join(parts)


__all__ = [
    "RankedWindow",
    "NO_RESULTS_MESSAGE",
    "aggregate_free_parking_times",
    "rank_business_hours",
    "render_best_times",
    "aggregate_and_rank",
    "build_report",
]
