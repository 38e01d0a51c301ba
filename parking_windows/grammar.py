"""English phrasing helpers for rendered messages."""
from __future__ import annotations

from typing import Sequence

ORDINAL_SUFFIXES = ["th", "st", "nd", "rd"]


def ordinal(n: int) -> str:
    """Return ``n`` with its English ordinal suffix (1st, 2nd, 11th, 21st)."""
    remainder = n % 100
    if 11 <= remainder <= 13:
        return f"{n}th"
    last_digit = remainder % 10
    suffix = ORDINAL_SUFFIXES[last_digit] if last_digit < len(ORDINAL_SUFFIXES) else "th"
    return f"{n}{suffix}"


def join_phrases(items: Sequence[str]) -> str:
    """Join items as "A", "A and B" or "A, B and C"."""
    items = list(items)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"


__all__ = ["ordinal", "join_phrases"]
