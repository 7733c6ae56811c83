"""Leaderboard filtering, sorting and ranking."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .roster import RosterEntry
from .tiers import DEFAULT_TITLE

logger = logging.getLogger(__name__)

ALL_CLASSES = "All Classes"


@dataclass(frozen=True)
class RankedEntry:
    """Single leaderboard row."""
    rank: int
    name: str
    email: str
    class_period: str
    points: int
    title: str


def _is_unfiltered(class_filter: Optional[str]) -> bool:
    return class_filter is None or not str(class_filter).strip() or class_filter == ALL_CLASSES


def _display_name(entry: RosterEntry, rank: int) -> str:
    if entry.name:
        return entry.name
    if entry.email:
        return entry.email.split("@")[0]
    return f"Student {rank}"


def build_leaderboard(
    entries: Iterable[RosterEntry],
    class_filter: Optional[str] = None,
) -> list[RankedEntry]:
    """Rank roster entries by points, optionally within one class period.

    Equal totals keep their incoming order (the sort is stable); there is
    no further tie-break.
    """
    students = list(entries)
    if _is_unfiltered(class_filter):
        logger.debug("No class period filter applied")
    else:
        wanted = str(class_filter).strip()
        before = len(students)
        students = [e for e in students if (e.class_period or "").strip() == wanted]
        logger.debug(f"Class period filter '{wanted}': {before} -> {len(students)} students")

    ranked = sorted(students, key=lambda e: e.total_points, reverse=True)
    return [
        RankedEntry(
            rank=rank,
            name=_display_name(entry, rank),
            email=entry.email,
            class_period=entry.class_period,
            points=entry.total_points,
            title=entry.title or DEFAULT_TITLE,
        )
        for rank, entry in enumerate(ranked, start=1)
    ]
