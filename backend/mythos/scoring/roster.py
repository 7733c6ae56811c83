"""Derive per-student totals and titles from submission history."""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from .tiers import Tier, resolve_tier


@dataclass(frozen=True)
class RosterEntry:
    """A student's standing, recomputed from their submissions."""
    email: str
    total_points: int
    tier: Tier
    name: str = ""
    class_period: str = ""

    @property
    def title(self) -> str:
        return self.tier.title


def total_points_for(submissions: Iterable[Any], email: str) -> int:
    """Sum stored points over one student's submissions."""
    return sum(s.points or 0 for s in submissions if s.student_email == email)


def aggregate(
    submissions: Iterable[Any],
    tiers: Sequence[Tier],
    profiles: Optional[Mapping[str, Any]] = None,
) -> list[RosterEntry]:
    """Group submissions by student and resolve each student's title.

    Students appear in the order of their first submission. Pending
    submissions store 0 points, so summing every row yields effective
    points. ``profiles`` maps an email to an object with ``name`` and
    ``class_period`` attributes (normally a Student row).
    """
    totals: dict[str, int] = {}
    for submission in submissions:
        email = submission.student_email
        totals[email] = totals.get(email, 0) + (submission.points or 0)

    profiles = profiles or {}
    entries = []
    for email, total in totals.items():
        profile = profiles.get(email)
        entries.append(
            RosterEntry(
                email=email,
                total_points=total,
                tier=resolve_tier(total, tiers),
                name=getattr(profile, "name", "") or "",
                class_period=getattr(profile, "class_period", "") or "",
            )
        )
    return entries
