"""Explicit configuration for the scoring engine."""

from dataclasses import dataclass, field
from typing import Mapping

from ..models.enums import MediaCategory
from .rules import BONUS_POINTS_VALUE, POINT_SYSTEM, PointRule
from .tiers import DEFAULT_TIERS, Tier


@dataclass(frozen=True)
class JourneyConfig:
    """Rules, titles and switches the engine runs against."""
    rules: Mapping[MediaCategory, PointRule] = field(default_factory=lambda: dict(POINT_SYSTEM))
    tiers: tuple[Tier, ...] = DEFAULT_TIERS
    verification_enabled: bool = True
    bonus_points: int = BONUS_POINTS_VALUE
    main_logo_url: str = ""
