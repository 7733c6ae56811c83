"""Points, titles and leaderboard engine."""
from .errors import (
    JourneyError,
    UnknownCategory,
    AlreadyVerified,
    InvalidSubmissionReference,
    NoTiersConfigured,
)
from .rules import PointRule, POINT_SYSTEM, BONUS_POINTS_VALUE, compute_submission_points, parse_category
from .tiers import Tier, DEFAULT_TIERS, DEFAULT_TITLE, resolve_tier, validate_tier_table
from .roster import RosterEntry, aggregate, total_points_for
from .leaderboard import RankedEntry, ALL_CLASSES, build_leaderboard
from .images import normalize_image_url, resolve_logo_url, validate_image_url
from .config import JourneyConfig

__all__ = [
    'JourneyError',
    'UnknownCategory',
    'AlreadyVerified',
    'InvalidSubmissionReference',
    'NoTiersConfigured',
    'PointRule',
    'POINT_SYSTEM',
    'BONUS_POINTS_VALUE',
    'compute_submission_points',
    'parse_category',
    'Tier',
    'DEFAULT_TIERS',
    'DEFAULT_TITLE',
    'resolve_tier',
    'validate_tier_table',
    'RosterEntry',
    'aggregate',
    'total_points_for',
    'RankedEntry',
    'ALL_CLASSES',
    'build_leaderboard',
    'normalize_image_url',
    'resolve_logo_url',
    'validate_image_url',
    'JourneyConfig',
]
