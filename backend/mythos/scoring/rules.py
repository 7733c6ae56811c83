"""Point rules for media submissions."""

from dataclasses import dataclass
from typing import Mapping, Union

from ..models.enums import MediaCategory
from .errors import UnknownCategory

# Points for each submission that connects back to a myth
BONUS_POINTS_VALUE = 5


@dataclass(frozen=True)
class PointRule:
    """Points for the first, second and every later submission of a category."""
    first: int
    second: int
    third_plus: int

    def points_for(self, prior_count: int) -> int:
        if prior_count <= 0:
            return self.first
        if prior_count == 1:
            return self.second
        return self.third_plus


POINT_SYSTEM = {
    MediaCategory.written_story: PointRule(first=20, second=10, third_plus=5),
    MediaCategory.movie_tv_play: PointRule(first=10, second=5, third_plus=1),
    MediaCategory.video_game: PointRule(first=10, second=5, third_plus=1),
    MediaCategory.podcast_audio: PointRule(first=10, second=5, third_plus=1),
    MediaCategory.graphic_novel: PointRule(first=10, second=5, third_plus=1),
    MediaCategory.other: PointRule(first=5, second=1, third_plus=0),
}


def parse_category(value: Union[str, MediaCategory]) -> MediaCategory:
    """Resolve a category label (or member name) to a MediaCategory."""
    if isinstance(value, MediaCategory):
        return value
    label = str(value or "").strip()
    try:
        return MediaCategory(label)
    except ValueError:
        pass
    try:
        return MediaCategory[label]
    except KeyError:
        raise UnknownCategory(value) from None


def compute_submission_points(
    category: MediaCategory,
    prior_count: int,
    bonus_requested: bool,
    rules: Mapping[MediaCategory, PointRule] = POINT_SYSTEM,
    bonus_value: int = BONUS_POINTS_VALUE,
) -> int:
    """Compute the points a submission is worth.

    Args:
        category: Media category of the submission.
        prior_count: Number of already-recorded submissions for the same
            student and category, not counting the one being scored.
        bonus_requested: Whether the student claimed the myth-connection bonus.
        rules: Point table to score against.
        bonus_value: Flat bonus added when ``bonus_requested`` is set.

    Raises:
        UnknownCategory: If ``category`` has no entry in ``rules``.
    """
    rule = rules.get(category)
    if rule is None:
        raise UnknownCategory(category)
    points = rule.points_for(prior_count)
    if bonus_requested:
        points += bonus_value
    return points
