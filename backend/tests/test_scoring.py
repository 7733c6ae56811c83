"""Test cases for point rules and title resolution."""

import pytest

from mythos.models import MediaCategory
from mythos.scoring import (
    BONUS_POINTS_VALUE, DEFAULT_TIERS, POINT_SYSTEM,
    NoTiersConfigured, PointRule, Tier, UnknownCategory,
    compute_submission_points, parse_category, resolve_tier, validate_tier_table,
)


class TestComputeSubmissionPoints:
    """Test cases for the point rule table."""

    @pytest.mark.parametrize("category", list(MediaCategory))
    def test_points_by_prior_count(self, category):
        """First, second and later submissions use their own rule values."""
        rule = POINT_SYSTEM[category]
        assert compute_submission_points(category, 0, False) == rule.first
        assert compute_submission_points(category, 1, False) == rule.second
        assert compute_submission_points(category, 2, False) == rule.third_plus
        assert compute_submission_points(category, 7, False) == rule.third_plus

    @pytest.mark.parametrize("prior_count", [0, 1, 2, 10])
    def test_bonus_is_flat(self, prior_count):
        """The bonus adds the same amount regardless of ordinal."""
        base = compute_submission_points(MediaCategory.other, prior_count, False)
        with_bonus = compute_submission_points(MediaCategory.other, prior_count, True)
        assert with_bonus - base == BONUS_POINTS_VALUE == 5

    def test_video_game_sequence(self):
        """Three video games score 10, 5, 1 for a total of 16."""
        points = [compute_submission_points(MediaCategory.video_game, n, False) for n in range(3)]
        assert points == [10, 5, 1]
        assert sum(points) == 16

    def test_written_story_values(self):
        assert POINT_SYSTEM[MediaCategory.written_story] == PointRule(first=20, second=10, third_plus=5)

    def test_category_missing_from_rules(self):
        """A category absent from a custom rule table is rejected."""
        rules = {MediaCategory.video_game: PointRule(3, 2, 1)}
        with pytest.raises(UnknownCategory):
            compute_submission_points(MediaCategory.podcast_audio, 0, False, rules)

    def test_custom_rules_and_bonus(self):
        rules = {MediaCategory.video_game: PointRule(3, 2, 1)}
        assert compute_submission_points(MediaCategory.video_game, 1, True, rules, bonus_value=2) == 4


class TestParseCategory:
    """Test cases for category parsing."""

    def test_parse_label(self):
        assert parse_category("Video Game") is MediaCategory.video_game
        assert parse_category("Graphic Novel/Comic Book") is MediaCategory.graphic_novel

    def test_parse_member_name(self):
        assert parse_category("podcast_audio") is MediaCategory.podcast_audio

    def test_parse_strips_whitespace(self):
        assert parse_category("  Other ") is MediaCategory.other

    def test_parse_enum_passthrough(self):
        assert parse_category(MediaCategory.movie_tv_play) is MediaCategory.movie_tv_play

    @pytest.mark.parametrize("value", ["Interpretive Dance", "", None])
    def test_parse_unknown(self, value):
        with pytest.raises(UnknownCategory):
            parse_category(value)


class TestResolveTier:
    """Test cases for title resolution."""

    def test_zero_points_is_gnome(self):
        assert resolve_tier(0, DEFAULT_TIERS).title == "Gnome"

    def test_exact_threshold(self):
        assert resolve_tier(42, DEFAULT_TIERS).title == "The Answer to the Ultimate Question"
        assert resolve_tier(100, DEFAULT_TIERS).title == "Chaos"

    def test_between_thresholds(self):
        assert resolve_tier(19, DEFAULT_TIERS).title == "Gnome"
        assert resolve_tier(34, DEFAULT_TIERS).title == "Kobold"
        assert resolve_tier(500, DEFAULT_TIERS).title == "Chaos"

    def test_below_lowest_threshold(self):
        assert resolve_tier(-3, DEFAULT_TIERS).title == "Gnome"

    def test_monotonic(self):
        """Higher totals never resolve to a lower threshold."""
        thresholds = [resolve_tier(total, DEFAULT_TIERS).points for total in range(0, 130)]
        assert thresholds == sorted(thresholds)

    def test_empty_table(self):
        with pytest.raises(NoTiersConfigured):
            resolve_tier(10, ())


class TestValidateTierTable:
    """Test cases for title table validation."""

    def test_default_table_is_valid(self):
        validate_tier_table(DEFAULT_TIERS)
        assert len(DEFAULT_TIERS) == 24

    def test_requires_zero_entry(self):
        with pytest.raises(ValueError):
            validate_tier_table((Tier(5, "Nymph"), Tier(10, "Titan")))

    def test_requires_increasing_thresholds(self):
        with pytest.raises(ValueError):
            validate_tier_table((Tier(0, "Gnome"), Tier(10, "Titan"), Tier(10, "Cyclops")))

    def test_empty_table(self):
        with pytest.raises(NoTiersConfigured):
            validate_tier_table(())
