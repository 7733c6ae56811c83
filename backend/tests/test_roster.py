"""Test cases for roster aggregation and the leaderboard."""

from types import SimpleNamespace

import pytest

from mythos.scoring import (
    ALL_CLASSES, DEFAULT_TIERS, RosterEntry, aggregate, build_leaderboard, resolve_tier,
)


def submission(email, points):
    return SimpleNamespace(student_email=email, points=points)


def entry(email, points, name="", class_period=""):
    return RosterEntry(
        email=email,
        total_points=points,
        tier=resolve_tier(points, DEFAULT_TIERS),
        name=name,
        class_period=class_period,
    )


class TestAggregate:
    """Test cases for roster aggregation."""

    def test_totals_and_titles(self):
        submissions = [
            submission("medusa@example.com", 20),
            submission("perseus@example.com", 10),
            submission("medusa@example.com", 20),
        ]
        roster = aggregate(submissions, DEFAULT_TIERS)

        assert [e.email for e in roster] == ["medusa@example.com", "perseus@example.com"]
        assert roster[0].total_points == 40
        assert roster[0].title == "Gorgon"
        assert roster[1].total_points == 10
        assert roster[1].title == "Gnome"

    def test_pending_submissions_add_nothing(self):
        roster = aggregate([submission("theseus@example.com", 0)], DEFAULT_TIERS)
        assert roster[0].total_points == 0
        assert roster[0].title == "Gnome"

    def test_profiles_attached(self):
        profiles = {"theseus@example.com": SimpleNamespace(name="Theseus", class_period="Period 1")}
        roster = aggregate([submission("theseus@example.com", 5)], DEFAULT_TIERS, profiles)
        assert roster[0].name == "Theseus"
        assert roster[0].class_period == "Period 1"

    def test_missing_profile_fields_default_to_empty(self):
        profiles = {"theseus@example.com": SimpleNamespace(name=None, class_period=None)}
        roster = aggregate([submission("theseus@example.com", 5)], DEFAULT_TIERS, profiles)
        assert roster[0].name == ""
        assert roster[0].class_period == ""

    def test_no_submissions(self):
        assert aggregate([], DEFAULT_TIERS) == []

    def test_idempotent(self):
        submissions = [submission("a@example.com", 10), submission("b@example.com", 30)]
        assert aggregate(submissions, DEFAULT_TIERS) == aggregate(submissions, DEFAULT_TIERS)
        assert [s.points for s in submissions] == [10, 30]


class TestBuildLeaderboard:
    """Test cases for leaderboard ranking and filtering."""

    @pytest.fixture
    def roster(self):
        return [
            entry("icarus@example.com", 12, "Icarus", "Period 3"),
            entry("daedalus@example.com", 48, "Daedalus", " Period 3 "),
            entry("minos@example.com", 30, "Minos", "Period 1"),
            entry("pasiphae@example.com", 55, "Pasiphae", "period 3"),
        ]

    def test_sorted_and_ranked(self, roster):
        board = build_leaderboard(roster)
        assert [e.points for e in board] == [55, 48, 30, 12]
        assert [e.rank for e in board] == [1, 2, 3, 4]
        assert board[0].title == "Fenrir"

    def test_class_filter_trims_and_is_case_sensitive(self, roster):
        board = build_leaderboard(roster, "Period 3")
        assert [e.name for e in board] == ["Daedalus", "Icarus"]
        assert [e.rank for e in board] == [1, 2]

    def test_filter_value_is_trimmed(self, roster):
        assert [e.name for e in build_leaderboard(roster, "  Period 1 ")] == ["Minos"]

    @pytest.mark.parametrize("class_filter", [None, "", "   ", ALL_CLASSES])
    def test_no_filter(self, roster, class_filter):
        assert len(build_leaderboard(roster, class_filter)) == 4

    def test_unknown_class(self, roster):
        assert build_leaderboard(roster, "Period 9") == []

    def test_ties_keep_roster_order(self):
        roster = [entry("b@example.com", 10, "B"), entry("a@example.com", 10, "A")]
        assert [e.name for e in build_leaderboard(roster)] == ["B", "A"]

    def test_display_name_fallbacks(self):
        roster = [entry("hermes@example.com", 20), entry("", 10)]
        board = build_leaderboard(roster)
        assert board[0].name == "hermes"
        assert board[1].name == "Student 2"
