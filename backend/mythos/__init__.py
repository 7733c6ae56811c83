"""Mythos Ascendant: points and leaderboard for a classroom reading challenge."""

__version__ = "0.1.0"
