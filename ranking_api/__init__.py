"""Leaderboard API keeping each player's best score."""

__version__ = "1.0.0"
