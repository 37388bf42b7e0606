"""Claimboard - terminal client for a remote leaderboard service."""

__version__ = "0.1.0"
