"""Screens package - contains all screen definitions.

Screens:
- MainScreen: Leaderboard dashboard
"""

from claimboard.screens.main import MainScreen

__all__ = ["MainScreen"]
