"""Services package - import from subdirectories directly.

Subpackages:
- config: Client settings loaded from the environment and .env files
- leaderboard: HTTP client, player list store and operator actions
"""
