"""Config services for connecting to the leaderboard service."""

from claimboard.services.config.client_settings import (
    ClientSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "ClientSettings",
    "SettingsError",
    "load_settings",
]
