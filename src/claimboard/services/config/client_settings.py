"""ClientSettings - where the leaderboard service lives and how to talk to it.

Values come from a .env file and the process environment; the environment
wins. Unset variables fall back to the defaults below.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values

DEFAULT_ENV_FILE = ".env"

ENV_API_URL = "CLAIMBOARD_API_URL"
ENV_TIMEOUT = "CLAIMBOARD_TIMEOUT"
ENV_NOTIFICATION_SECONDS = "CLAIMBOARD_NOTIFICATION_SECONDS"
ENV_BATCH_SIZE = "CLAIMBOARD_BATCH_SIZE"
ENV_LOG_LEVEL = "CLAIMBOARD_LOG_LEVEL"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class SettingsError(ValueError):
    """A configuration value could not be used."""


@dataclass(frozen=True)
class ClientSettings:
    """Connection and behaviour settings for the client."""

    DEFAULT_API_URL: ClassVar[str] = "http://localhost:5000/api"
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0
    DEFAULT_NOTIFICATION_SECONDS: ClassVar[float] = 4.0
    DEFAULT_BATCH_SIZE: ClassVar[int] = 10

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    notification_seconds: float = DEFAULT_NOTIFICATION_SECONDS
    batch_size: int = DEFAULT_BATCH_SIZE
    log_level: str = "WARNING"

    def with_overrides(self, **changes: object) -> "ClientSettings":
        """Copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _positive(name: str, raw: str, kind: type) -> float | int:
    try:
        value = kind(raw)
    except ValueError:
        raise SettingsError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise SettingsError(f"{name} must be positive, got {raw!r}")
    return value


def _read_env_file(env_path: Path) -> dict[str, str]:
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def load_settings(
    env_path: Path | None = None, environ: Mapping[str, str] | None = None
) -> ClientSettings:
    """Load settings from ``env_path`` (default ./.env) and the environment."""
    values = _read_env_file(env_path or Path(DEFAULT_ENV_FILE))
    values.update(
        (k, v) for k, v in (os.environ if environ is None else environ).items()
        if k.startswith("CLAIMBOARD_")
    )

    defaults = ClientSettings()
    settings = ClientSettings(
        api_url=values.get(ENV_API_URL, "").strip() or defaults.api_url,
        timeout=defaults.timeout,
        notification_seconds=defaults.notification_seconds,
        batch_size=defaults.batch_size,
        log_level=values.get(ENV_LOG_LEVEL, defaults.log_level).strip().upper(),
    )
    if settings.log_level not in _LOG_LEVELS:
        raise SettingsError(
            f"{ENV_LOG_LEVEL} must be one of {sorted(_LOG_LEVELS)}, "
            f"got {settings.log_level!r}"
        )

    if raw := values.get(ENV_TIMEOUT):
        settings = replace(settings, timeout=_positive(ENV_TIMEOUT, raw, float))
    if raw := values.get(ENV_NOTIFICATION_SECONDS):
        settings = replace(
            settings,
            notification_seconds=_positive(ENV_NOTIFICATION_SECONDS, raw, float),
        )
    if raw := values.get(ENV_BATCH_SIZE):
        settings = replace(settings, batch_size=_positive(ENV_BATCH_SIZE, raw, int))
    return settings
