"""Bulk player generation: fire N creates at once, then tally the outcomes.

Every request runs to a terminal state before anything is counted; one
failure (a duplicate name, a dropped connection) never stops the others.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field

from claimboard.services.leaderboard.client import LeaderboardClient
from claimboard.services.leaderboard.models import Player

_log = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10

ADJECTIVES = (
    "Swift", "Silent", "Golden", "Iron", "Cosmic", "Shadow",
    "Crystal", "Solar", "Lunar", "Crimson", "Azure", "Jade",
)
NOUNS = (
    "Jaguar", "Phoenix", "Spectre", "Golem", "Voyager", "Ninja",
    "Dragon", "Flare", "Hunter", "Warden", "Knight", "Sorcerer",
)


@dataclass
class BatchResult:
    """Aggregate outcome of a batch of create requests."""

    created: list[Player] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


def random_player_names(
    count: int = DEFAULT_BATCH_SIZE, rng: random.Random | None = None
) -> list[str]:
    """Sample ``count`` independent "Adjective Noun" names (repeats allowed)."""
    rng = rng or random.Random()
    return [f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}" for _ in range(count)]


def _describe(exc: BaseException) -> str:
    detail = getattr(exc, "detail", "")
    return detail or str(exc) or type(exc).__name__


async def create_players(
    client: LeaderboardClient, names: list[str], points: int | None = 0
) -> BatchResult:
    """Create all ``names`` concurrently and fold the results."""
    outcomes = await asyncio.gather(
        *(client.create_player(name, points) for name in names),
        return_exceptions=True,
    )

    result = BatchResult()
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, BaseException):
            # CancelledError is not a per-request failure; let it through.
            if isinstance(outcome, asyncio.CancelledError):
                raise outcome
            reason = _describe(outcome)
            _log.error("Could not create random player %r: %s", name, reason)
            result.failures.append(reason)
        else:
            result.created.append(outcome)
    return result
