"""Podium ordering for the top three players."""

from collections.abc import Sequence

from claimboard.services.leaderboard.models import Player

# Display slots as indexes into the ranked list: 2nd, 1st, 3rd.
PODIUM_ORDER = (1, 0, 2)


def podium_order(players: Sequence[Player]) -> list[Player]:
    """Return the top three as [2nd, 1st, 3rd], skipping missing places.

    Examples:
        [A, B, C, D] -> [B, A, C]
        [A, B]       -> [B, A]
        [A]          -> [A]
    """
    return [players[i] for i in PODIUM_ORDER if i < len(players)]
