"""Leaderboard services: HTTP client, player list state and operator actions."""

from claimboard.services.leaderboard.bulk import (
    BatchResult,
    create_players,
    random_player_names,
)
from claimboard.services.leaderboard.client import (
    LeaderboardClient,
    LeaderboardError,
    ServiceRejectedError,
    ServiceUnreachableError,
    user_message,
)
from claimboard.services.leaderboard.controller import LeaderboardController
from claimboard.services.leaderboard.dialogs import (
    AddPlayer,
    ConfirmDeleteAllPlayers,
    ConfirmDeletePlayer,
    ConfirmResetScores,
    Dialog,
    DialogCoordinator,
    NoDialog,
    PickPlayerToDelete,
)
from claimboard.services.leaderboard.models import ClaimResult, Player
from claimboard.services.leaderboard.notifications import Notifier
from claimboard.services.leaderboard.podium import podium_order
from claimboard.services.leaderboard.selection import Selection
from claimboard.services.leaderboard.store import PlayerListStore

__all__ = [
    "AddPlayer",
    "BatchResult",
    "ClaimResult",
    "ConfirmDeleteAllPlayers",
    "ConfirmDeletePlayer",
    "ConfirmResetScores",
    "Dialog",
    "DialogCoordinator",
    "LeaderboardClient",
    "LeaderboardController",
    "LeaderboardError",
    "NoDialog",
    "Notifier",
    "PickPlayerToDelete",
    "Player",
    "PlayerListStore",
    "Selection",
    "ServiceRejectedError",
    "ServiceUnreachableError",
    "create_players",
    "podium_order",
    "random_player_names",
    "user_message",
]
