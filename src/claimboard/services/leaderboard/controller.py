"""LeaderboardController - operator actions against the leaderboard service.

Ties together the player list store, the selection, the notifier and the
dialog coordinator. Every mutation follows the same shape: issue the
request, turn the outcome into a notification, then re-fetch the list.
Nothing here edits the player list directly.

All mutation failures are caught and reported through the notifier; no
method raises for a service error.
"""

import logging
import random
from collections.abc import Callable

from claimboard.services.leaderboard.bulk import (
    DEFAULT_BATCH_SIZE,
    BatchResult,
    create_players,
    random_player_names,
)
from claimboard.services.leaderboard.client import (
    LeaderboardClient,
    LeaderboardError,
    user_message,
)
from claimboard.services.leaderboard.dialogs import (
    AddPlayer,
    ConfirmDeleteAllPlayers,
    ConfirmDeletePlayer,
    ConfirmResetScores,
    DialogCoordinator,
    PickPlayerToDelete,
)
from claimboard.services.leaderboard.models import Player
from claimboard.services.leaderboard.notifications import (
    DEFAULT_NOTIFICATION_SECONDS,
    Notifier,
    SetTimer,
)
from claimboard.services.leaderboard.podium import podium_order
from claimboard.services.leaderboard.selection import Selection
from claimboard.services.leaderboard.store import PlayerListStore

_log = logging.getLogger(__name__)

SELECT_PLAYER_FIRST = "Please select a player first."


class LeaderboardController:
    """Operator-facing state and actions for one leaderboard session."""

    def __init__(
        self,
        client: LeaderboardClient,
        notification_seconds: float = DEFAULT_NOTIFICATION_SECONDS,
        batch_size: int = DEFAULT_BATCH_SIZE,
        rng: random.Random | None = None,
        set_timer: SetTimer | None = None,
    ) -> None:
        self._client = client
        self._batch_size = batch_size
        self._rng = rng or random.Random()
        self._listeners: list[Callable[[], None]] = []
        self._closed = False

        self.store = PlayerListStore(client)
        self.selection = Selection()
        self.notifier = Notifier(
            notification_seconds, on_change=self._on_notification, set_timer=set_timer
        )
        self.dialogs = DialogCoordinator(on_change=self._emit)

        self.store.subscribe(self._on_store_changed)

    # ── state ────────────────────────────────────────────────────────

    @property
    def players(self) -> tuple[Player, ...]:
        return self.store.players

    @property
    def podium(self) -> list[Player]:
        return podium_order(self.store.players)

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def can_generate(self) -> bool:
        return not self.store.loading

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after any state change."""
        self._listeners.append(listener)

    def close(self) -> None:
        """Tear down: results of requests still in flight are dropped."""
        self._closed = True
        self._listeners.clear()
        self.store.close()
        self.notifier.clear()

    def _emit(self) -> None:
        if self._closed:
            return
        for listener in list(self._listeners):
            listener()

    def _on_store_changed(self) -> None:
        self.selection.reconcile(self.store.players)
        self._emit()

    def _on_notification(self, _message: str) -> None:
        self._emit()

    def _notify(self, message: str) -> None:
        if not self._closed:
            self.notifier.show(message)

    # ── list & selection ─────────────────────────────────────────────

    async def refresh(self) -> bool:
        """Re-fetch the player list from the service."""
        if self._closed:
            return False
        return await self.store.refresh()

    def select_player(self, player_id: str) -> bool:
        applied = self.selection.select(player_id)
        if applied:
            self._emit()
        return applied

    # ── claim ────────────────────────────────────────────────────────

    async def claim_points(self) -> bool:
        """Claim points for the selected player."""
        player_id = self.selection.player_id
        if player_id is None:
            self._notify(SELECT_PLAYER_FIRST)
            return False

        try:
            result = await self._client.claim_points(player_id)
        except LeaderboardError as exc:
            self._notify(user_message(exc, "Failed to claim points."))
            return False

        _log.info(
            "Claimed %d points for %s", result.points_claimed, result.player.name
        )
        self._notify(
            f"You claimed {result.points_claimed} points for {result.player.name}!"
        )
        await self.refresh()
        return True

    # ── bulk generate ────────────────────────────────────────────────

    async def generate_players(self) -> BatchResult | None:
        """Create a batch of randomly named players concurrently.

        Returns None if the controller was closed before the batch settled.
        """
        names = random_player_names(self._batch_size, self._rng)
        with self.store.hold_loading():
            result = await create_players(self._client, names)

        if self._closed:
            return None

        if result.created_count > 0:
            self._notify(f"Generated {result.created_count} new random players!")
            await self.refresh()
        else:
            self._notify("Failed to generate new players. They might already exist.")
        return result

    # ── dialogs ──────────────────────────────────────────────────────

    def open_add_player(self) -> bool:
        return self.dialogs.open(AddPlayer())

    def open_delete_player(self) -> bool:
        return self.dialogs.open(PickPlayerToDelete())

    def open_reset_scores(self) -> bool:
        if not self.players:
            return False
        return self.dialogs.open(ConfirmResetScores())

    def open_delete_all(self) -> bool:
        if not self.players:
            return False
        return self.dialogs.open(ConfirmDeleteAllPlayers())

    def choose_player_to_delete(self, player: Player) -> bool:
        return self.dialogs.choose_player(player)

    def toggle_actions_menu(self) -> bool:
        return self.dialogs.toggle_actions_menu()

    def cancel_dialog(self) -> None:
        """Close the open dialog without touching the service."""
        self.dialogs.close()

    async def submit_add_player(self, name: str) -> bool:
        """Create a player from the Add Player dialog.

        A blank name is ignored silently. On failure the dialog stays open
        so the name can be corrected.
        """
        if not isinstance(self.dialogs.current, AddPlayer):
            return False
        name = name.strip()
        if not name:
            return False

        try:
            player = await self._client.create_player(name)
        except LeaderboardError as exc:
            self._notify(user_message(exc, "Failed to add player."))
            return False

        _log.info("Added player %s", player.name)
        self.dialogs.close()
        self._notify(f'Player "{player.name}" added successfully!')
        await self.refresh()
        return True

    async def confirm_dialog(self) -> bool:
        """Run the destructive action of the open confirmation dialog.

        The dialog is closed whatever the outcome, then the list is
        re-fetched. Returns True if the service accepted the request.
        """
        dialog = self.dialogs.current
        match dialog:
            case ConfirmResetScores():
                action = self._client.reset_scores()
                success = "All scores have been cleared successfully."
                failure = "Failed to clear scores."
            case ConfirmDeleteAllPlayers():
                action = self._client.delete_all_players()
                success = "All players have been deleted."
                failure = "Failed to delete all players."
            case ConfirmDeletePlayer(player=player):
                action = self._client.delete_player(player.id)
                success = f'Player "{player.name}" was deleted.'
                failure = "Failed to delete player."
            case _:
                return False

        try:
            await action
        except LeaderboardError as exc:
            ok = False
            message = user_message(exc, failure)
        else:
            ok = True
            message = success
            _log.info("%s", success)

        if self._closed:
            return ok
        self.dialogs.close()
        self._notify(message)
        await self.refresh()
        return ok
