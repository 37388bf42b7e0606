"""DialogCoordinator - which dialog currently governs operator input.

Dialogs form one tagged variant, so at most one is ever open. The actions
menu is not a dialog; it is a separate flag that any dialog closes.

Flow:
    NoDialog --open--> AddPlayer | PickPlayerToDelete | ConfirmResetScores
                       | ConfirmDeleteAllPlayers
    PickPlayerToDelete --choose_player--> ConfirmDeletePlayer(player)
    any --close--> NoDialog
"""

from collections.abc import Callable
from dataclasses import dataclass

from claimboard.services.leaderboard.models import Player


@dataclass(frozen=True)
class NoDialog:
    pass


@dataclass(frozen=True)
class AddPlayer:
    pass


@dataclass(frozen=True)
class PickPlayerToDelete:
    pass


@dataclass(frozen=True)
class ConfirmDeletePlayer:
    player: Player


@dataclass(frozen=True)
class ConfirmResetScores:
    pass


@dataclass(frozen=True)
class ConfirmDeleteAllPlayers:
    pass


Dialog = (
    NoDialog
    | AddPlayer
    | PickPlayerToDelete
    | ConfirmDeletePlayer
    | ConfirmResetScores
    | ConfirmDeleteAllPlayers
)

NO_DIALOG = NoDialog()


class DialogCoordinator:
    """Single-selection state machine over the dialog variants."""

    def __init__(self, on_change: Callable[[], None] | None = None) -> None:
        self._current: Dialog = NO_DIALOG
        self._actions_menu_open = False
        self._on_change = on_change

    @property
    def current(self) -> Dialog:
        return self._current

    @property
    def is_open(self) -> bool:
        return not isinstance(self._current, NoDialog)

    @property
    def actions_menu_open(self) -> bool:
        return self._actions_menu_open

    def open(self, dialog: Dialog) -> bool:
        """Open ``dialog`` unless another one is already open.

        Opening a dialog closes the actions menu. Returns False (and changes
        nothing) when a dialog is already open.
        """
        if isinstance(dialog, NoDialog):
            raise ValueError("Use close() to dismiss dialogs")
        if self.is_open:
            return False
        self._current = dialog
        self._actions_menu_open = False
        self._changed()
        return True

    def choose_player(self, player: Player) -> bool:
        """Move from the delete picker to the confirmation for ``player``."""
        if not isinstance(self._current, PickPlayerToDelete):
            return False
        self._current = ConfirmDeletePlayer(player)
        self._changed()
        return True

    def close(self) -> Dialog:
        """Close the open dialog, discarding its context. Returns it."""
        previous = self._current
        self._current = NO_DIALOG
        if previous != NO_DIALOG:
            self._changed()
        return previous

    def toggle_actions_menu(self) -> bool:
        """Flip the actions menu; it stays shut while a dialog is open."""
        self._actions_menu_open = not self._actions_menu_open and not self.is_open
        self._changed()
        return self._actions_menu_open

    def close_actions_menu(self) -> None:
        if self._actions_menu_open:
            self._actions_menu_open = False
            self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
