"""ActionsMenu - bulk administrative actions shown as a popup list.

The menu's visibility is owned by the controller's DialogCoordinator; the
screen toggles ``display`` to match it.
"""

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from claimboard.services.leaderboard.bulk import DEFAULT_BATCH_SIZE


class ActionsMenu(Vertical, can_focus=True):
    """Popup list of actions: generate players, reset scores, delete all."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "close", "Close", show=False),
    ]

    DEFAULT_CSS = """
    ActionsMenu {
        display: none;
        width: auto;
        height: auto;
        background: #1E1F29;
        border: solid #BD93F9 30%;
        padding: 0 1;
        overlay: screen;
        constrain: inside inflect;
    }

    ActionsMenu .menu-header {
        width: 100%;
        height: auto;
        border-bottom: solid #BD93F9 30%;
    }

    ActionsMenu .menu-title {
        width: 1fr;
        color: #F8F8F2;
        text-style: bold;
    }

    ActionsMenu Button {
        width: 100%;
        min-width: 24;
    }
    """

    class CloseRequested(Message):
        """Posted when the operator dismisses the menu with escape."""

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._batch_size = batch_size

    def compose(self) -> ComposeResult:
        with Horizontal(classes="menu-header"):
            yield Static("Actions", classes="menu-title")
        yield Button(
            f"Generate {self._batch_size} Players",
            id="generate-btn",
            variant="primary",
        )
        yield Button("Reset All Scores", id="reset-btn", variant="error")
        yield Button("Delete All Players", id="delete-all-btn", variant="error")

    def set_state(self, *, can_generate: bool, has_players: bool) -> None:
        """Enable or disable entries for the current list state."""
        self.query_one("#generate-btn", Button).disabled = not can_generate
        self.query_one("#reset-btn", Button).disabled = not has_players
        self.query_one("#delete-all-btn", Button).disabled = not has_players

    def action_close(self) -> None:
        self.post_message(self.CloseRequested())
