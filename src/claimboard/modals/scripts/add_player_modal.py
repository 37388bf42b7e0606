"""AddPlayerModal - form for adding a single player.

The modal stays open when the service rejects the name (for example a
duplicate) so the operator can correct it. A blank name does nothing.
"""

from typing import ClassVar

from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from claimboard.services.leaderboard import LeaderboardController


class AddPlayerModal(ModalScreen[bool]):
    """Modal for adding a player.

    Returns True once the player was created, False on cancel.
    """

    CSS_PATH = "../../styles/modal_base.tcss"

    DEFAULT_CSS = """
    AddPlayerModal {
        align: center middle;
        background: black 50%;
    }
    """

    AUTO_FOCUS = "#name-input"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, controller: LeaderboardController) -> None:
        super().__init__()
        self._controller = controller

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="container"):
            yield Static("Add a New Player", classes="modal-title")
            yield Input(placeholder="Enter new player name", id="name-input")
            with Horizontal(classes="button-row"):
                yield Button("Cancel", id="cancel-btn", variant="default")
                yield Button("Add Player", id="add-btn", variant="primary")

    @on(Input.Submitted, "#name-input")
    def _on_name_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit(event.value)

    @work(exclusive=True)
    async def _submit(self, name: str) -> None:
        if await self._controller.submit_add_player(name):
            self.dismiss(True)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        match event.button.id:
            case "add-btn":
                self._submit(self.query_one("#name-input", Input).value)
            case "cancel-btn":
                self.action_cancel()

    def action_cancel(self) -> None:
        self._controller.cancel_dialog()
        self.dismiss(False)
