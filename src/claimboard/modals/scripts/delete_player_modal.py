"""DeletePlayerModal - pick which player to delete."""

from typing import ClassVar

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import Button, OptionList, Static
from textual.widgets.option_list import Option

from claimboard.services.leaderboard import Player

NO_PLAYERS_MESSAGE = "No players to delete."


class DeletePlayerModal(ModalScreen[Player | None]):
    """Lists players; returns the chosen Player, or None on cancel.

    Layout:
    +--------------------------------+
    |        Delete a Player         |
    +--------------------------------+
    |  1  Ann                 50 pts |
    |  2  Bo                  30 pts |
    +--------------------------------+
    |                     [Cancel]   |
    +--------------------------------+
    """

    CSS_PATH = "../../styles/modal_base.tcss"

    DEFAULT_CSS = """
    DeletePlayerModal {
        align: center middle;
        background: black 50%;
    }
    """

    AUTO_FOCUS = "#player-options"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, players: tuple[Player, ...]) -> None:
        super().__init__()
        self._players = players

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="container"):
            yield Static("Delete a Player", classes="modal-title")
            if self._players:
                yield OptionList(
                    *(
                        Option(
                            f"{p.rank:>3}  {escape(p.name)}  [dim]{p.points} pts[/dim]",
                            id=str(index),
                        )
                        for index, p in enumerate(self._players)
                    ),
                    id="player-options",
                )
            else:
                yield Static(NO_PLAYERS_MESSAGE, id="empty-message")
            with Horizontal(classes="button-row"):
                yield Button("Cancel", id="cancel-btn", variant="default")

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.dismiss(self._players[int(str(event.option.id))])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "cancel-btn":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
