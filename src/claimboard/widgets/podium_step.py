"""PodiumStep widget - one place on the podium.

Layout:
+-----------+
|     1     |
|    Ann    |
|  50 pts   |
+-----------+
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalGroup
from textual.widgets import Label, Static

from claimboard.services.leaderboard import Player


class PodiumStep(VerticalGroup):
    """Display card for a top-three player, styled by rank."""

    DEFAULT_CSS = """
    PodiumStep {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border: tall $surface;
        content-align: center bottom;

        &.rank-1 {
            border: tall #FFD700;
            min-height: 7;
        }

        &.rank-2 {
            border: tall #C0C0C0;
            min-height: 6;
        }

        &.rank-3 {
            border: tall #CD7F32;
            min-height: 5;
        }

        Label, Static {
            width: 100%;
            text-align: center;
        }

        .podium-rank {
            text-style: bold;
        }

        .podium-points {
            color: $text-muted;
        }
    }
    """

    def __init__(self, player: Player) -> None:
        super().__init__(classes=f"rank-{player.rank}")
        self._player = player

    @property
    def player(self) -> Player:
        return self._player

    def compose(self) -> ComposeResult:
        yield Label(str(self._player.rank), classes="podium-rank")
        yield Static(escape(self._player.name), classes="podium-name")
        yield Static(f"{self._player.points} pts", classes="podium-points")
