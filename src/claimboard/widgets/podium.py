"""Podium widget - top three players shown as 2nd, 1st, 3rd."""

from collections.abc import Sequence

from textual.containers import Horizontal

from claimboard.services.leaderboard import Player, podium_order
from claimboard.widgets.podium_step import PodiumStep


class Podium(Horizontal):
    """Row of PodiumSteps rebuilt whenever the ranked list changes."""

    DEFAULT_CSS = """
    Podium {
        height: auto;
        align: center bottom;
        margin: 1 0;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._shown: tuple[Player, ...] = ()

    def update_players(self, players: Sequence[Player]) -> None:
        """Rebuild the podium from the full ranked list."""
        ordered = tuple(podium_order(players))
        if ordered == self._shown:
            return
        self._shown = ordered
        self.remove_children()
        self.mount_all(PodiumStep(player) for player in ordered)
