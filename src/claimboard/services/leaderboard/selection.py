"""Selection - which player a point claim targets."""

from claimboard.services.leaderboard.models import Player


class Selection:
    """Tracks the selected player id against the current player list.

    Invariant: with a non-empty list the selection is always a player in
    that list; with an empty list there is no selection.
    """

    def __init__(self) -> None:
        self._player_id: str | None = None
        self._players: tuple[Player, ...] = ()

    @property
    def player_id(self) -> str | None:
        return self._player_id

    @property
    def player(self) -> Player | None:
        """The selected Player from the current list, if any."""
        return next((p for p in self._players if p.id == self._player_id), None)

    def select(self, player_id: str) -> bool:
        """Select ``player_id`` if it is in the current list.

        Ids from a previous list are ignored. Returns True if applied.
        """
        if not any(p.id == player_id for p in self._players):
            return False
        self._player_id = player_id
        return True

    def reconcile(self, players: tuple[Player, ...]) -> None:
        """Re-validate the selection against a freshly fetched list."""
        self._players = players
        if not players:
            self._player_id = None
        elif self.player is None:
            self._player_id = players[0].id
