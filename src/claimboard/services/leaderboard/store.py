"""PlayerListStore - last-fetched player list plus the status of fetching it.

The list is only ever replaced by a successful fetch from the service.
Mutations elsewhere never touch it; they call ``refresh()`` afterwards.

Overlapping refreshes are ordered by a sequence number: a response is
applied only when no later-issued refresh has been applied already, so a
slow, stale response cannot overwrite a newer list.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from claimboard.services.leaderboard.client import (
    LeaderboardClient,
    LeaderboardError,
    ServiceUnreachableError,
)
from claimboard.services.leaderboard.models import Player

_log = logging.getLogger(__name__)

Listener = Callable[[], None]


def fetch_error_message(exc: LeaderboardError, base_url: str) -> str:
    """Banner text for a failed list fetch."""
    if isinstance(exc, ServiceUnreachableError):
        return (
            f"Network Error: Cannot connect to the server at {base_url}. "
            "Please make sure the leaderboard service is running."
        )
    if exc.detail:
        return f"An error occurred: {exc.detail}"
    return "An error occurred while loading players."


class PlayerListStore:
    """Holds the ranked player list exactly as the service last returned it."""

    def __init__(self, client: LeaderboardClient) -> None:
        self._client = client
        self._players: tuple[Player, ...] = ()
        self._error: str | None = None
        self._in_flight = 0
        self._held = 0
        self._issued = 0
        self._applied = 0
        self._closed = False
        self._listeners: list[Listener] = []

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def loading(self) -> bool:
        """True while a refresh or a held batch operation is running."""
        return self._in_flight > 0 or self._held > 0

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(listener)

    def close(self) -> None:
        """Stop applying results; responses still in flight are discarded."""
        self._closed = True
        self._listeners.clear()

    def _changed(self) -> None:
        if self._closed:
            return
        for listener in list(self._listeners):
            listener()

    @contextmanager
    def hold_loading(self) -> Iterator[None]:
        """Report loading for the duration of the block."""
        self._held += 1
        self._changed()
        try:
            yield
        finally:
            self._held -= 1
            self._changed()

    async def refresh(self) -> bool:
        """Fetch the full list from the service.

        Returns True if the fetch succeeded, whether or not its result was
        applied. Never raises for service failures.
        """
        self._issued += 1
        ticket = self._issued
        self._in_flight += 1
        self._changed()
        try:
            players = await self._client.list_players()
        except LeaderboardError as exc:
            _log.warning("Refreshing players failed: %s", exc.detail or exc)
            if self._is_current(ticket):
                self._error = fetch_error_message(exc, self._client.base_url)
            return False
        else:
            if self._is_current(ticket):
                self._players = players
                self._error = None
            return True
        finally:
            self._in_flight -= 1
            self._changed()

    def _is_current(self, ticket: int) -> bool:
        """Claim the right to apply a response; False for stale or closed."""
        if self._closed:
            return False
        if ticket < self._applied:
            _log.debug("Discarding stale refresh #%d (applied #%d)", ticket, self._applied)
            return False
        self._applied = ticket
        return True
