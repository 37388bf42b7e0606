"""Leaderboard API client.

Uses httpx to talk to the leaderboard service's REST API. Every failure is
reduced to one of two errors: the service could not be reached at all, or
it answered with an error.
"""

import logging

import httpx

from claimboard.services.leaderboard.models import (
    ClaimResult,
    Player,
    parse_player_list,
)

_log = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 10.0

MALFORMED_RESPONSE = "Malformed response from server"


class LeaderboardError(Exception):
    """Error from leaderboard service interaction."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class ServiceUnreachableError(LeaderboardError):
    """The service could not be reached (connect failure, timeout, ...)."""


class ServiceRejectedError(LeaderboardError):
    """The service responded, but with an error."""

    def __init__(self, detail: str = "", status_code: int = 0) -> None:
        super().__init__(detail)
        self.status_code = status_code


class LeaderboardClient:
    """Async HTTP client for the leaderboard REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Extract the human-readable ``message`` from an error response."""
        try:
            data = response.json()
        except ValueError:
            return ""
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return ""

    async def _request(self, method: str, url: str, **kwargs) -> object:
        """Make an API request and return decoded JSON, raising on errors."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            _log.warning("%s %s failed: %s", method, url, exc)
            raise ServiceUnreachableError(str(exc)) from exc
        except httpx.RequestError as exc:
            # Reached the service, but the exchange could not be completed
            # (undecodable body, redirect loop).
            _log.warning("%s %s failed: %s", method, url, exc)
            raise ServiceRejectedError(MALFORMED_RESPONSE) from exc

        if response.status_code >= 400:
            message = self._extract_error_message(response)
            _log.warning(
                "%s %s returned %d: %s", method, url, response.status_code, message
            )
            raise ServiceRejectedError(message, status_code=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceRejectedError(
                MALFORMED_RESPONSE, status_code=response.status_code
            ) from exc

    async def list_players(self) -> tuple[Player, ...]:
        """Fetch all players in rank order."""
        data = await self._request("GET", "/users")
        try:
            return parse_player_list(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ServiceRejectedError(MALFORMED_RESPONSE) from exc

    async def create_player(self, name: str, points: int | None = None) -> Player:
        """Create a player. Duplicate names are rejected by the service."""
        body: dict[str, object] = {"name": name}
        if points is not None:
            body["points"] = points
        data = await self._request("POST", "/users", json=body)
        try:
            return Player.from_json(data)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ServiceRejectedError(MALFORMED_RESPONSE) from exc

    async def claim_points(self, player_id: str) -> ClaimResult:
        """Ask the service to award points to a player."""
        data = await self._request("POST", f"/users/{player_id}/claim")
        try:
            return ClaimResult.from_json(data)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ServiceRejectedError(MALFORMED_RESPONSE) from exc

    async def reset_scores(self) -> None:
        """Reset every player's points to zero."""
        await self._request("POST", "/users/clear-scores")

    async def delete_player(self, player_id: str) -> None:
        """Delete a single player."""
        await self._request("DELETE", f"/users/{player_id}")

    async def delete_all_players(self) -> None:
        """Delete every player."""
        await self._request("DELETE", "/users")


def user_message(exc: LeaderboardError, fallback: str) -> str:
    """Turn a mutation failure into notification text."""
    if isinstance(exc, ServiceUnreachableError):
        return "Network Error: Check server connection."
    return f"Error: {exc.detail}" if exc.detail else fallback
