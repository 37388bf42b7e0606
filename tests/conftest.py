"""Shared test fixtures for claimboard tests."""

import itertools
import json
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import httpx
import pytest

from claimboard.services.leaderboard import (
    LeaderboardClient,
    LeaderboardController,
    Player,
)

API_URL = "http://leaderboard.test/api"
DUPLICATE_NAME_MESSAGE = "User with this name already exists."


class FakeLeaderboardService:
    """In-memory stand-in for the leaderboard REST API.

    Ranks are dense and recomputed on every read, highest points first.
    Set ``unreachable`` to make every request fail with a connect error, or
    put ``(method, path)`` keys in ``failures`` to answer with an error.
    """

    def __init__(self, points_per_claim: int = 7) -> None:
        self.users: list[dict] = []
        self.requests: list[tuple[str, str]] = []
        self.failures: dict[tuple[str, str], tuple[int, dict]] = {}
        self.unreachable = False
        self.points_per_claim = points_per_claim
        self._ids = itertools.count(1)

    def add(self, name: str, points: int = 0) -> dict:
        user = {"_id": f"u{next(self._ids)}", "name": name, "points": points}
        self.users.append(user)
        return user

    def ranked(self) -> list[dict]:
        ordered = sorted(self.users, key=lambda u: -u["points"])
        return [{**u, "rank": rank} for rank, u in enumerate(ordered, start=1)]

    def count(self, method: str, path: str) -> int:
        return self.requests.count((method, path))

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/api")
        self.requests.append((request.method, path))

        if self.unreachable:
            raise httpx.ConnectError("Connection refused", request=request)
        if (request.method, path) in self.failures:
            status, body = self.failures[(request.method, path)]
            return httpx.Response(status, json=body)

        parts = path.strip("/").split("/")
        match request.method, parts:
            case "GET", ["users"]:
                return httpx.Response(200, json=self.ranked())
            case "POST", ["users"]:
                return self._create(request)
            case "POST", ["users", "clear-scores"]:
                for user in self.users:
                    user["points"] = 0
                return httpx.Response(200, json={"message": "All scores cleared"})
            case "POST", ["users", user_id, "claim"]:
                return self._claim(user_id)
            case "DELETE", ["users"]:
                self.users.clear()
                return httpx.Response(200, json={"message": "All users deleted"})
            case "DELETE", ["users", user_id]:
                before = len(self.users)
                self.users = [u for u in self.users if u["_id"] != user_id]
                if len(self.users) == before:
                    return httpx.Response(404, json={"message": "User not found"})
                return httpx.Response(200, json={"message": "User deleted"})
        return httpx.Response(404, json={"message": "Not found"})

    def _create(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        name = payload.get("name", "").strip()
        if not name:
            return httpx.Response(400, json={"message": "Name is required"})
        if any(u["name"] == name for u in self.users):
            return httpx.Response(400, json={"message": DUPLICATE_NAME_MESSAGE})
        user = self.add(name, payload.get("points", 0))
        return httpx.Response(201, json=user)

    def _claim(self, user_id: str) -> httpx.Response:
        user = next((u for u in self.users if u["_id"] == user_id), None)
        if user is None:
            return httpx.Response(404, json={"message": "User not found"})
        user["points"] += self.points_per_claim
        return httpx.Response(
            200,
            json={"updatedUser": user, "pointsClaimed": self.points_per_claim},
        )


@pytest.fixture
def fake_service() -> FakeLeaderboardService:
    """Leaderboard service with no users."""
    return FakeLeaderboardService()


@pytest.fixture
async def client(
    fake_service: FakeLeaderboardService,
) -> AsyncGenerator[LeaderboardClient, None]:
    """LeaderboardClient wired to the fake service."""
    client = LeaderboardClient(
        API_URL, transport=httpx.MockTransport(fake_service.handle)
    )
    yield client
    await client.aclose()


@pytest.fixture
def controller(client: LeaderboardClient) -> LeaderboardController:
    """Controller over the fake service with a short notification window."""
    return LeaderboardController(client, notification_seconds=0.5)


@pytest.fixture
def mock_client() -> AsyncMock:
    """AsyncMock LeaderboardClient returning an empty list by default."""
    mock = AsyncMock(spec=LeaderboardClient)
    mock.base_url = API_URL
    mock.list_players.return_value = ()
    return mock


@pytest.fixture
def ann_and_bo() -> tuple[Player, ...]:
    """Two ranked players: Ann first, Bo second."""
    return (
        Player(id="a", name="Ann", points=50, rank=1),
        Player(id="b", name="Bo", points=30, rank=2),
    )
