"""Tests for concurrent bulk player generation."""

import asyncio
import random
from unittest.mock import AsyncMock, patch

import pytest

from claimboard.services.leaderboard import (
    LeaderboardController,
    Player,
    ServiceRejectedError,
    ServiceUnreachableError,
    create_players,
    random_player_names,
)
from claimboard.services.leaderboard.bulk import ADJECTIVES, NOUNS


def _outcomes(successes: int, total: int = 10) -> list[object]:
    created = [Player(id=f"n{i}", name=f"Name {i}") for i in range(successes)]
    failed = [
        ServiceRejectedError("User with this name already exists.", 400)
        for _ in range(total - successes)
    ]
    return [*created, *failed]


class TestRandomNames:
    def test_names_come_from_word_lists(self) -> None:
        names = random_player_names(50, random.Random(3))

        assert len(names) == 50
        for name in names:
            adjective, noun = name.split(" ")
            assert adjective in ADJECTIVES
            assert noun in NOUNS

    def test_seeded_rng_is_deterministic(self) -> None:
        assert random_player_names(10, random.Random(42)) == random_player_names(
            10, random.Random(42)
        )


class TestCreatePlayers:
    async def test_requests_run_concurrently(self) -> None:
        """All creates are in flight before any completes."""
        in_flight = 0
        peak = 0

        async def create(name: str, points: int | None = None) -> Player:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return Player(id=name, name=name)

        client = AsyncMock()
        client.create_player.side_effect = create

        result = await create_players(client, [f"P{i}" for i in range(10)])

        assert peak == 10
        assert result.created_count == 10

    async def test_failures_do_not_abort_others(self) -> None:
        client = AsyncMock()
        client.create_player.side_effect = [
            ServiceUnreachableError("refused"),
            Player(id="1", name="B"),
            ServiceRejectedError("duplicate", 400),
            Player(id="2", name="D"),
        ]

        result = await create_players(client, ["A", "B", "C", "D"])

        assert [p.name for p in result.created] == ["B", "D"]
        assert result.failures == ["refused", "duplicate"]

    async def test_unexpected_exception_counts_as_failure(self) -> None:
        client = AsyncMock()
        client.create_player.side_effect = [RuntimeError("bug"), Player(id="1", name="B")]

        result = await create_players(client, ["A", "B"])

        assert result.failed_count == 1
        assert result.created_count == 1

    async def test_sends_zero_points(self) -> None:
        client = AsyncMock()
        client.create_player.return_value = Player(id="1", name="A")

        await create_players(client, ["A"])

        client.create_player.assert_awaited_once_with("A", 0)


class TestGeneratePlayers:
    @pytest.mark.parametrize("successes", [0, 1, 5, 9, 10])
    async def test_aggregate_outcome(
        self, mock_client: AsyncMock, successes: int
    ) -> None:
        mock_client.create_player.side_effect = _outcomes(successes)
        controller = LeaderboardController(mock_client, rng=random.Random(0))

        with patch.object(controller.notifier, "show") as show:
            result = await controller.generate_players()
        notifications = [call.args[0] for call in show.call_args_list]

        assert result is not None
        assert result.created_count == successes
        assert mock_client.create_player.await_count == 10
        assert len(notifications) == 1
        if successes:
            assert notifications[0] == f"Generated {successes} new random players!"
            mock_client.list_players.assert_awaited_once()
        else:
            assert "might already exist" in notifications[0]
            mock_client.list_players.assert_not_awaited()

    async def test_loading_held_for_whole_batch(self, mock_client: AsyncMock) -> None:
        controller = LeaderboardController(mock_client)
        seen_loading: list[bool] = []

        async def create(name: str, points: int | None = None) -> Player:
            seen_loading.append(controller.store.loading)
            raise ServiceRejectedError("duplicate", 400)

        mock_client.create_player.side_effect = create

        await controller.generate_players()

        assert seen_loading and all(seen_loading)
        assert controller.store.loading is False
        assert controller.can_generate is True
        controller.notifier.clear()

    async def test_batch_size_is_configurable(self, mock_client: AsyncMock) -> None:
        mock_client.create_player.side_effect = _outcomes(3, total=3)
        controller = LeaderboardController(mock_client, batch_size=3)

        result = await controller.generate_players()

        assert result.created_count == 3
        assert mock_client.create_player.await_count == 3
        controller.notifier.clear()

    async def test_closed_controller_discards_result(
        self, mock_client: AsyncMock
    ) -> None:
        controller = LeaderboardController(mock_client)

        async def create(name: str, points: int | None = None) -> Player:
            controller.close()
            return Player(id=name, name=name)

        mock_client.create_player.side_effect = create

        assert await controller.generate_players() is None
        assert controller.notifier.message == ""
        mock_client.list_players.assert_not_awaited()
