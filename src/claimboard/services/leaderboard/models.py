"""Player data returned by the leaderboard service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A ranked participant.

    Attributes:
        id: Opaque identifier assigned by the service
        name: Unique display name
        points: Current point total (never negative)
        rank: Dense 1-based position, 1 = most points
    """

    id: str
    name: str
    points: int = 0
    rank: int = 0

    @classmethod
    def from_json(cls, data: dict) -> "Player":
        """Build a Player from a service payload.

        The service names the identifier ``_id``; ``id`` is accepted too.
        Raises KeyError, TypeError or ValueError on malformed payloads.
        """
        player_id = data["_id"] if "_id" in data else data["id"]
        return cls(
            id=str(player_id),
            name=str(data["name"]),
            points=int(data.get("points", 0)),
            rank=int(data.get("rank", 0)),
        )


@dataclass(frozen=True)
class ClaimResult:
    """Outcome of a successful point claim."""

    player: Player
    points_claimed: int

    @classmethod
    def from_json(cls, data: dict) -> "ClaimResult":
        # The claim response may carry a partial user (name only).
        updated = data["updatedUser"]
        player = Player(
            id=str(updated.get("_id", updated.get("id", ""))),
            name=str(updated["name"]),
            points=int(updated.get("points", 0)),
            rank=int(updated.get("rank", 0)),
        )
        return cls(player=player, points_claimed=int(data["pointsClaimed"]))


def parse_player_list(payload: object) -> tuple[Player, ...]:
    """Parse the list endpoint's payload, keeping service order."""
    if not isinstance(payload, list):
        raise TypeError(f"Expected a list of players, got {type(payload).__name__}")
    return tuple(Player.from_json(item) for item in payload)
