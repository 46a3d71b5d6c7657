from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pingpong.elo import DEFAULT_RATING


class Player:
    """A registered player. Only `PlayerRegistry` should construct these."""

    __slots__ = ("_name", "rating", "games_played")

    def __init__(self, name: str, rating: int = DEFAULT_RATING):
        self._name = name
        self.rating = rating
        self.games_played = 0

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self):
        return f"Player(name={self._name!r}, rating={self.rating}, games_played={self.games_played})"


@dataclass(frozen=True)
class MatchResult:
    player1: str
    score1: int
    player2: str
    score2: int
    winner: str
    player1_rating: int
    player2_rating: int
    player1_change: int
    player2_change: int
    played_at: Optional[datetime] = field(default=None, compare=False)

    def summary(self) -> str:
        return f"{self.player1} vs. {self.player2} | Score: {self.score1} - {self.score2}"
