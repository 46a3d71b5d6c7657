from typing import Any, Optional
from pydantic import BaseModel
from datetime import datetime


class MatchSubmission(BaseModel):
    player1: str
    player2: str
    # Kept raw so the league can report which score failed to parse
    score1: Any
    score2: Any


class PlayerOut(BaseModel):
    name: str
    rating: int
    matches: int

    @classmethod
    def from_player(cls, player):
        return cls(name=player.name, rating=player.rating, matches=player.games_played)


class RankingOut(PlayerOut):
    rank: int


class MatchOut(BaseModel):
    player1: str
    player2: str
    score1: int
    score2: int
    winner: str
    player1_rating: int
    player2_rating: int
    player1_change: int
    player2_change: int
    summary: str
    timestamp: Optional[str] = None

    @classmethod
    def from_result(cls, result):
        return cls(
            player1=result.player1,
            player2=result.player2,
            score1=result.score1,
            score2=result.score2,
            winner=result.winner,
            player1_rating=result.player1_rating,
            player2_rating=result.player2_rating,
            player1_change=result.player1_change,
            player2_change=result.player2_change,
            summary=result.summary(),
            timestamp=format_timestamp(result.played_at),
        )


class MatchRecorded(BaseModel):
    message: str
    winner: str
    player1: PlayerOut
    player2: PlayerOut
    match: MatchOut


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return f"{dt.day} {dt.strftime('%b %Y, %H:%M')}"
