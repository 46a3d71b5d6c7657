import logging
import re
import threading
from collections import deque
from datetime import datetime
from typing import List

from pingpong import config, elo
from pingpong.models import MatchResult, Player
from pingpong.registry import PlayerRegistry

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


class ScoreValidationError(ValueError):
    """Raised when a submitted score is not an integer."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be an integer, got {value!r}")


def parse_score(raw, field):
    if isinstance(raw, bool):
        raise ScoreValidationError(field, raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER.fullmatch(raw.strip()):
        return int(raw.strip())
    raise ScoreValidationError(field, raw)


class League:
    """Owns the player registry and the recent-match feed for one process.

    Route handlers may run concurrently, so the find-both-players then
    update-both-players sequence is held under a single lock.
    """

    def __init__(self, recent_limit: int = config.RECENT_MATCHES_LIMIT, tz=config.TIMEZONE):
        self.registry = PlayerRegistry()
        self.recent_limit = recent_limit
        self.tz = tz
        self._recent = deque(maxlen=recent_limit)
        self._lock = threading.RLock()

    def record_match(self, player1_name: str, score1, player2_name: str, score2) -> MatchResult:
        # Parse everything first so a bad submission leaves no trace
        try:
            score1 = parse_score(score1, "score1")
            score2 = parse_score(score2, "score2")
        except ScoreValidationError as e:
            logger.warning("Rejected match %r vs %r: %s", player1_name, player2_name, e)
            raise

        with self._lock:
            player1 = self.registry.find_or_create(player1_name)
            player2 = self.registry.find_or_create(player2_name)

            winner, change1, change2 = elo.apply_match(player1, score1, player2, score2)

            result = MatchResult(
                player1=player1_name,
                score1=score1,
                player2=player2_name,
                score2=score2,
                winner=winner,
                player1_rating=player1.rating,
                player2_rating=player2.rating,
                player1_change=change1,
                player2_change=change2,
                played_at=datetime.now(self.tz),
            )
            self._recent.appendleft(result)

        logger.info(
            "Recorded match: %s. Winner: %s (%s %+d, %s %+d)",
            result.summary(), winner,
            player1_name, result.player1_change, player2_name, result.player2_change,
        )
        return result

    def recent_matches(self) -> List[MatchResult]:
        with self._lock:
            return list(self._recent)

    def leaderboard(self) -> List[Player]:
        with self._lock:
            return self.registry.leaderboard()

    def players(self) -> List[Player]:
        with self._lock:
            return self.registry.all()

    def get_player(self, name: str):
        with self._lock:
            return self.registry.get(name)
