import logging
from typing import Dict, List, Optional

from pingpong.models import Player

logger = logging.getLogger(__name__)


class PlayerRegistry:
    """Insertion-ordered players keyed by exact name.

    Names are compared as given: no case folding and no whitespace trimming,
    so "Bob", "bob" and " Bob" are three different players.
    """

    def __init__(self):
        self._players: Dict[str, Player] = {}

    def find_or_create(self, name: str) -> Player:
        player = self._players.get(name)
        if player is None:
            player = Player(name)
            self._players[name] = player
            logger.info("Created player %r with rating %d", name, player.rating)
        return player

    def get(self, name: str) -> Optional[Player]:
        return self._players.get(name)

    def all(self) -> List[Player]:
        return list(self._players.values())

    def leaderboard(self) -> List[Player]:
        # sorted() is stable, so equal ratings keep insertion order
        return sorted(self._players.values(), key=lambda p: -p.rating)

    def __len__(self):
        return len(self._players)

    def __contains__(self, name):
        return name in self._players

    def __iter__(self):
        return iter(self.all())
