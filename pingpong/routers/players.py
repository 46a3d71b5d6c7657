from fastapi import APIRouter, Depends, HTTPException
from typing import List
import logging

from pingpong.dependencies import get_league
from pingpong.league import League
from pingpong.schemas import PlayerOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[PlayerOut])
async def get_players(league: League = Depends(get_league)):
    return [PlayerOut.from_player(p) for p in league.players()]


@router.get("/{name:path}", response_model=PlayerOut)
async def get_player(name: str, league: League = Depends(get_league)):
    logger.info("Fetching player %r", name)

    player = league.get_player(name)
    if player is None:
        logger.warning("Player %r not found.", name)
        raise HTTPException(status_code=404, detail="Player not found.")

    return PlayerOut.from_player(player)
