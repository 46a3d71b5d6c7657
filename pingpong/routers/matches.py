from fastapi import APIRouter, Depends, HTTPException
from typing import List
import logging

from pingpong.dependencies import get_league
from pingpong.league import League, ScoreValidationError
from pingpong.schemas import MatchSubmission, MatchOut, MatchRecorded, PlayerOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/", response_model=MatchRecorded)
async def submit_match(submission: MatchSubmission, league: League = Depends(get_league)):
    logger.info("Received match submission: %s", submission.model_dump())

    try:
        result = league.record_match(
            submission.player1, submission.score1,
            submission.player2, submission.score2,
        )
    except ScoreValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    player1 = league.get_player(result.player1)
    player2 = league.get_player(result.player2)

    return MatchRecorded(
        message="Match successfully recorded",
        winner=result.winner,
        player1=PlayerOut.from_player(player1),
        player2=PlayerOut.from_player(player2),
        match=MatchOut.from_result(result),
    )


@router.get("/", response_model=List[MatchOut])
async def get_matches(league: League = Depends(get_league)):
    # Newest first
    return [MatchOut.from_result(m) for m in league.recent_matches()]
