from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from typing import List
import uvicorn
import logging

from pingpong import config
from pingpong.dependencies import get_league
from pingpong.league import League
from pingpong.schemas import RankingOut
from pingpong.routers.players import router as players_router
from pingpong.routers.matches import router as matches_router

# ✅ Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# ✅ Initialize FastAPI app with redirect_slashes=False to avoid automatic redirects
app = FastAPI(title="Ping Pong Elo Rankings", redirect_slashes=False)

# ✅ All players and matches live here for the lifetime of the process
app.state.league = League()

# ✅ CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ✅ Health check
@app.get("/")
async def home():
    return {"message": "Ping Pong Rankings API is running!"}


# ✅ Rankings endpoint
@app.get("/rankings", response_model=List[RankingOut])
async def get_rankings(league: League = Depends(get_league)):
    return [
        RankingOut(rank=i, name=p.name, rating=p.rating, matches=p.games_played)
        for i, p in enumerate(league.leaderboard(), start=1)
    ]


# ✅ Register routers
app.include_router(players_router, prefix="/players", tags=["Players"])
app.include_router(matches_router, prefix="/matches", tags=["Matches"])


def run():
    logger.info("Starting server on %s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
