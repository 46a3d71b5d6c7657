from fastapi import Request

from pingpong.league import League


# ✅ Dependency to get the league owned by the running app
def get_league(request: Request) -> League:
    return request.app.state.league
