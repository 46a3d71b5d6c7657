import pytest

from pingpong.league import League
from pingpong.main import app


@pytest.fixture
def league():
    return League()


@pytest.fixture
def fresh_app():
    # Each test gets its own in-memory players and feed
    previous = app.state.league
    app.state.league = League()
    yield app
    app.state.league = previous
