import numpy as np
import pytest

from pong.session import GameSession, GameState, Mode


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def cues():
    return []


@pytest.fixture
def session(rng, cues):
    return GameSession(rng=rng, sound=cues.append)


@pytest.fixture
def playing(session):
    """Two-player session with the ball in play (no AI)."""
    session.select_mode(Mode.TWO_PLAYER)
    session.serve()
    session.key_pressed("return")
    assert session.state is GameState.PLAY
    return session
