"""
Windowless AI-vs-AI play.

Drives a spectator session at a fixed time step, pressing Enter whenever the
game waits on a serve or a restart, and reports the final score of each game.
"""
import logging
import time

from .audio import NullSoundBank
from .session import GameSession, GameState

logger = logging.getLogger(__name__)

MAX_STEPS = 500_000


def start_spectator(session):
    for key in ("return", "3", "return"):
        session.key_pressed(key)
    return session


def play_game(session, dt, max_steps=MAX_STEPS):
    """Advance until the current game is over. Returns (player1, player2) scores."""
    for _ in range(max_steps):
        if session.state is GameState.SERVE:
            session.key_pressed("return")
        session.update(dt)
        if session.state is GameState.DONE:
            break
    else:
        logger.warning("Game not finished after %d steps", max_steps)
    return session.player1_score, session.player2_score


def next_game(session):
    if session.state is GameState.DONE:
        session.key_pressed("return")
    else:
        # abandoned game: start over at 0 - 0
        session.restart()


def run(games, dt, rng=None, max_steps=MAX_STEPS):
    session = start_spectator(GameSession(rng=rng, sound=NullSoundBank().play))
    results = []
    for game in range(games):
        if game > 0:
            next_game(session)
        t0 = time.perf_counter()
        scores = play_game(session, dt, max_steps=max_steps)
        results.append(scores)
        if session.state is GameState.DONE:
            logger.info("Game %d: %d - %d, winner player %d (%.2fs)",
                        game + 1, scores[0], scores[1], session.winning_player, time.perf_counter() - t0)
        else:
            logger.info("Game %d: %d - %d, unfinished (%.2fs)",
                        game + 1, scores[0], scores[1], time.perf_counter() - t0)
    return results
