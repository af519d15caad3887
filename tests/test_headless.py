import numpy as np

from pong import headless
from pong.session import GameSession, GameState, Mode


def test_start_spectator_reaches_serve():
    s = headless.start_spectator(GameSession(rng=np.random.default_rng(0)))
    assert s.state is GameState.SERVE
    assert s.mode is Mode.SPECTATOR
    assert s.ai_p1 and s.ai_p2


def test_spectator_games_run_to_a_winner():
    results = headless.run(2, 1 / 60, rng=np.random.default_rng(3))
    assert len(results) == 2
    for p1, p2 in results:
        assert max(p1, p2) == 10
        assert min(p1, p2) < 10


def test_play_game_gives_up_after_max_steps():
    s = headless.start_spectator(GameSession(rng=np.random.default_rng(0)))
    scores = headless.play_game(s, 1 / 60, max_steps=3)
    assert scores == (0, 0)
    assert s.state is GameState.PLAY


def test_unfinished_game_is_abandoned_before_the_next(monkeypatch):
    real_play_game = headless.play_game
    starts = []

    def short_first_game(session, dt, max_steps=headless.MAX_STEPS):
        starts.append((session.state, session.player1_score, session.player2_score))
        return real_play_game(session, dt, max_steps=3000 if len(starts) == 1 else max_steps)

    monkeypatch.setattr(headless, "play_game", short_first_game)
    results = headless.run(2, 1 / 60, rng=np.random.default_rng(0))

    assert max(results[0]) < 10
    assert starts[1] == (GameState.SERVE, 0, 0)
    assert max(results[1]) == 10


def test_next_game_after_a_finished_one():
    s = headless.start_spectator(GameSession(rng=np.random.default_rng(4)))
    headless.play_game(s, 1 / 60)
    assert s.state is GameState.DONE
    loser = 2 if s.winning_player == 1 else 1
    headless.next_game(s)
    assert s.state is GameState.SERVE
    assert (s.player1_score, s.player2_score) == (0, 0)
    assert s.serving_player == loser
