"""
Game session: owns the paddles, the ball, the score pair and the state machine.

The presentation layer drives it with one `update(dt, controls)` per frame and
forwards discrete key presses to `key_pressed(key)`; everything it needs to draw
is read back from the session (or from `snapshot()`).
"""
import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .ai import ai_step
from .entities import Ball, Paddle, LEFT, RIGHT
from .physics import approaching, bounce_off_paddle, bounce_off_walls, collides, scored_side
from .settings import PADDLE_SPEED, SERVE_DX, SERVE_DY, WIN_SCORE

logger = logging.getLogger(__name__)


class GameState(Enum):
    START = "start"
    MODE_SELECT = "mode_select"
    TWO_PLAYER = "two_player"
    VS_AI = "vs_ai"
    SPECTATOR = "spectator"
    SERVE = "serve"
    PLAY = "play"
    DONE = "done"


class Mode(Enum):
    TWO_PLAYER = "two_player"
    VS_AI = "vs_ai"
    SPECTATOR = "spectator"

    @property
    def ai_flags(self):
        return {
            Mode.TWO_PLAYER: (False, False),
            Mode.VS_AI: (False, True),
            Mode.SPECTATOR: (True, True),
        }[self]

    @property
    def state(self):
        return GameState(self.value)


MODE_KEYS = {"1": Mode.VS_AI, "2": Mode.TWO_PLAYER, "3": Mode.SPECTATOR}
MODE_STATES = (GameState.TWO_PLAYER, GameState.VS_AI, GameState.SPECTATOR)
CONFIRM_KEYS = ("return", "enter")


@dataclass
class Controls:
    p1_up: bool = False
    p1_down: bool = False
    p2_up: bool = False
    p2_down: bool = False


def _keyboard_velocity(up, down):
    if up:
        return -PADDLE_SPEED
    if down:
        return PADDLE_SPEED
    return 0


class GameSession:
    def __init__(self, rng=None, sound=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sound = sound or (lambda cue: None)

        self.player1 = Paddle(LEFT)
        self.player2 = Paddle(RIGHT)
        self.ball = Ball()

        self.player1_score = 0
        self.player2_score = 0
        self.serving_player = 1
        self.winning_player = 0

        self.mode = None
        self.ai_p1 = False
        self.ai_p2 = False
        self.state = GameState.START

    @property
    def paddles(self):
        return (self.player1, self.player2)

    # --- discrete input ---
    def key_pressed(self, key):
        """Handle one key press by name. Returns True when the session should end."""
        if key == "escape":
            logger.info("Quit requested")
            return True

        if self.state is GameState.MODE_SELECT:
            if key in MODE_KEYS:
                self.select_mode(MODE_KEYS[key])
        elif key in CONFIRM_KEYS:
            if self.state is GameState.START:
                self.state = GameState.MODE_SELECT
            elif self.state in MODE_STATES:
                self.serve()
            elif self.state is GameState.SERVE:
                self.state = GameState.PLAY
            elif self.state is GameState.DONE:
                self.restart()
        return False

    def select_mode(self, mode):
        self.mode = mode
        self.ai_p1, self.ai_p2 = mode.ai_flags
        self.state = mode.state
        logger.info("Mode selected: %s", mode.value)

    def serve(self):
        self.state = GameState.SERVE
        self.ball.dy = int(self.rng.integers(SERVE_DY[0], SERVE_DY[1], endpoint=True))
        dx = int(self.rng.integers(SERVE_DX[0], SERVE_DX[1], endpoint=True))
        self.ball.dx = dx if self.serving_player == 1 else -dx
        logger.debug("Player %d serves (dx=%d, dy=%d)", self.serving_player, self.ball.dx, self.ball.dy)

    def restart(self):
        self.reset_positions()
        self.player1_score = 0
        self.player2_score = 0
        # the loser of the previous game serves first
        self.serving_player = 2 if self.winning_player == 1 else 1
        logger.info("Restarting, player %d serves", self.serving_player)
        self.serve()

    def reset_positions(self):
        self.ball.reset()
        self.player1.reset()
        self.player2.reset()

    # --- per-frame update ---
    def update(self, dt, controls=None):
        controls = controls or Controls()

        if self.state is GameState.PLAY:
            self._check_collisions()

        self.player1.dy = _keyboard_velocity(controls.p1_up, controls.p1_down)
        self.player2.dy = _keyboard_velocity(controls.p2_up, controls.p2_down)

        if self.state is GameState.PLAY:
            self.ball.update(dt)
            ai_step(self.player1, self.ball, self.ai_p1)
            ai_step(self.player2, self.ball, self.ai_p2)

        self.player1.update(dt)
        self.player2.update(dt)

    def _check_collisions(self):
        for paddle in self.paddles:
            if approaching(self.ball, paddle) and collides(self.ball, paddle):
                bounce_off_paddle(self.ball, paddle, self.rng)
                logger.debug("Paddle %d hit, dx=%.1f", paddle.side, self.ball.dx)
                self.sound("paddle_hit")

        if bounce_off_walls(self.ball):
            self.sound("wall_hit")

        scorer = scored_side(self.ball)
        if scorer is not None:
            self.point(scorer)

    def point(self, scorer):
        if scorer == 1:
            self.player1_score += 1
            self.serving_player = 2
            score = self.player1_score
        else:
            self.player2_score += 1
            self.serving_player = 1
            score = self.player2_score
        self.sound("score")
        logger.info("Player %d scores (%d - %d)", scorer, self.player1_score, self.player2_score)

        self.reset_positions()
        if score == WIN_SCORE:
            self.winning_player = scorer
            self.state = GameState.DONE
            logger.info("Player %d wins", scorer)
        else:
            self.serve()

    def snapshot(self):
        return {
            "state": self.state.value,
            "mode": self.mode.value if self.mode else None,
            "scores": [self.player1_score, self.player2_score],
            "serving_player": self.serving_player,
            "winning_player": self.winning_player,
            "paddles": [self.player1.rect(), self.player2.rect()],
            "ball": self.ball.rect(),
        }
