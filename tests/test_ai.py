from pong.ai import ai_step
from pong.entities import Ball, Paddle, RIGHT


def setup(ball_y, ball_dy, paddle_y=80):
    p, b = Paddle(RIGHT), Ball()
    p.y, p.dy = paddle_y, 7
    b.y, b.dy = ball_y, ball_dy
    return p, b


def test_chases_ball_moving_down():
    p, b = setup(100, 30)
    ai_step(p, b, True)
    assert p.dy == 31


def test_ball_below_moving_up():
    p, b = setup(100, -30)
    ai_step(p, b, True)
    assert p.dy == -31


def test_level_and_still_stops():
    p, b = setup(80, 0)
    ai_step(p, b, True)
    assert p.dy == 0


def test_ball_above():
    p, b = setup(40, 20)
    ai_step(p, b, True)
    assert p.dy == -21
    p, b = setup(40, -20)
    ai_step(p, b, True)
    assert p.dy == 19


def test_ball_below_and_still_falls_through():
    p, b = setup(100, 0)
    ai_step(p, b, True)
    assert p.dy == -1


def test_disabled_leaves_velocity_alone():
    p, b = setup(100, 30)
    ai_step(p, b, False)
    assert p.dy == 7
