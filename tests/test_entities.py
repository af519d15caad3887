from pong.entities import Ball, Paddle, LEFT, RIGHT
from pong.settings import VIRTUAL_WIDTH, VIRTUAL_HEIGHT


def test_paddles_sit_at_fixed_offsets_and_centre():
    left, right = Paddle(LEFT), Paddle(RIGHT)
    assert left.x == 10
    assert right.x == VIRTUAL_WIDTH - 10
    assert left.y == right.y == (VIRTUAL_HEIGHT - 20) / 2
    assert (left.width, left.height) == (5, 20)


def test_paddle_update_integrates_velocity():
    p = Paddle(LEFT)
    p.y, p.dy = 50, 100
    p.update(0.5)
    assert p.y == 100


def test_paddle_is_clamped_to_field():
    p = Paddle(LEFT)
    p.dy = -200
    p.update(10)
    assert p.y == 0
    p.dy = 200
    p.update(10)
    assert p.y == VIRTUAL_HEIGHT - p.height


def test_paddle_reset_keeps_velocity():
    p = Paddle(RIGHT)
    p.y, p.dy = 3, 42
    p.reset()
    assert p.y == (VIRTUAL_HEIGHT - 20) / 2
    assert p.dy == 42


def test_ball_starts_centred_and_still():
    b = Ball()
    assert (b.x, b.y) == (VIRTUAL_WIDTH / 2 - 2, VIRTUAL_HEIGHT / 2 - 2)
    assert (b.dx, b.dy) == (0, 0)
    assert b.width == b.height == 4


def test_ball_update_is_not_clamped():
    b = Ball()
    b.x, b.y, b.dx, b.dy = 10, 10, -100, -100
    b.update(1)
    assert (b.x, b.y) == (-90, -90)


def test_ball_reset():
    b = Ball()
    b.x, b.y, b.dx, b.dy = 1, 2, 3, 4
    b.reset()
    assert b.rect() == (VIRTUAL_WIDTH / 2 - 2, VIRTUAL_HEIGHT / 2 - 2, 4, 4)
    assert b.dx == b.dy == 0
