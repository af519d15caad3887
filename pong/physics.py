from .entities import LEFT
from .settings import (
    VIRTUAL_WIDTH, VIRTUAL_HEIGHT, HIT_DY, LEFT_SPEEDUP, RIGHT_SPEEDUP, COLLISION_INSET,
)


def _overlap(a0, a_len, b0, b_len):
    return min(a0 + a_len, b0 + b_len) - max(a0, b0)


def collides(a, b, inset=COLLISION_INSET):
    # boxes touching within `inset` px do not count as a hit
    return (_overlap(a.x, a.width, b.x, b.width) > inset
            and _overlap(a.y, a.height, b.y, b.height) > inset)


def approaching(ball, paddle):
    return ball.dx < 0 if paddle.side == LEFT else ball.dx > 0


def bounce_off_paddle(ball, paddle, rng):
    if paddle.side == LEFT:
        ball.dx = -ball.dx * LEFT_SPEEDUP
        ball.x = paddle.x + paddle.width
    else:
        ball.dx = -ball.dx * RIGHT_SPEEDUP
        ball.x = paddle.x - ball.width

    # keep vertical direction, randomize its magnitude
    speed = int(rng.integers(HIT_DY[0], HIT_DY[1], endpoint=True))
    ball.dy = -speed if ball.dy < 0 else speed


def bounce_off_walls(ball):
    """Reflect the ball off the top/bottom edge. Returns True on a hit."""
    if ball.y <= 0:
        ball.y = 0
        ball.dy = -ball.dy
        return True
    if ball.y >= VIRTUAL_HEIGHT - ball.height:
        ball.y = VIRTUAL_HEIGHT - ball.height
        ball.dy = -ball.dy
        return True
    return False


def scored_side(ball):
    """Player who wins the point when the ball has left the field, else None."""
    if ball.x < 0:
        return 2
    if ball.x > VIRTUAL_WIDTH:
        return 1
    return None
