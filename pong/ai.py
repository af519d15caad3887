def ai_step(paddle, ball, enabled):
    """Chase the ball using only its current vertical velocity.

    Deliberately imprecise so the computer can be beaten: no intercept
    prediction, and the level/stationary case only triggers on exact equality.
    """
    if not enabled:
        return
    if ball.y > paddle.y and ball.dy > 0:
        paddle.dy = ball.dy + 1
    elif ball.y > paddle.y and ball.dy < 0:
        paddle.dy = ball.dy - 1
    elif ball.y == paddle.y and ball.dy == 0:
        paddle.dy = 0
    else:
        paddle.dy = -ball.dy - 1
