from .settings import (
    VIRTUAL_WIDTH, VIRTUAL_HEIGHT, PADDLE_W, PADDLE_H, PADDLE_OFFSET, BALL_SIZE,
)

LEFT, RIGHT = 1, 2


class Paddle:
    def __init__(self, side, width=PADDLE_W, height=PADDLE_H):
        self.side = side
        self.width, self.height = width, height
        self.x = PADDLE_OFFSET if side == LEFT else VIRTUAL_WIDTH - PADDLE_OFFSET
        self.y = 0.0
        self.dy = 0.0
        self.reset()

    def reset(self):
        # dy is owned by whoever drives the paddle (keyboard or AI)
        self.y = (VIRTUAL_HEIGHT - self.height) / 2

    def update(self, dt):
        self.y += self.dy * dt
        self.y = max(0, min(self.y, VIRTUAL_HEIGHT - self.height))

    def rect(self):
        return (self.x, self.y, self.width, self.height)


class Ball:
    def __init__(self, size=BALL_SIZE):
        self.width = self.height = size
        self.reset()

    def reset(self):
        self.x = VIRTUAL_WIDTH / 2 - self.width / 2
        self.y = VIRTUAL_HEIGHT / 2 - self.height / 2
        self.dx = 0.0
        self.dy = 0.0

    def update(self, dt):
        self.x += self.dx * dt
        self.y += self.dy * dt

    def rect(self):
        return (self.x, self.y, self.width, self.height)
