from dataclasses import dataclass
from typing import Optional

# --- Window / virtual resolution ---
WINDOW_WIDTH, WINDOW_HEIGHT = 1280, 720
VIRTUAL_WIDTH, VIRTUAL_HEIGHT = 432, 243
FPS = 60

# --- Entities ---
PADDLE_W, PADDLE_H = 5, 20
PADDLE_OFFSET = 10
PADDLE_SPEED = 200
BALL_SIZE = 4

# --- Rules ---
WIN_SCORE = 10
SERVE_DX = (140, 200)
SERVE_DY = (-50, 50)
HIT_DY = (10, 150)
LEFT_SPEEDUP = 1.1
RIGHT_SPEEDUP = 1.03
COLLISION_INSET = 1

# --- Colors ---
BG = (40, 45, 52)
WHITE = (255, 255, 255)
FPS_GREEN = (0, 255, 0)

SOUND_CUES = ("paddle_hit", "wall_hit", "score")


@dataclass
class Config:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    fps: int = FPS
    vsync: bool = True
    fullscreen: bool = False
    seed: Optional[int] = None
    assets: Optional[str] = None
    log_level: str = "INFO"
    headless: int = 0
    headless_dt: float = 1.0 / FPS
