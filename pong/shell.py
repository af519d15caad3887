import logging
import os

import pygame

from .audio import AssetError, SoundBank
from .session import Controls, GameState
from .settings import VIRTUAL_WIDTH, VIRTUAL_HEIGHT, BG, WHITE, FPS_GREEN

logger = logging.getLogger(__name__)

TITLE = "Pong"

MESSAGES = {
    GameState.START: ["Welcome to Pong!", "Press Enter to begin!"],
    GameState.MODE_SELECT: ["Press 1 for Player vs AI", "Press 2 for 2 Players", "Press 3 for AI vs AI (spectator)"],
    GameState.TWO_PLAYER: ["2 Players Mode"],
    GameState.VS_AI: ["Player vs AI Mode"],
    GameState.SPECTATOR: ["AI vs AI Mode"],
}

FONT_SIZES = {"small": 8, "large": 16, "score": 32}
DEFAULT_FONT_SIZES = {"small": 12, "large": 20, "score": 40}


def load_fonts(asset_dir=None):
    if not asset_dir:
        # pygame's default font renders smaller than a pixel font at the same size
        return {name: pygame.font.Font(None, size) for name, size in DEFAULT_FONT_SIZES.items()}
    path = os.path.join(asset_dir, "font.ttf")
    if not os.path.isfile(path):
        raise AssetError(f"missing font asset: {path}")
    try:
        return {name: pygame.font.Font(path, size) for name, size in FONT_SIZES.items()}
    except (pygame.error, OSError) as e:
        raise AssetError(f"cannot load {path}: {e}") from e


def letterbox(window_size):
    """Largest virtual-resolution rect that fits the window, centred."""
    w, h = window_size
    scale = min(w / VIRTUAL_WIDTH, h / VIRTUAL_HEIGHT)
    sw, sh = int(VIRTUAL_WIDTH * scale), int(VIRTUAL_HEIGHT * scale)
    return pygame.Rect((w - sw) // 2, (h - sh) // 2, sw, sh)


def poll_controls(keys):
    return Controls(
        p1_up=bool(keys[pygame.K_w]),
        p1_down=bool(keys[pygame.K_s]),
        p2_up=bool(keys[pygame.K_UP]),
        p2_down=bool(keys[pygame.K_DOWN]),
    )


def print_centered(surface, font, text, y, color=WHITE):
    img = font.render(text, False, color)
    surface.blit(img, (VIRTUAL_WIDTH // 2 - img.get_width() // 2, y))


def draw(canvas, fonts, session, fps):
    canvas.fill(BG)

    state = session.state
    if state in MESSAGES:
        font = fonts["small"] if state is GameState.START else fonts["large"]
        for i, line in enumerate(MESSAGES[state]):
            print_centered(canvas, font, line, 10 + i * (font.get_linesize() + 2))
    elif state is GameState.SERVE:
        print_centered(canvas, fonts["small"], f"Player {session.serving_player} serves!", 10)
        print_centered(canvas, fonts["small"], "Press Enter to serve!", 22)
    elif state is GameState.DONE:
        print_centered(canvas, fonts["large"], f"Player {session.winning_player} wins!", 10)
        print_centered(canvas, fonts["small"], "Press Enter to restart!", 30)

    # score goes first so the ball can pass over it
    score_font = fonts["score"]
    canvas.blit(score_font.render(str(session.player1_score), False, WHITE), (VIRTUAL_WIDTH // 2 - 50, VIRTUAL_HEIGHT // 3))
    canvas.blit(score_font.render(str(session.player2_score), False, WHITE), (VIRTUAL_WIDTH // 2 + 30, VIRTUAL_HEIGHT // 3))

    for paddle in session.paddles:
        pygame.draw.rect(canvas, WHITE, pygame.Rect(*paddle.rect()))
    pygame.draw.rect(canvas, WHITE, pygame.Rect(*session.ball.rect()))

    canvas.blit(fonts["small"].render(f"FPS: {int(fps)}", False, FPS_GREEN), (10, 10))


def open_window(size, flags, vsync):
    if vsync:
        try:
            return pygame.display.set_mode(size, flags, vsync=1)
        except pygame.error as e:
            logger.warning("vsync unavailable (%s), continuing without it", e)
    return pygame.display.set_mode(size, flags)


def run(cfg, session_factory):
    pygame.init()
    flags = pygame.RESIZABLE | (pygame.FULLSCREEN if cfg.fullscreen else 0)
    window = open_window((cfg.window_width, cfg.window_height), flags, cfg.vsync)
    pygame.display.set_caption(TITLE)
    canvas = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
    clock = pygame.time.Clock()

    try:
        fonts = load_fonts(cfg.assets)
        sounds = SoundBank(cfg.assets)
        session = session_factory(sounds.play)
        logger.info("Window %dx%d, virtual %dx%d", cfg.window_width, cfg.window_height, VIRTUAL_WIDTH, VIRTUAL_HEIGHT)

        viewport = letterbox(window.get_size())
        running = True
        while running:
            dt = clock.tick(cfg.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    viewport = letterbox((event.w, event.h))
                elif event.type == pygame.KEYDOWN:
                    if session.key_pressed(pygame.key.name(event.key)):
                        running = False
            if not running:
                break

            session.update(dt, poll_controls(pygame.key.get_pressed()))

            draw(canvas, fonts, session, clock.get_fps())
            window.fill((0, 0, 0))
            # nearest-neighbour upscale keeps the pixels crisp
            window.blit(pygame.transform.scale(canvas, viewport.size), viewport.topleft)
            pygame.display.flip()
    finally:
        pygame.quit()
