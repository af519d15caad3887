import argparse
import logging

import numpy as np

from .audio import AssetError
from .session import GameSession
from .settings import Config

logger = logging.getLogger(__name__)


def _window_size(text):
    try:
        w, h = (int(v) for v in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("window size must be positive")
    return w, h


def _positive_int(text):
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def parse_args(argv=None):
    defaults = Config()
    parser = argparse.ArgumentParser(prog="pong", description="Pong: 2 players, player vs AI, or AI vs AI.")
    parser.add_argument("--window", type=_window_size, default=(defaults.window_width, defaults.window_height),
                        metavar="WxH", help="initial window size")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="frame rate cap")
    parser.add_argument("--no-vsync", action="store_true")
    parser.add_argument("--fullscreen", action="store_true")
    parser.add_argument("--seed", type=int, default=None, help="seed the random generator")
    parser.add_argument("--assets", default=None, help="directory holding font.ttf and sounds/*.wav")
    parser.add_argument("--log-level", default=defaults.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--headless", type=_positive_int, default=0, metavar="GAMES",
                        help="play GAMES AI-vs-AI games without a window and exit")
    args = parser.parse_args(argv)

    return Config(
        window_width=args.window[0],
        window_height=args.window[1],
        fps=args.fps,
        vsync=not args.no_vsync,
        fullscreen=args.fullscreen,
        seed=args.seed,
        assets=args.assets,
        log_level=args.log_level,
        headless=args.headless,
    )


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # seeded once per process
    rng = np.random.default_rng(cfg.seed)

    if cfg.headless:
        from . import headless
        results = headless.run(cfg.headless, cfg.headless_dt, rng=rng)
        for i, (p1, p2) in enumerate(results, 1):
            print(f"Game {i}: {p1} - {p2}")
        return 0

    from . import shell
    try:
        shell.run(cfg, lambda sound: GameSession(rng=rng, sound=sound))
    except AssetError as e:
        logger.error("Startup failed: %s", e)
        return 1
    return 0

