"""Play Flappy Rocket in a window: ``python -m flappy_rocket``."""

import argparse
import logging
import sys

from .app import FlappyRocketApp
from .config import DEFAULT_CONFIG
from .render import load_sprites


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="flappy-rocket - Fly a rocket through the asteroid field.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle, pickup and star placement.")
    parser.add_argument("--fps", type=int, default=DEFAULT_CONFIG.FPS, help="Frames per second.")
    parser.add_argument("--no-wait", action="store_true",
                        help="Start falling immediately instead of waiting for the first thrust.")
    parser.add_argument("--assets", default=None,
                        help="Directory holding rocket.png and fuel.png. Solid shapes are drawn without it.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = DEFAULT_CONFIG.replace(FPS=args.fps, WAIT_FOR_START=not args.no_wait)
    except ValueError as e:
        print(f"flappy-rocket: {e}", file=sys.stderr)
        return 2

    sprites = load_sprites(args.assets, config)
    FlappyRocketApp(config, seed=args.seed, sprites=sprites).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
