"""
Allow running the package directly: python -m mandelbrot
"""
import argparse
import sys

from .app import run
from .config import load_config
from .errors import ExplorerError
from .logger import setup_logger


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mandelbrot-explorer",
        description="Interactive Mandelbrot set explorer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="JSON settings file (default: the packaged settings.json)",
    )
    parser.add_argument(
        "--max-iter",
        type=int,
        default=None,
        help="maximum escape iterations per pixel",
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="window size in pixels (default: half the desktop resolution)",
    )
    parser.add_argument("--font", default=None, help="TrueType font for the HUD")
    parser.add_argument("--music", default=None, help="music file to loop")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )

    args = parser.parse_args(argv)
    logger = setup_logger(args.log_level)

    width, height = args.size if args.size else (None, None)
    try:
        config = load_config(
            args.settings,
            max_iterations=args.max_iter,
            pixel_width=width,
            pixel_height=height,
            font_file=args.font,
            music_file=args.music,
        )
        run(config)
    except ExplorerError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
