#!/usr/bin/env python3
"""
Arcball command-line entry point.

Runs the bouncing-point animation in the terminal, one line per frame.

Usage:
    arcball                                  # defaults: ellipse, 10 fps, 4 points, 100 s
    arcball --duration -1                    # run until Ctrl+C
    arcball --shape parabola --params 60 40 1.0
    arcball --fps 30 --points 8 --width 120 --resolution 60 --redraw
    arcball --mode uniform -vv               # per-frame trace on stderr

Exit status:
    0  finished (duration reached or interrupted)
    1  output stream failed
    2  invalid configuration
"""

import argparse
import signal
import sys
from typing import List, Optional

from loguru import logger

from .animations import Animation, TrailMode
from .config import AnimationConfig
from .constants import CURVE_KINDS, DefaultAnimation, RUN_FOREVER
from .curves import make_curve
from .errors import ConfigurationError
from .render import LineWriter


LOG_LEVELS = ("INFO", "DEBUG", "TRACE")


def setup_logging(verbosity: int = 0) -> str:
    """Send arcball diagnostics to stderr so frames own stdout.

    Args:
        verbosity: 0 for run start/stop, 1 (-v) adds reversals and
            reflections, 2 (-vv) adds one TRACE record per frame

    Returns:
        The loguru level in effect
    """
    logger.remove()  # Remove default handler

    log_level = LOG_LEVELS[min(max(verbosity, 0), len(LOG_LEVELS) - 1)]
    if verbosity > 0:
        log_format = (
            "<green>{elapsed}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    else:
        log_format = "<level>{level: <8}</level> | arcball: <level>{message}</level>"

    logger.add(
        sys.stderr,
        format=log_format,
        level=log_level,
        colorize=True,
    )
    logger.enable("arcball")
    return log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcball",
        description="Points bouncing along an elliptical or parabolic arc, rendered as text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"A duration of {RUN_FOREVER} runs until interrupted (Ctrl+C).",
    )
    parser.add_argument(
        "--shape",
        choices=CURVE_KINDS,
        default="ellipse",
        help="Curve family (default: ellipse)",
    )
    parser.add_argument(
        "--params",
        nargs="*",
        type=float,
        metavar="VALUE",
        help="Shape parameters: X_EXTENT Y_EXTENT CURVATURE (default: 75 50 1.0)",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=DefaultAnimation.FRAME_RATE,
        help=f"Frames per second (default: {DefaultAnimation.FRAME_RATE})",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DefaultAnimation.POINT_COUNT,
        help=f"Number of points in the trail (default: {DefaultAnimation.POINT_COUNT})",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=DefaultAnimation.TOTAL_DURATION,
        help=f"Seconds to run, negative for no limit (default: {DefaultAnimation.TOTAL_DURATION})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DefaultAnimation.OUTPUT_WIDTH,
        help=f"Output width in columns (default: {DefaultAnimation.OUTPUT_WIDTH})",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        help="Steps across the output width, at most --width (default: fps + points)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in TrailMode],
        default=TrailMode.TRAIL.value,
        help="trail: points follow the head; uniform: every point advances (default: trail)",
    )
    parser.add_argument(
        "--redraw",
        action="store_true",
        help="Redraw each frame in place instead of printing a new line",
    )
    parser.add_argument(
        "--marker",
        default=DefaultAnimation.MARKER,
        help=f"Character drawn for each point (default: {DefaultAnimation.MARKER!r})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="More diagnostics on stderr: -v for reversals, -vv for every frame",
    )
    return parser


def build_animation(args: argparse.Namespace) -> Animation:
    """Create the animation described by parsed arguments.

    Raises:
        ConfigurationError: Invalid shape or animation configuration
    """
    config = AnimationConfig(
        frame_rate=args.fps,
        point_count=args.points,
        total_duration=args.duration,
        output_width=args.width,
        resolution=args.resolution,
        mode=TrailMode(args.mode),
        redraw=args.redraw,
        marker=args.marker,
    )
    curve = make_curve(args.shape, args.params)
    return Animation(curve, config, writer=LineWriter(sys.stdout, redraw=config.redraw))


def install_stop_handlers(animation: Animation) -> dict:
    """Route SIGINT/SIGTERM to a cooperative stop.

    Returns:
        The previous handlers, keyed by signal number
    """
    def handler(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, stopping")
        animation.request_stop()

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, handler)
    return previous


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        animation = build_animation(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    previous = install_stop_handlers(animation)
    try:
        animation.run()
    except OSError as e:
        logger.error(f"Output failed: {e}")
        return 1
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)

    return 0


if __name__ == "__main__":
    sys.exit(main())
