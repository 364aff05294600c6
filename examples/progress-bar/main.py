"""Progress Bar - terminal tween demo.

Draws a bar whose length follows ``tween.val``, one step per frame, until the
tween settles. The sleep between frames is this script's business; the
library has no clock.

Usage:
  python main.py --kind ease_in --goal 60 --steps 90
  python main.py --kind threshold -v
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

from tweens import Tween, TweenKind, create_custom_tween, create_tween, frames

logger = logging.getLogger("progress-bar")

KINDS = ["linear", "ease_in", "ease_out", "ease_in_out", "threshold"]


def threshold(start: float, goal: float, frac: float) -> float:
    """Stay at start until 70% progress, then jump to goal."""
    return goal if frac > 0.7 else start


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Progress Bar - tweens terminal demo")
    p.add_argument("--kind", choices=KINDS, default="ease_in", help="Easing (default: ease_in)")
    p.add_argument("--start", type=float, default=0.0, help="Start length (default: 0)")
    p.add_argument("--goal", type=float, default=60.0, help="Goal length (default: 60)")
    p.add_argument("--steps", type=int, default=90, help="Number of steps (default: 90)")
    p.add_argument("-p", type=float, default=2, help="Exponent / ease-in side (default: 2)")
    p.add_argument("--p2", type=float, default=None, help="Ease-out side exponent (default: p)")
    p.add_argument("--delay", type=float, default=0.05, help="Seconds per frame (default: 0.05)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log tween internals")
    args = p.parse_args(argv)
    if args.steps < 1:
        p.error(f"--steps must be >= 1, got {args.steps}")
    if args.delay < 0:
        p.error(f"--delay must be >= 0, got {args.delay}")
    return args


def build_tween(args: argparse.Namespace) -> Tween:
    if args.kind == "threshold":
        return create_custom_tween(threshold, args.start, args.goal, args.steps)
    return create_tween(TweenKind(args.kind), args.start, args.goal, args.steps, p=args.p, p2=args.p2)


def render(tween: Tween) -> str:
    length = max(0, round(tween.val))
    return f"\x1b[2K\r{'=' * length} {tween.step}/{tween.steps}"


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tween = build_tween(args)
    logger.info("running %r", tween)

    for frame in frames(tween):
        sys.stdout.write(render(frame))
        sys.stdout.flush()
        if not frame.settled:
            time.sleep(args.delay)

    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
