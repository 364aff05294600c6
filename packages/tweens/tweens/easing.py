"""Easing functions for tween interpolation.

The ``*_curve`` functions map a progress fraction to an eased fraction. The
two-bound wrappers (``ease_in``, ``ease_out``, ``ease_in_out``) apply a curve
between ``start`` and ``goal`` through :func:`lerp`.
"""
from __future__ import annotations

import math
from typing import Callable

DEFAULT_EXPONENT = 2


def lerp(start: float, goal: float, frac: float) -> float:
    """Linear interpolation. ``frac`` outside [0, 1] extrapolates."""
    return start + (goal - start) * frac


def linear_curve(frac: float) -> float:
    return frac


def ease_in_curve(frac: float, p: float = DEFAULT_EXPONENT) -> float:
    """Power curve: y = frac^p. Higher ``p`` delays the rise."""
    return math.pow(frac, p)


def ease_in(start: float, goal: float, frac: float, p: float = DEFAULT_EXPONENT) -> float:
    """Like :func:`lerp`, except the rate of change grows with ``frac``."""
    return lerp(start, goal, ease_in_curve(frac, p))


def flip(frac: float) -> float:
    return 1 - frac


def ease_out_curve(frac: float, p: float = DEFAULT_EXPONENT) -> float:
    """Mirror of :func:`ease_in_curve`: y = 1 - (1 - frac)^p."""
    return flip(ease_in_curve(flip(frac), p))


def ease_out(start: float, goal: float, frac: float, p: float = DEFAULT_EXPONENT) -> float:
    """Opposite of :func:`ease_in`: the rate of change slows as ``frac`` grows."""
    return lerp(start, goal, ease_out_curve(frac, p))


def ease_in_out_curve(
    frac: float, p1: float = DEFAULT_EXPONENT, p2: float = DEFAULT_EXPONENT
) -> float:
    """Blend of the ease-in and ease-out curves, weighted by ``frac`` itself.

    Not a piecewise split at 0.5: the ease-in side (``p1``) dominates early
    and the ease-out side (``p2``) dominates late.
    """
    return lerp(ease_in_curve(frac, p1), ease_out_curve(frac, p2), frac)


def ease_in_out(
    start: float,
    goal: float,
    frac: float,
    p1: float = DEFAULT_EXPONENT,
    p2: float = DEFAULT_EXPONENT,
) -> float:
    """Slow start, faster middle, slow finish. ``p1`` feeds the ease-in side,
    ``p2`` the ease-out side."""
    return lerp(start, goal, ease_in_out_curve(frac, p1, p2))


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear_curve,
    "ease_in": ease_in_curve,
    "ease_out": ease_out_curve,
    "ease_in_out": ease_in_out_curve,
}
