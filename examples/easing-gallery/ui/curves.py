"""Unit-curve plot for a lane's tween."""
from __future__ import annotations

from functools import lru_cache

import pygame

from tweens import Tween, Variant

from ui.constants import CURVE_BG, TEXT_DIM

CURVE_SAMPLES = 80
MAX_STEP_TICKS = 60


@lru_cache(maxsize=None)
def unit_samples(variant: Variant) -> tuple[tuple[float, float], ...]:
    """(frac, eased) pairs of ``variant`` over 0..1, shared by every wave."""
    return tuple(
        (i / CURVE_SAMPLES, variant(0.0, 1.0, i / CURVE_SAMPLES))
        for i in range(CURVE_SAMPLES + 1)
    )


def draw_curve_plot(
    surface: pygame.Surface,
    tween: Tween,
    color: tuple[int, int, int],
    rect: pygame.Rect,
) -> None:
    """Plot the tween's easing over [0, 1] and mark where ``val`` sits now.

    The tween must run from 0.0 to 1.0 so ``val`` lands on the curve's scale.
    """
    pygame.draw.rect(surface, CURVE_BG, rect)
    plot = rect.inflate(-20, -20)

    def to_screen(frac: float, eased: float) -> tuple[float, float]:
        return plot.left + frac * plot.width, plot.bottom - eased * plot.height

    pygame.draw.line(surface, TEXT_DIM, plot.bottomleft, plot.bottomright)
    pygame.draw.line(surface, TEXT_DIM, plot.bottomleft, plot.topleft)

    # One tick per discrete step, skipped when they would smear together
    if tween.steps <= MAX_STEP_TICKS:
        for step in range(tween.steps + 1):
            x = plot.left + step / tween.steps * plot.width
            pygame.draw.line(surface, TEXT_DIM, (x, plot.bottom), (x, plot.bottom + 3))

    points = [to_screen(frac, eased) for frac, eased in unit_samples(tween.variant)]
    pygame.draw.lines(surface, color, False, points, 2)

    dot = to_screen(tween.progress, tween.val)
    pygame.draw.circle(surface, (255, 255, 255), (int(dot[0]), int(dot[1])), 4)
    pygame.draw.circle(surface, color, (int(dot[0]), int(dot[1])), 3)
