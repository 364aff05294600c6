"""Per-lane tween readout (sidebar) and the bottom status bar."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from tweens import Custom, EaseIn, EaseInOut, EaseOut, Variant

from ui.constants import (
    EASING_COLORS,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)

if TYPE_CHECKING:
    from game.spawner import Lane

KEY_HELP = "[Space] Wave  [A] Auto  [+/-] Steps  [Esc] Quit"


def describe_variant(variant: Variant) -> str:
    """Short parameter summary, e.g. ``p=2`` or ``p1=2 p2=3``."""
    if isinstance(variant, (EaseIn, EaseOut)):
        return f"p={variant.p:g}"
    if isinstance(variant, EaseInOut):
        return f"p1={variant.p1:g} p2={variant.p2:g}"
    if isinstance(variant, Custom):
        return getattr(variant.fn, "__name__", "custom")
    return "-"


def draw_sidebar(surface: pygame.Surface, font: pygame.font.Font, lanes: list[Lane]) -> None:
    """Show step, value and easing parameters alongside each lane."""
    x = SCREEN_W - SIDEBAR_W
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, LANE_H * LANE_COUNT))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, LANE_H * LANE_COUNT))

    line_h = 18
    for i, lane in enumerate(lanes):
        tween = lane.tween
        color = EASING_COLORS.get(lane.name, TEXT_COLOR)
        rows = [
            (f"step {tween.step}/{tween.steps}", color),
            (f"val  {tween.val:.3f}", TEXT_COLOR),
            (describe_variant(tween.variant), TEXT_DIM),
        ]
        cy = i * LANE_H + (LANE_H - line_h * len(rows)) // 2
        for text, text_color in rows:
            surface.blit(font.render(text, True, text_color), (x + 10, cy))
            cy += line_h


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    wave_count: int,
    complete_count: int,
    steps: int,
    auto_wave: bool,
) -> None:
    """Wave counters on the left, key bindings on the right."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    stats = f"Wave {wave_count}  Settled {complete_count}  Steps {steps}  Auto {'ON' if auto_wave else 'OFF'}"
    left = font.render(stats, True, TEXT_COLOR)
    right = font.render(KEY_HELP, True, TEXT_DIM)
    mid = y + STATUS_H // 2
    surface.blit(left, (8, mid - left.get_height() // 2))
    surface.blit(right, (SCREEN_W - right.get_width() - 8, mid - right.get_height() // 2))
