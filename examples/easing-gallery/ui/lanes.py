"""Lane-based rendering: label, curve plot and orb track per tween."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    CURVE_W,
    EASING_COLORS,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_RADIUS,
    STATE_SETTLED,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import draw_curve_plot

if TYPE_CHECKING:
    from game.spawner import Lane


def _draw_track(surface: pygame.Surface, lane: Lane, top: int, color: tuple[int, int, int]) -> None:
    track = pygame.Rect(LABEL_W + CURVE_W, top, TRACK_W, LANE_H)
    pygame.draw.rect(surface, TRACK_BG, track)

    rail_y = int(lane.y)
    left = track.left + TRACK_PAD
    right = track.right - TRACK_PAD
    pygame.draw.line(surface, TRACK_RAIL, (left, rail_y), (right, rail_y), 2)

    dim = tuple(c // 3 for c in color)
    pygame.draw.circle(surface, dim, (left, rail_y), 4)
    pygame.draw.circle(surface, dim, (right, rail_y), 4)

    # Orb turns white once its tween has settled
    fill = STATE_SETTLED if lane.tween.settled else color
    pygame.draw.circle(surface, fill, (int(lane.x), rail_y), ORB_RADIUS)
    outline = tuple(min(c + 40, 255) for c in fill)
    pygame.draw.circle(surface, outline, (int(lane.x), rail_y), ORB_RADIUS, 1)


def draw_lanes(surface: pygame.Surface, lanes: list[Lane], font: pygame.font.Font) -> None:
    row_w = LABEL_W + CURVE_W + TRACK_W

    for i, lane in enumerate(lanes):
        top = i * LANE_H
        color = EASING_COLORS.get(lane.name, (200, 200, 200))

        pygame.draw.rect(surface, LANE_BG, (0, top, row_w, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, top + LANE_H - 1), (row_w, top + LANE_H - 1))

        label = font.render(lane.name, True, LABEL_COLOR)
        surface.blit(label, (10, top + LANE_H // 2 - label.get_height() // 2))

        draw_curve_plot(surface, lane.tween, color, pygame.Rect(LABEL_W, top + 10, CURVE_W, LANE_H - 20))
        _draw_track(surface, lane, top, color)
