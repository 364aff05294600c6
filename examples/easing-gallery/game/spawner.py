"""Lane construction: one tween per easing."""
from __future__ import annotations

from dataclasses import dataclass

from tweens import Tween, TweenKind, create_custom_tween, create_tween

from ui.constants import CURVE_W, EASING_NAMES, LABEL_W, LANE_H, TRACK_PAD, TRACK_W


def threshold(start: float, goal: float, frac: float) -> float:
    """Hold at start, snap to goal after 70% progress."""
    return goal if frac > 0.7 else start


@dataclass
class Lane:
    """An orb that travels from start_x to end_x following ``tween.val`` (0->1)."""

    name: str
    tween: Tween
    start_x: float
    end_x: float
    y: float

    @property
    def x(self) -> float:
        return self.start_x + (self.end_x - self.start_x) * self.tween.val


def make_lane_tween(name: str, steps: int) -> Tween:
    if name == "threshold":
        return create_custom_tween(threshold, 0.0, 1.0, steps)
    return create_tween(TweenKind(name), 0.0, 1.0, steps)


def launch_wave(steps: int) -> list[Lane]:
    """Build one fresh lane per easing name."""
    track_left = LABEL_W + CURVE_W + TRACK_PAD
    track_right = LABEL_W + CURVE_W + TRACK_W - TRACK_PAD
    lanes = []
    for i, name in enumerate(EASING_NAMES):
        lanes.append(
            Lane(
                name=name,
                tween=make_lane_tween(name, steps),
                start_x=track_left,
                end_x=track_right,
                y=i * LANE_H + LANE_H // 2,
            )
        )
    return lanes
