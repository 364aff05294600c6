"""tweens - Step-driven value interpolation with easing curves."""
from __future__ import annotations

from tweens.components import Tween, create_custom_tween, create_tween
from tweens.easing import (
    DEFAULT_EXPONENT,
    EASINGS,
    ease_in,
    ease_in_curve,
    ease_in_out,
    ease_in_out_curve,
    ease_out,
    ease_out_curve,
    flip,
    lerp,
    linear_curve,
)
from tweens.systems import frames, make_tween_system
from tweens.types import (
    Custom,
    EaseIn,
    EaseInOut,
    EaseOut,
    EasingFunction,
    InvalidTweenError,
    Linear,
    TweenKind,
    Variant,
)

__all__ = [
    "Custom",
    "DEFAULT_EXPONENT",
    "EASINGS",
    "EaseIn",
    "EaseInOut",
    "EaseOut",
    "EasingFunction",
    "InvalidTweenError",
    "Linear",
    "Tween",
    "TweenKind",
    "Variant",
    "create_custom_tween",
    "create_tween",
    "ease_in",
    "ease_in_curve",
    "ease_in_out",
    "ease_in_out_curve",
    "ease_out",
    "ease_out_curve",
    "flip",
    "frames",
    "lerp",
    "linear_curve",
    "make_tween_system",
]
