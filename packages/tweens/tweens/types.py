"""Easing variants, tags and errors for tweens."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Union

from tweens.easing import DEFAULT_EXPONENT, ease_in, ease_in_out, ease_out, lerp

EasingFunction = Callable[[float, float, float], float]
"""Signature of a custom easing: ``(start, goal, frac) -> value``."""


class TweenKind(enum.Enum):
    """The easing families a tween can use."""

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    CUSTOM = "custom"


class InvalidTweenError(ValueError):
    """Raised when a tween is built or recomputed from unusable arguments."""


@dataclass(frozen=True)
class Linear:
    kind = TweenKind.LINEAR

    def __call__(self, start: float, goal: float, frac: float) -> float:
        return lerp(start, goal, frac)


@dataclass(frozen=True)
class EaseIn:
    p: float = DEFAULT_EXPONENT
    kind = TweenKind.EASE_IN

    def __call__(self, start: float, goal: float, frac: float) -> float:
        return ease_in(start, goal, frac, self.p)


@dataclass(frozen=True)
class EaseOut:
    p: float = DEFAULT_EXPONENT
    kind = TweenKind.EASE_OUT

    def __call__(self, start: float, goal: float, frac: float) -> float:
        return ease_out(start, goal, frac, self.p)


@dataclass(frozen=True)
class EaseInOut:
    """Ease-in on the ``p1`` side, ease-out on the ``p2`` side."""

    p1: float = DEFAULT_EXPONENT
    p2: float = DEFAULT_EXPONENT
    kind = TweenKind.EASE_IN_OUT

    def __call__(self, start: float, goal: float, frac: float) -> float:
        return ease_in_out(start, goal, frac, self.p1, self.p2)


@dataclass(frozen=True)
class Custom:
    """Wraps a caller-supplied easing function."""

    fn: EasingFunction
    kind = TweenKind.CUSTOM

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise InvalidTweenError(
                f"custom easing must be callable, got {type(self.fn).__name__}"
            )

    def __call__(self, start: float, goal: float, frac: float) -> float:
        return self.fn(start, goal, frac)


Variant = Union[Linear, EaseIn, EaseOut, EaseInOut, Custom]
