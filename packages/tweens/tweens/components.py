"""Tween state and constructors."""
from __future__ import annotations

import logging

from tweens.easing import DEFAULT_EXPONENT
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

logger = logging.getLogger(__name__)


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _check_amount(amount: int) -> None:
    _check_int("amount", amount)
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")


class Tween:
    """Interpolation from ``start`` to ``goal`` over ``steps`` discrete steps.

    ``val`` is a cache of ``variant(start, goal, step / steps)``. Move the
    tween with :meth:`advance`, :meth:`retreat` or :meth:`seek`, all of which
    clamp ``step`` to ``[0, steps]`` and refresh ``val``. Assigning ``step``
    directly is allowed but must be followed by :meth:`recompute`.

    Prefer :func:`create_tween` or :func:`create_custom_tween` over calling
    this constructor with a variant value.
    """

    def __init__(self, start: float, goal: float, steps: int, variant: Variant) -> None:
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise TypeError(f"steps must be an int, got {type(steps).__name__}")
        if steps < 1:
            raise InvalidTweenError(f"steps must be >= 1, got {steps}")
        self._start = start
        self._goal = goal
        self._steps = steps
        self._variant = variant
        self.step = 0
        self._val = start

    def __repr__(self) -> str:
        return (
            f"Tween(start={self._start!r}, goal={self._goal!r}, "
            f"step={self.step}/{self._steps}, val={self._val!r}, "
            f"variant={self._variant!r})"
        )

    @property
    def start(self) -> float:
        return self._start

    @property
    def goal(self) -> float:
        return self._goal

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def kind(self) -> TweenKind:
        return self._variant.kind

    @property
    def val(self) -> float:
        return self._val

    @property
    def progress(self) -> float:
        return self.step / self._steps

    @property
    def settled(self) -> bool:
        return self.step == self._steps

    def _value_at(self, step: int) -> float:
        _check_int("step", step)
        if not 0 <= step <= self._steps:
            raise InvalidTweenError(
                f"step must be within [0, {self._steps}], got {step}"
            )
        return self._variant(self._start, self._goal, step / self._steps)

    def _move_to(self, step: int) -> None:
        # Commit only after the easing returns.
        val = self._value_at(step)
        self.step = step
        self._val = val

    def recompute(self) -> None:
        """Refresh ``val`` from the current ``step``.

        Only needed after assigning ``step`` directly; the movement methods
        keep ``val`` in sync themselves.
        """
        self._val = self._value_at(self.step)

    def advance(self, amount: int = 1) -> None:
        """Move forward ``amount`` steps, stopping at ``steps``."""
        _check_amount(amount)
        target = self.step + amount
        if target > self._steps:
            logger.debug("advance clamped at %d (requested %d)", self._steps, target)
        self._move_to(min(self._steps, target))

    def retreat(self, amount: int = 1) -> None:
        """Move back ``amount`` steps, stopping at zero."""
        _check_amount(amount)
        target = self.step - amount
        if target < 0:
            logger.debug("retreat clamped at 0 (requested %d)", target)
        self._move_to(max(0, target))

    def seek(self, step: int) -> None:
        """Jump to ``step``, clamped to ``[0, steps]``."""
        _check_int("step", step)
        self._move_to(max(0, min(self._steps, step)))

    def reset(self) -> None:
        """Return to the freshly constructed state (``step=0``, ``val=start``)."""
        self.step = 0
        self._val = self._start


def create_tween(
    kind: TweenKind,
    start: float,
    goal: float,
    steps: int,
    p: float = DEFAULT_EXPONENT,
    p2: float | None = None,
) -> Tween:
    """Create a tween using one of the built-in easings.

    ``p`` is the exponent for ease-in and ease-out. For ease-in-out, ``p``
    feeds the ease-in side and ``p2`` (default: ``p``) the ease-out side.
    Custom easings must go through :func:`create_custom_tween`.
    """
    if p2 is None:
        p2 = p
    variant: Variant
    if kind is TweenKind.LINEAR:
        variant = Linear()
    elif kind is TweenKind.EASE_IN:
        variant = EaseIn(p)
    elif kind is TweenKind.EASE_OUT:
        variant = EaseOut(p)
    elif kind is TweenKind.EASE_IN_OUT:
        variant = EaseInOut(p, p2)
    elif kind is TweenKind.CUSTOM:
        raise InvalidTweenError(
            "TweenKind.CUSTOM needs an easing function; use create_custom_tween()"
        )
    else:
        raise InvalidTweenError(f"unknown tween kind: {kind!r}")

    tween = Tween(start, goal, steps, variant)
    logger.debug("created %r", tween)
    return tween


def create_custom_tween(
    fn: EasingFunction, start: float, goal: float, steps: int
) -> Tween:
    """Create a tween driven by ``fn(start, goal, frac) -> value``."""
    tween = Tween(start, goal, steps, Custom(fn))
    logger.debug("created %r", tween)
    return tween
