"""System factory and frame iterator for stepping tweens."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from tweens.components import Tween

logger = logging.getLogger(__name__)


def make_tween_system(
    on_complete: Callable[[Tween], None] | None = None,
) -> Callable[[Iterable[Tween]], list[Tween]]:
    """Return a system that advances each unsettled tween by one step.

    The system returns the tweens still in flight. ``on_complete`` fires once
    per tween, on the call that settles it.
    """

    def tween_system(tweens: Iterable[Tween]) -> list[Tween]:
        active: list[Tween] = []
        for tween in list(tweens):
            if tween.settled:
                continue

            tween.advance()

            if not tween.settled:
                active.append(tween)
                continue

            logger.debug("settled %r", tween)
            if on_complete is not None:
                on_complete(tween)

        return active

    return tween_system


def frames(tween: Tween) -> Iterator[Tween]:
    """Yield ``tween`` at every step from its current one through ``steps``.

    The tween is advanced after each yield, so the body of a ``for`` loop
    sees it at steps ``step, step + 1, ..., steps``.
    """
    while not tween.settled:
        yield tween
        tween.advance()
    yield tween
