"""Tests for easing variants."""
from __future__ import annotations

import dataclasses

import pytest
from tweens import (
    Custom,
    EaseIn,
    EaseInOut,
    EaseOut,
    InvalidTweenError,
    Linear,
    TweenKind,
    ease_in,
    ease_in_out,
    ease_out,
    lerp,
)


class TestVariantKinds:
    def test_each_variant_reports_its_kind(self) -> None:
        assert Linear().kind is TweenKind.LINEAR
        assert EaseIn().kind is TweenKind.EASE_IN
        assert EaseOut().kind is TweenKind.EASE_OUT
        assert EaseInOut().kind is TweenKind.EASE_IN_OUT
        assert Custom(lerp).kind is TweenKind.CUSTOM

    def test_kind_is_not_a_field(self) -> None:
        assert EaseIn(3) == EaseIn(p=3)
        assert repr(EaseIn(3)) == "EaseIn(p=3)"


class TestVariantDefaults:
    def test_default_exponents(self) -> None:
        assert EaseIn().p == 2
        assert EaseOut().p == 2
        assert EaseInOut().p1 == 2
        assert EaseInOut().p2 == 2


class TestVariantEvaluation:
    def test_linear(self) -> None:
        assert Linear()(0.0, 10.0, 0.3) == lerp(0.0, 10.0, 0.3)

    def test_ease_in(self) -> None:
        assert EaseIn(3)(0.0, 10.0, 0.3) == ease_in(0.0, 10.0, 0.3, 3)

    def test_ease_out(self) -> None:
        assert EaseOut(3)(0.0, 10.0, 0.3) == ease_out(0.0, 10.0, 0.3, 3)

    def test_ease_in_out(self) -> None:
        assert EaseInOut(2, 4)(0.0, 10.0, 0.3) == ease_in_out(0.0, 10.0, 0.3, 2, 4)

    def test_custom_delegates(self) -> None:
        variant = Custom(lambda start, goal, frac: start * goal * frac)
        assert variant(2.0, 3.0, 0.5) == 3.0


class TestVariantImmutability:
    def test_frozen_attribute_modification_raises(self) -> None:
        variant = EaseIn(2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            variant.p = 3  # type: ignore[misc]

    def test_custom_requires_callable(self) -> None:
        with pytest.raises(InvalidTweenError, match="must be callable"):
            Custom("not a function")  # type: ignore[arg-type]


class TestTweenKind:
    def test_values(self) -> None:
        assert [k.value for k in TweenKind] == [
            "linear",
            "ease_in",
            "ease_out",
            "ease_in_out",
            "custom",
        ]

    def test_lookup_by_value(self) -> None:
        assert TweenKind("ease_out") is TweenKind.EASE_OUT
