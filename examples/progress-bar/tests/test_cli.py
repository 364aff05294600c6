"""Tests for the progress-bar command line."""

import pytest
from main import build_tween, parse_args, render
from tweens import TweenKind


class TestParseArgs:
    """Test argument parsing and validation."""

    def test_defaults(self):
        """Defaults build a 90-step ease-in bar."""
        args = parse_args([])
        assert args.kind == "ease_in"
        assert args.steps == 90
        assert args.p2 is None

    def test_zero_steps_rejected(self):
        """--steps 0 is an error, not silently bumped to 1."""
        with pytest.raises(SystemExit) as exc:
            parse_args(["--steps", "0"])
        assert exc.value.code == 2

    def test_zero_steps_message(self, capsys):
        """The error names the offending flag."""
        with pytest.raises(SystemExit):
            parse_args(["--steps", "0"])
        assert "--steps must be >= 1, got 0" in capsys.readouterr().err

    def test_negative_delay_rejected(self):
        """--delay below zero is an error."""
        with pytest.raises(SystemExit):
            parse_args(["--delay", "-1"])


class TestBuildTween:
    """Test tween construction from arguments."""

    def test_builtin_kind(self):
        """--kind maps onto TweenKind."""
        tween = build_tween(parse_args(["--kind", "ease_out", "--steps", "4"]))
        assert tween.kind is TweenKind.EASE_OUT
        assert tween.steps == 4

    def test_threshold_kind(self):
        """threshold builds a custom tween."""
        tween = build_tween(parse_args(["--kind", "threshold", "--steps", "10"]))
        assert tween.kind is TweenKind.CUSTOM
        tween.advance(8)
        assert tween.val == 60.0

    def test_render_bar_length(self):
        """The bar is round(val) characters long."""
        tween = build_tween(parse_args(["--kind", "linear", "--goal", "10", "--steps", "2"]))
        tween.advance()
        assert render(tween).endswith("=====" + " 1/2")
