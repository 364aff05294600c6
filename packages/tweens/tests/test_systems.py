"""Tests for the tween step system and frame iterator."""

from tweens import TweenKind, create_custom_tween, create_tween, frames, make_tween_system


class TestTweenSystem:
    """Test make_tween_system stepping."""

    def test_advances_each_tween_once(self):
        """Each call moves every active tween forward by one step."""
        a = create_tween(TweenKind.LINEAR, 0.0, 100.0, 10)
        b = create_tween(TweenKind.LINEAR, 50.0, 150.0, 5)
        system = make_tween_system()

        active = system([a, b])

        assert a.step == 1
        assert b.step == 1
        assert active == [a, b]

    def test_settled_tweens_drop_out(self):
        """Tweens that settle are not returned as active."""
        a = create_tween(TweenKind.LINEAR, 0.0, 100.0, 10)
        b = create_tween(TweenKind.LINEAR, 50.0, 150.0, 5)
        system = make_tween_system()

        active = [a, b]
        for _ in range(5):
            active = system(active)

        assert b.val == 150.0
        assert active == [a]
        assert a.val == 50.0

        for _ in range(5):
            active = system(active)

        assert a.val == 100.0
        assert active == []

    def test_on_complete_fires_once(self):
        """on_complete fires on the settling call only."""
        completed = []
        t = create_tween(TweenKind.EASE_OUT, 0.0, 1.0, 3)
        system = make_tween_system(on_complete=completed.append)

        for _ in range(6):
            system([t])

        assert completed == [t]

    def test_already_settled_is_skipped(self):
        """A settled tween passed in is neither advanced nor reported."""
        completed = []
        t = create_tween(TweenKind.LINEAR, 0.0, 1.0, 2)
        t.advance(2)
        system = make_tween_system(on_complete=completed.append)

        assert system([t]) == []
        assert completed == []

    def test_duration_of_one(self):
        """A one-step tween settles on the first call."""
        completed = []
        t = create_tween(TweenKind.LINEAR, 0.0, 100.0, 1)
        system = make_tween_system(on_complete=completed.append)

        assert system([t]) == []
        assert t.val == 100.0
        assert completed == [t]

    def test_callback_can_restart_tween(self):
        """on_complete may reset the tween for a loop."""
        t = create_tween(TweenKind.LINEAR, 0.0, 1.0, 2)
        system = make_tween_system(on_complete=lambda tween: tween.reset())

        system([t])
        system([t])

        assert t.step == 0
        assert t.val == 0.0


class TestFrames:
    """Test the frames iterator."""

    def test_yields_every_step_inclusive(self):
        """frames covers steps 0..steps."""
        t = create_tween(TweenKind.LINEAR, 0.0, 100.0, 4)
        seen = [(tw.step, tw.val) for tw in frames(t)]
        assert seen == [(0, 0.0), (1, 25.0), (2, 50.0), (3, 75.0), (4, 100.0)]

    def test_starts_from_current_step(self):
        """frames resumes from wherever the tween is."""
        t = create_tween(TweenKind.LINEAR, 0.0, 100.0, 4)
        t.advance(3)
        assert [tw.step for tw in frames(t)] == [3, 4]

    def test_settled_tween_yields_once(self):
        """A settled tween yields a single frame."""
        t = create_custom_tween(lambda s, g, f: g if f > 0.7 else s, 0.0, 100.0, 100)
        t.advance(100)
        assert [tw.val for tw in frames(t)] == [100.0]
