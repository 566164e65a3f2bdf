"""
Tests for one-shot signal tracking.
"""

from homebrew.models import RecipeListUiState
from homebrew.signals import Signal, SignalKind, SignalTracker


class TestSignalTracker:
    """Test cases for SignalTracker."""

    def test_new_value_is_delivered_once(self):
        tracker = SignalTracker()
        assert tracker.observe(SignalKind.ERROR, "boom") is True
        assert tracker.observe(SignalKind.ERROR, "boom") is False

    def test_none_is_never_delivered(self):
        assert SignalTracker().observe(SignalKind.SUCCESS, None) is False

    def test_same_value_after_clear_is_delivered_again(self):
        """A value re-emitted after the field was cleared counts as a new emission."""
        tracker = SignalTracker()
        tracker.observe(SignalKind.ERROR, "boom")
        tracker.observe(SignalKind.ERROR, None)
        assert tracker.observe(SignalKind.ERROR, "boom") is True

    def test_changed_value_is_delivered(self):
        tracker = SignalTracker()
        tracker.observe(SignalKind.SUCCESS, "Saved")
        assert tracker.observe(SignalKind.SUCCESS, "Created") is True

    def test_kinds_are_independent(self):
        tracker = SignalTracker()
        tracker.observe(SignalKind.ERROR, "same")
        assert tracker.observe(SignalKind.SUCCESS, "same") is True

    def test_collect_returns_signals_in_delivery_order(self):
        ui_state = RecipeListUiState(error="boom", success_message="Saved", navigation_target="r1")
        signals = SignalTracker().collect(ui_state)
        assert signals == [
            Signal(SignalKind.NAVIGATION, "r1"),
            Signal(SignalKind.SUCCESS, "Saved"),
            Signal(SignalKind.ERROR, "boom"),
        ]

    def test_collect_same_state_twice(self):
        """Re-rendering with the same ui-state object delivers nothing new."""
        tracker = SignalTracker()
        ui_state = RecipeListUiState(error="boom")
        assert len(tracker.collect(ui_state)) == 1
        assert tracker.collect(ui_state) == []
