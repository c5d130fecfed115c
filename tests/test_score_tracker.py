"""Tests for ScoreTracker class."""

import pytest

from core.models import ScoreSnapshot
from core.score_tracker import ScoreTracker


class TestScoreTrackerInit:
    """Tests for ScoreTracker initialization."""

    def test_starts_inactive_with_zero_counters(self, tracker):
        """Test a new tracker is inactive and all counters are zero."""
        assert not tracker.is_active()
        assert tracker.snapshot() == ScoreSnapshot()

    def test_default_clock(self):
        """Test the default clock can be used."""
        tracker = ScoreTracker()
        tracker.start()
        assert tracker.snapshot().elapsed_ms >= 0


class TestScoreTrackerCounters:
    """Tests for counter increments."""

    def test_increments(self, tracker):
        """Test each increment adds one to its counter."""
        tracker.start()
        tracker.inc_keystrokes()
        tracker.inc_keystrokes()
        tracker.inc_backspace_count()
        tracker.inc_enter_count()
        tracker.add_characters(3)

        snapshot = tracker.snapshot()
        assert snapshot.keystrokes == 2
        assert snapshot.backspace_count == 1
        assert snapshot.enter_count == 1
        assert snapshot.characters_typed == 3
        assert snapshot.error_count == 0

    def test_increments_do_not_fail_when_inactive(self, tracker):
        """Test counters can be incremented in any state."""
        tracker.inc_keystrokes()
        tracker.inc_backspace_count()
        tracker.inc_enter_count()
        tracker.add_characters(0)

        assert tracker.snapshot().keystrokes == 1

    def test_negative_character_delta_is_a_programming_error(self, tracker):
        """Test adding a negative number of characters fails fast."""
        with pytest.raises(AssertionError):
            tracker.add_characters(-1)


class TestScoreTrackerTiming:
    """Tests for elapsed-time accounting."""

    def test_elapsed_time_accrues_while_active(self, tracker, clock):
        """Test elapsed time includes the running span."""
        tracker.start()
        clock.advance(1500)

        assert tracker.snapshot().elapsed_ms == 1500

    def test_start_is_idempotent(self, tracker, clock):
        """Test calling start again does not restart the span."""
        tracker.start()
        clock.advance(1000)
        tracker.start()
        clock.advance(500)

        assert tracker.snapshot().elapsed_ms == 1500

    def test_suspend_stops_accrual_and_keeps_counters(self, tracker, clock):
        """Test suspended time does not count."""
        tracker.start()
        tracker.inc_keystrokes()
        clock.advance(1000)
        tracker.suspend()
        clock.advance(5000)

        snapshot = tracker.snapshot()
        assert not tracker.is_active()
        assert snapshot.elapsed_ms == 1000
        assert snapshot.keystrokes == 1

    def test_resume_after_suspend(self, tracker, clock):
        """Test start after suspend continues the elapsed time."""
        tracker.start()
        clock.advance(1000)
        tracker.suspend()
        clock.advance(5000)
        tracker.start()
        clock.advance(250)

        assert tracker.snapshot().elapsed_ms == 1250

    def test_suspend_when_inactive_is_noop(self, tracker, clock):
        """Test suspending an inactive tracker changes nothing."""
        tracker.suspend()
        clock.advance(1000)

        assert tracker.snapshot().elapsed_ms == 0
        assert not tracker.is_active()

    def test_clock_going_backwards_counts_as_zero(self, tracker, clock):
        """Test a backwards clock never yields negative time."""
        clock.advance(1000)
        tracker.start()
        clock.now_ms = 200

        assert tracker.snapshot().elapsed_ms == 0


class TestScoreTrackerReInit:
    """Tests for re_init."""

    def test_re_init_zeroes_everything(self, tracker, clock):
        """Test re_init zeroes counters, time and the active flag."""
        tracker.start()
        tracker.inc_keystrokes()
        tracker.inc_backspace_count()
        tracker.inc_enter_count()
        tracker.add_characters(4)
        clock.advance(2000)

        tracker.re_init()

        assert not tracker.is_active()
        assert tracker.snapshot() == ScoreSnapshot()

    def test_snapshot_is_a_copy(self, tracker):
        """Test later changes do not alter an earlier snapshot."""
        tracker.inc_keystrokes()
        snapshot = tracker.snapshot()
        tracker.inc_keystrokes()

        assert snapshot.keystrokes == 1
