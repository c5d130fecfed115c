"""Cumulative score counters for a practice session."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from core.models import ScoreSnapshot
from core.validation import validate_duration_ms

log = logging.getLogger("typefollow.score_tracker")


def monotonic_ms() -> int:
    """Monotonic clock in milliseconds."""
    return int(time.monotonic() * 1000)


@dataclass
class ScoreCounters:
    """Raw counters owned by a ScoreTracker."""
    keystrokes: int = 0
    characters_typed: int = 0
    backspace_count: int = 0
    enter_count: int = 0
    error_count: int = 0
    elapsed_ms: int = 0


class ScoreTracker:
    """Tracks keystrokes, characters and active typing time.

    The tracker only knows whether it is accruing time. The owning session
    decides which lifecycle status that corresponds to.
    """

    def __init__(self, clock_ms: Callable[[], int] = monotonic_ms):
        """Initialize score tracker.

        Args:
            clock_ms: Millisecond time source (default: monotonic clock)
        """
        self.clock_ms = clock_ms
        self.counters = ScoreCounters()
        self._active = False
        self._resumed_at_ms: Optional[int] = None

    def start(self) -> None:
        """Begin or resume elapsed-time accounting."""
        if self._active:
            return

        self._active = True
        self._resumed_at_ms = self.clock_ms()
        log.debug("Score tracking started")

    def re_init(self) -> None:
        """Zero every counter and stop accruing time."""
        self.counters = ScoreCounters()
        self._active = False
        self._resumed_at_ms = None

    def suspend(self) -> None:
        """Stop accruing time, keeping the counters."""
        if not self._active:
            return

        self.counters.elapsed_ms += self._running_span_ms()
        self._active = False
        self._resumed_at_ms = None
        log.debug(f"Score tracking suspended at {self.counters.elapsed_ms}ms")

    def inc_keystrokes(self) -> None:
        self.counters.keystrokes += 1

    def inc_backspace_count(self) -> None:
        self.counters.backspace_count += 1

    def inc_enter_count(self) -> None:
        self.counters.enter_count += 1

    def add_characters(self, count: int) -> None:
        """Add newly typed characters.

        Args:
            count: Number of Display Units added (non-negative)
        """
        assert count >= 0, f"character delta must be non-negative, got {count}"
        self.counters.characters_typed += count

    def is_active(self) -> bool:
        return self._active

    def elapsed_ms(self) -> int:
        """Active time so far, including the span still running."""
        if self._active:
            return self.counters.elapsed_ms + self._running_span_ms()
        return self.counters.elapsed_ms

    def snapshot(self) -> ScoreSnapshot:
        """Read-only copy of the counters for reporting."""
        return ScoreSnapshot(
            keystrokes=self.counters.keystrokes,
            characters_typed=self.counters.characters_typed,
            backspace_count=self.counters.backspace_count,
            enter_count=self.counters.enter_count,
            error_count=self.counters.error_count,
            elapsed_ms=self.elapsed_ms(),
        )

    def _running_span_ms(self) -> int:
        if self._resumed_at_ms is None:
            return 0
        return validate_duration_ms(self._resumed_at_ms, self.clock_ms())
