"""Practice session lifecycle: Idle -> Active -> Suspended -> Completed."""

import logging
import threading
from typing import Callable, Optional

from core.codepoints import split_codepoints
from core.diff_engine import DiffEngine
from core.models import (
    ClassificationResult,
    DisplayUnit,
    InputOutcome,
    KeyAction,
    ScoreSnapshot,
    SessionStatus,
)
from core.score_tracker import ScoreTracker

log = logging.getLogger("typefollow.session")


class PracticeSession:
    """Routes input and focus events to the score tracker and diff engine.

    Input events are expected one at a time from the UI loop. Focus events
    may arrive from a probe thread, so every transition holds the lock.
    """

    def __init__(
        self,
        score_tracker: Optional[ScoreTracker] = None,
        diff_engine: Optional[DiffEngine] = None,
        on_classified: Optional[Callable[[list[ClassificationResult]], None]] = None,
        on_passage_loaded: Optional[Callable[[tuple[DisplayUnit, ...]], None]] = None,
        on_completed: Optional[Callable[[ScoreSnapshot], None]] = None,
    ):
        """Initialize practice session.

        Args:
            score_tracker: Score counters (default: new ScoreTracker)
            diff_engine: Input comparison engine (default: new DiffEngine)
            on_classified: Renderer callback for each non-empty result batch
            on_passage_loaded: Renderer callback to draw the pristine passage
            on_completed: Callback receiving the final score snapshot
        """
        self.score_tracker = score_tracker or ScoreTracker()
        self.diff_engine = diff_engine or DiffEngine()
        self.on_classified = on_classified
        self.on_passage_loaded = on_passage_loaded
        self.on_completed = on_completed

        self._lock = threading.RLock()
        self._passage_text: Optional[str] = None
        self._passage: tuple[DisplayUnit, ...] = ()
        self._status = SessionStatus.IDLE
        self._confirmed_length = 0
        # No input is accepted until a passage has been loaded
        self._editable = False

    @property
    def status(self) -> SessionStatus:
        with self._lock:
            return self._status

    @property
    def passage(self) -> tuple[DisplayUnit, ...]:
        with self._lock:
            return self._passage

    @property
    def confirmed_length(self) -> int:
        with self._lock:
            return self._confirmed_length

    @property
    def is_editable(self) -> bool:
        with self._lock:
            return self._editable

    def load_passage(self, text: str) -> None:
        """Load a new passage and reset the session to Idle.

        Args:
            text: Passage text; empty text gives a zero-length passage
        """
        if text is None:
            raise TypeError("passage text must not be None")

        with self._lock:
            self._passage_text = text
            self._passage = passage = tuple(split_codepoints(text))
            self._reset()
            log.info(f"Loaded passage of {len(passage)} characters")

        self._notify(self.on_passage_loaded, passage)

    def restart(self) -> None:
        """Retype the current passage from the beginning."""
        with self._lock:
            if self._passage_text is None:
                return
            passage = self._passage
            self._reset()
            log.info("Session restarted")

        self._notify(self.on_passage_loaded, passage)

    def on_input_changed(self, current_input: str, key_action: KeyAction) -> InputOutcome:
        """Handle a change of the input text.

        Args:
            current_input: Full current input text
            key_action: Key that produced the change

        Returns:
            InputOutcome describing classifications and transitions
        """
        with self._lock:
            if not self._editable or self._status == SessionStatus.COMPLETED:
                return InputOutcome(status=self._status)

            if self._status != SessionStatus.ACTIVE:
                self.score_tracker.start()
                self._status = SessionStatus.ACTIVE

            self._count_key(key_action)

            passage = self._passage
            previous_length = self._confirmed_length
            diff = self.diff_engine.classify(passage, previous_length, current_input)
            log.debug(
                f"previous_length:{previous_length}, current_length:{diff.new_length}"
            )

            if diff.new_length > previous_length:
                self.score_tracker.add_characters(diff.new_length - previous_length)
            self._confirmed_length = diff.new_length

            if diff.full_reset:
                self._reset()
                log.info("Input cleared, session reset")
            elif diff.completed:
                self._complete()

            outcome = InputOutcome(
                classifications=diff.results,
                completed=diff.completed,
                full_reset=diff.full_reset,
                status=self._status,
            )
            snapshot = self.score_tracker.snapshot() if diff.completed else None

        if outcome.classifications:
            self._notify(self.on_classified, outcome.classifications)
        if diff.full_reset:
            self._notify(self.on_passage_loaded, passage)
        if snapshot is not None:
            self._notify(self.on_completed, snapshot)

        return outcome

    def on_focus_lost(self) -> None:
        """Suspend scoring when the input loses focus while typing."""
        with self._lock:
            if self._status != SessionStatus.ACTIVE:
                return

            self.score_tracker.suspend()
            self._status = SessionStatus.SUSPENDED
            log.info("Input lost focus, scoring suspended")

    def on_focus_regained(self) -> None:
        """Resume timing of a suspended session when focus returns."""
        with self._lock:
            if self._status != SessionStatus.SUSPENDED:
                return

            self.score_tracker.start()
            self._status = SessionStatus.ACTIVE
            log.info("Input regained focus, scoring resumed")

    def score_snapshot(self) -> ScoreSnapshot:
        with self._lock:
            return self.score_tracker.snapshot()

    def _count_key(self, key_action: KeyAction) -> None:
        self.score_tracker.inc_keystrokes()

        if key_action == KeyAction.BACKSPACE:
            self.score_tracker.inc_backspace_count()
        elif key_action == KeyAction.ENTER:
            self.score_tracker.inc_enter_count()

    def _reset(self) -> None:
        self._editable = True
        self._confirmed_length = 0
        self._status = SessionStatus.IDLE
        self.score_tracker.re_init()

    def _complete(self) -> None:
        self._editable = False
        self._status = SessionStatus.COMPLETED
        self.score_tracker.suspend()
        log.info(f"Session completed: {self.score_tracker.snapshot()}")

    def _notify(self, callback: Optional[Callable], payload) -> None:
        if callback is None:
            return

        try:
            callback(payload)
        except Exception:
            log.exception("Error in session callback")
