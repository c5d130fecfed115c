"""Periodic focus probe that suspends scoring when the input loses focus."""

import logging
import threading
from typing import Callable, Optional

log = logging.getLogger("typefollow.focus_probe")

DEFAULT_INTERVAL_MS = 100


class FocusProbe:
    """Polls a focus getter and reports focus loss to a session."""

    def __init__(
        self,
        is_focused: Callable[[], bool],
        on_focus_lost: Callable[[], None],
        on_focus_regained: Optional[Callable[[], None]] = None,
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ):
        """Initialize focus probe.

        Args:
            is_focused: Returns True while the input surface has focus
            on_focus_lost: Called on every probe that finds no focus
            on_focus_regained: Optional, called on every probe that finds focus
            interval_ms: Milliseconds between probes (default 100)
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self.is_focused = is_focused
        self.on_focus_lost = on_focus_lost
        self.on_focus_regained = on_focus_regained
        self.interval_ms = interval_ms

        self.running = False
        self._stop_event = threading.Event()
        self.thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start probing in a background thread."""
        if self.running:
            return

        self.running = True
        self._stop_event.clear()
        self.thread = threading.Thread(target=self._run, daemon=True)
        self.thread.start()

    def stop(self) -> None:
        """Stop probing and wait for the thread to exit."""
        self.running = False
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=1)
            self.thread = None

    def probe_once(self) -> bool:
        """Check focus once and forward the result.

        Returns:
            Whether the input was focused
        """
        focused = self.is_focused()
        if not focused:
            self.on_focus_lost()
        elif self.on_focus_regained:
            self.on_focus_regained()
        return focused

    def _run(self) -> None:
        """Background probing loop."""
        while not self._stop_event.wait(self.interval_ms / 1000.0):
            try:
                self.probe_once()
            except Exception:
                log.exception("Error in focus probe")
