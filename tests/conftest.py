"""Shared test fixtures for TypeFollow tests."""

import pytest

from core.score_tracker import ScoreTracker
from core.session import PracticeSession


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock():
    """Create a fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def tracker(clock):
    """Create a ScoreTracker on the fake clock."""
    return ScoreTracker(clock_ms=clock)


@pytest.fixture
def session(tracker):
    """Create a PracticeSession that records every callback."""
    events = {"classified": [], "loaded": [], "completed": []}
    session = PracticeSession(
        score_tracker=tracker,
        on_classified=events["classified"].append,
        on_passage_loaded=events["loaded"].append,
        on_completed=events["completed"].append,
    )
    session.events = events
    return session
