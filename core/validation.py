"""Validation helpers for TypeFollow."""

import logging

log = logging.getLogger("typefollow.validation")


def validate_duration_ms(start_ms: int, end_ms: int) -> int:
    """Duration between two clock readings, never negative.

    Args:
        start_ms: Earlier clock reading in milliseconds
        end_ms: Later clock reading in milliseconds

    Returns:
        Duration in milliseconds (0 if the clock went backwards)
    """
    duration = end_ms - start_ms
    if duration < 0:
        log.warning(f"Clock went backwards by {-duration}ms (start={start_ms}, end={end_ms})")
        return 0

    return duration


def assert_in_sync(previous_length: int) -> None:
    """Fail fast when the caller's confirmed length cannot be valid.

    The session and its caller share memory and stay in step by
    construction, so a negative length is a programming error.
    """
    assert previous_length >= 0, (
        f"previous input length out of sync: {previous_length}"
    )
