"""Text formatting of a final score for display and the clipboard."""

from core.models import ScoreSnapshot
from core.wpm_calculator import (
    calculate_chars_per_minute,
    calculate_keys_per_char,
    calculate_keystroke_rate,
    calculate_wpm,
)


def format_duration(duration_ms: int) -> str:
    """Format milliseconds as m:ss.s."""
    minutes, remainder_ms = divmod(max(0, duration_ms), 60000)
    return f"{minutes}:{remainder_ms / 1000.0:04.1f}"


def format_score_report(snapshot: ScoreSnapshot) -> str:
    """Format a score snapshot as a single line.

    Args:
        snapshot: Score counters to report

    Returns:
        Comma separated key=value report
    """
    speed = calculate_chars_per_minute(snapshot.characters_typed, snapshot.elapsed_ms)
    wpm = calculate_wpm(snapshot.characters_typed, snapshot.elapsed_ms)
    rate = calculate_keystroke_rate(snapshot.keystrokes, snapshot.elapsed_ms)
    keys_per_char = calculate_keys_per_char(snapshot.keystrokes, snapshot.characters_typed)

    return (
        f"speed={speed:.2f}cpm, "
        f"wpm={wpm:.1f}, "
        f"keystroke_rate={rate:.2f}/s, "
        f"keys_per_char={keys_per_char:.2f}, "
        f"characters={snapshot.characters_typed}, "
        f"keystrokes={snapshot.keystrokes}, "
        f"backspaces={snapshot.backspace_count}, "
        f"enters={snapshot.enter_count}, "
        f"time={format_duration(snapshot.elapsed_ms)}"
    )
