"""Typing speed calculation utilities."""


def calculate_chars_per_minute(char_count: int, duration_ms: int) -> float:
    """Calculate characters per minute.

    Args:
        char_count: Characters typed
        duration_ms: Active duration in milliseconds

    Returns:
        Characters per minute, or 0.0 if duration is zero
    """
    if duration_ms <= 0:
        return 0.0

    return char_count / (duration_ms / 60000.0)


def calculate_wpm(char_count: int, duration_ms: int) -> float:
    """Calculate words per minute, counting five characters as one word.

    Args:
        char_count: Characters typed
        duration_ms: Active duration in milliseconds

    Returns:
        WPM, or 0.0 if duration is zero
    """
    return calculate_chars_per_minute(char_count, duration_ms) / 5.0


def calculate_keystroke_rate(keystrokes: int, duration_ms: int) -> float:
    """Keystrokes per second, or 0.0 if duration is zero."""
    if duration_ms <= 0:
        return 0.0

    return keystrokes / (duration_ms / 1000.0)


def calculate_keys_per_char(keystrokes: int, char_count: int) -> float:
    """Average keystrokes spent per typed character.

    IME input can commit several characters for one key, and corrections
    add keys without characters, so this may be below or above 1.

    Args:
        keystrokes: Total keystrokes
        char_count: Characters typed

    Returns:
        Keystrokes per character, or 0.0 if no characters were typed
    """
    if char_count <= 0:
        return 0.0

    return keystrokes / char_count
