"""Split text into Display Units, one per Unicode codepoint."""

from core.models import DisplayUnit


def split_codepoints(text: str, start: int = 0) -> list[DisplayUnit]:
    """Split text into Display Units.

    Python strings index by codepoint, so characters outside the basic
    multilingual plane already occupy a single position.

    Args:
        text: Text to split
        start: Index of the first unit, for splitting a slice of longer text

    Returns:
        One DisplayUnit per codepoint, in order
    """
    return [DisplayUnit(char=char, index=i) for i, char in enumerate(text, start=start)]


def count_codepoints(text: str) -> int:
    """Number of Display Units in text."""
    return len(text)
