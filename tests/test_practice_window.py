"""Tests for ui.practice_window helpers that need no running QApplication."""

from core.codepoints import split_codepoints
from ui.practice_window import CommitKeyGate, utf16_offsets


class TestUtf16Offsets:
    """Tests for utf16_offsets function."""

    def test_ascii_passage(self):
        assert utf16_offsets(tuple(split_codepoints("cat"))) == [0, 1, 2]

    def test_empty_passage(self):
        assert utf16_offsets(()) == []

    def test_astral_codepoint_takes_two_positions(self):
        """Test positions after an emoji shift by one extra code unit."""
        offsets = utf16_offsets(tuple(split_codepoints("a\U0001F600b")))

        assert offsets == [0, 1, 3]

    def test_consecutive_astral_codepoints(self):
        offsets = utf16_offsets(tuple(split_codepoints("\U00020000\U00020001x")))

        assert offsets == [0, 2, 4]

    def test_bmp_cjk_takes_one_position(self):
        assert utf16_offsets(tuple(split_codepoints("跟打字"))) == [0, 1, 2]


class TestCommitKeyGate:
    """Tests for CommitKeyGate class."""

    def test_plain_key_release_counts(self):
        gate = CommitKeyGate()

        gate.key_pressed()

        assert gate.accept_key_release() is True

    def test_release_of_commit_key_is_dropped(self):
        """Test the key that commits IME text is not counted again."""
        gate = CommitKeyGate()

        gate.key_pressed()
        gate.committed()

        assert gate.accept_key_release() is False

    def test_only_one_release_is_dropped(self):
        gate = CommitKeyGate()
        gate.committed()

        assert gate.accept_key_release() is False
        assert gate.accept_key_release() is True

    def test_key_press_after_commit_clears_it(self):
        """Test a new key press after a commit counts normally."""
        gate = CommitKeyGate()
        gate.committed()

        gate.key_pressed()

        assert gate.accept_key_release() is True
