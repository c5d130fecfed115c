"""Incremental comparison of typed input against the passage."""

import logging
from typing import Sequence

from core.codepoints import count_codepoints, split_codepoints
from core.models import (
    Classification,
    ClassificationResult,
    DiffOutcome,
    DisplayUnit,
)
from core.validation import assert_in_sync

log = logging.getLogger("typefollow.diff_engine")


class DiffEngine:
    """Classifies Display Units that changed since the previous input."""

    def classify(
        self,
        passage: Sequence[DisplayUnit],
        previous_length: int,
        current_input: str,
    ) -> DiffOutcome:
        """Compare current input to the passage.

        Only positions between the previous and current input length are
        classified. Growth yields CORRECT/INCORRECT, shrinking yields RESET.

        Args:
            passage: Passage Display Units
            previous_length: Input length (Display Units) at the last event
            current_input: Full current input text

        Returns:
            DiffOutcome with the new length, results and completion flags
        """
        assert_in_sync(previous_length)

        current_length = count_codepoints(current_input)

        if current_length == previous_length:
            # IME composition can change the text without changing its length
            return DiffOutcome(new_length=current_length)

        if current_length > previous_length:
            typed = split_codepoints(current_input[previous_length:], start=previous_length)
            results = [self._classify_typed(passage, unit) for unit in typed]
        else:
            results = [
                ClassificationResult(
                    index=i,
                    classification=Classification.RESET,
                    expected=passage[i].char if i < len(passage) else None,
                )
                for i in range(current_length, previous_length)
            ]

        full_reset = current_length == 0 and previous_length > 0
        # TODO: require the trailing characters to be correct before completing
        completed = not full_reset and current_length >= len(passage)

        return DiffOutcome(
            new_length=current_length,
            results=results,
            completed=completed,
            full_reset=full_reset,
        )

    @staticmethod
    def _classify_typed(
        passage: Sequence[DisplayUnit], unit: DisplayUnit
    ) -> ClassificationResult:
        """Classify one newly typed unit; overtyping past the end is incorrect."""
        if unit.index >= len(passage):
            return ClassificationResult(
                index=unit.index,
                classification=Classification.INCORRECT,
                typed=unit.char,
            )

        expected = passage[unit.index].char
        classification = (
            Classification.CORRECT if unit.char == expected else Classification.INCORRECT
        )
        return ClassificationResult(
            index=unit.index,
            classification=classification,
            expected=expected,
            typed=unit.char,
        )
