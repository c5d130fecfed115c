"""Pydantic models for TypeFollow data structures."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionStatus(str, Enum):
    """Lifecycle status of a practice session."""

    IDLE = "idle"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    COMPLETED = "completed"


class KeyAction(str, Enum):
    """Key that produced an input-changed event."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    OTHER = "other"


class Classification(str, Enum):
    """Classification of a single Display Unit."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    RESET = "reset"


class DisplayUnit(BaseModel):
    """One codepoint of passage or input text."""

    char: str = Field(..., description="Exactly one Unicode codepoint")
    index: int = Field(..., ge=0, description="Position in the text")

    model_config = ConfigDict(frozen=True)

    @field_validator("char")
    @classmethod
    def validate_single_codepoint(cls, v):
        if len(v) != 1:
            raise ValueError(f"Display unit must hold one codepoint, got {v!r}")
        return v


class ClassificationResult(BaseModel):
    """Classification emitted for one passage position."""

    index: int = Field(..., ge=0, description="Passage position")
    classification: Classification = Field(..., description="Result for this position")
    expected: str | None = Field(
        default=None, description="Passage character, None past the passage end"
    )
    typed: str | None = Field(
        default=None, description="Typed character, None for reset results"
    )

    model_config = ConfigDict(frozen=True)


class ScoreSnapshot(BaseModel):
    """Read-only copy of the score counters."""

    keystrokes: int = Field(default=0, ge=0, description="Total key events")
    characters_typed: int = Field(default=0, ge=0, description="Characters entered")
    backspace_count: int = Field(default=0, ge=0, description="Backspace presses")
    enter_count: int = Field(default=0, ge=0, description="Enter presses")
    error_count: int = Field(
        default=0, ge=0, description="Reserved; not accumulated yet"
    )
    elapsed_ms: int = Field(default=0, ge=0, description="Active typing time (ms)")

    model_config = ConfigDict(frozen=True, extra="ignore")


class DiffOutcome(BaseModel):
    """Result of comparing the current input against the passage."""

    new_length: int = Field(..., ge=0, description="Input length in Display Units")
    results: list[ClassificationResult] = Field(default_factory=list)
    completed: bool = Field(default=False, description="Input reached passage length")
    full_reset: bool = Field(default=False, description="All input was deleted")


class InputOutcome(BaseModel):
    """What an input-changed event did to the session."""

    classifications: list[ClassificationResult] = Field(default_factory=list)
    completed: bool = Field(default=False)
    full_reset: bool = Field(default=False)
    status: SessionStatus = Field(..., description="Status after the event")
