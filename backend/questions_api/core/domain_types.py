"""Domain Types — QuestionId and Question, the only entities of the service.

Invariants:
    - QuestionId is never empty; any other text is kept verbatim
    - Question.id is always a QuestionId
    - Both types are immutable once constructed
    - parse_unsigned_id accepts exactly an optional "+" then ASCII digits,
      within the 32-bit unsigned range

Design Decisions:
    - Frozen dataclasses over NewType: QuestionId needs a validating constructor
    - parse_unsigned_id over int(): int() accepts whitespace, underscores,
      signs and non-ASCII digits, none of which are valid ids
"""

import re
from dataclasses import dataclass

from questions_api.core.errors import QuestionIdValidationError, ValidationErrorKind


MAX_UNSIGNED_ID = 2**32 - 1

_UNSIGNED_ID = re.compile(r"\+?[0-9]+")


# ─── Identity Types ──────────────────────────────────────────────

@dataclass(frozen=True)
class QuestionId:
    """Non-empty text identifier of a Question."""
    value: str

    @classmethod
    def parse(cls, text: str) -> "QuestionId":
        """Build a QuestionId, rejecting the empty string."""
        if not text:
            raise QuestionIdValidationError(ValidationErrorKind.EMPTY)
        return cls(text)

    def __str__(self) -> str:
        return self.value


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Question:
    id: QuestionId
    title: str
    content: str
    tags: tuple[str, ...] | None = None

    def __post_init__(self):
        if not isinstance(self.id, QuestionId):
            raise TypeError(
                f"Question.id must be a QuestionId, got {type(self.id).__name__}",
            )
        if self.tags is not None and not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))


# ─── Validation ──────────────────────────────────────────────────

def parse_unsigned_id(text: str) -> int:
    """Parse text as a 32-bit unsigned integer. Raises ValueError on failure."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_ID.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > MAX_UNSIGNED_ID:
        raise ValueError("number too large to fit in target type")
    return value
