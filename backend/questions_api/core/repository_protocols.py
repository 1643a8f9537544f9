"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Question lookup accessed only through QuestionProvider
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async in Protocol: a real store does IO, the static provider simply
      returns immediately
"""

from typing import Protocol

from questions_api.core.domain_types import Question, QuestionId


class QuestionProvider(Protocol):
    """Contract for fetching a Question by id, implemented by shell.

    Raises ResourceNotFoundError when no question exists for the id.
    """
    async def get(self, question_id: QuestionId) -> Question: ...
