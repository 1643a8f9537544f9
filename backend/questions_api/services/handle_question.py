"""Question Handler — fetch a Question and validate its id into an Outcome.

Invariants:
    - Exactly one Outcome per call; expected failures are returned, not raised
    - Empty id → Failure(QuestionIdValidationError), logged at WARNING
    - Non-numeric id → Failure(InvalidIdError), logged at ERROR
    - No writes, no external calls beyond the injected provider

Design Decisions:
    - Raw id fixed to "1" by default; it is a constructor argument so tests can
      reach the failure branch without a path parameter
    - Provider errors (e.g. ResourceNotFoundError) propagate to the global
      error handlers rather than becoming outcomes
"""

import logging

from questions_api.core.domain_types import Question, QuestionId, parse_unsigned_id
from questions_api.core.errors import (
    ErrorContext, InvalidIdError, QuestionIdValidationError,
)
from questions_api.core.outcome import Failure, Outcome, Success
from questions_api.core.repository_protocols import QuestionProvider

logger = logging.getLogger(__name__)

DEFAULT_QUESTION_ID = "1"


class QuestionHandler:
    """Resource handler behind GET /question."""

    def __init__(
        self, provider: QuestionProvider, question_id: str = DEFAULT_QUESTION_ID,
    ):
        self.provider = provider
        self.question_id = question_id

    async def get_question(self) -> Outcome[Question]:
        try:
            question_id = QuestionId.parse(self.question_id)
        except QuestionIdValidationError as exc:
            logger.warning(
                f"Rejected question id: {exc.message}",
                extra={"error_code": exc.code},
            )
            return Failure(exc)

        question = await self.provider.get(question_id)

        try:
            parse_unsigned_id(question.id.value)
        except ValueError as e:
            logger.error(
                f"cannot parse id due to: {e}",
                extra={"question_id": question.id.value, "error_code": "INVALID_ID"},
            )
            return Failure(InvalidIdError(ErrorContext(question_id=question.id.value)))

        return Success(question)
