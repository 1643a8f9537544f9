"""Question Schemas — wire format of a Question.

Invariants:
    - id serializes as a bare string, not an object
    - Field order is id, title, content, tags
    - tags is null when the question has none
"""

from pydantic import BaseModel

from questions_api.core.domain_types import Question


class QuestionResponse(BaseModel):
    """Public-facing question data."""
    id: str
    title: str
    content: str
    tags: list[str] | None = None

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id.value,
            title=question.title,
            content=question.content,
            tags=list(question.tags) if question.tags is not None else None,
        )
