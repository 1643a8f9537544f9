"""Static Question Provider — synthesizes the Question served by GET /question.

Invariants:
    - Satisfies core.repository_protocols.QuestionProvider
    - Returns a new Question per call; nothing is shared between requests
    - The returned Question carries the requested id verbatim

Design Decisions:
    - In-memory synthesis instead of a store: the service has no persistence;
      a database-backed provider can replace this through create_app(provider=...)
"""

from questions_api.core.domain_types import Question, QuestionId


class StaticQuestionProvider:
    """Serve the same question content for any id."""

    def __init__(
        self,
        title: str = "First Question",
        content: str = "How are u?",
        tags: tuple[str, ...] | None = ("faq",),
    ):
        self.title = title
        self.content = content
        self.tags = tags

    async def get(self, question_id: QuestionId) -> Question:
        return Question(
            id=question_id,
            title=self.title,
            content=self.content,
            tags=self.tags,
        )
