"""Static Question Provider — synthesized content and id pass-through."""

from questions_api.core.domain_types import Question, QuestionId
from questions_api.infrastructure.question_provider import StaticQuestionProvider


async def test_provider_returns_first_question():
    question = await StaticQuestionProvider().get(QuestionId("1"))
    assert question == Question(
        QuestionId("1"), "First Question", "How are u?", ("faq",),
    )


async def test_provider_keeps_requested_id():
    question = await StaticQuestionProvider().get(QuestionId("abc"))
    assert question.id == QuestionId("abc")


async def test_provider_returns_new_question_per_call():
    provider = StaticQuestionProvider()
    first = await provider.get(QuestionId("1"))
    second = await provider.get(QuestionId("1"))
    assert first == second
    assert first is not second
