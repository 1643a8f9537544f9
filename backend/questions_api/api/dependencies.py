"""Route Dependencies — build request-scoped services from app state.

Invariants:
    - The provider lives on app.state.question_provider (set by create_app)
    - A fresh QuestionHandler per request; nothing request-scoped is shared
"""

from fastapi import Request

from questions_api.services.handle_question import QuestionHandler


def get_question_handler(request: Request) -> QuestionHandler:
    return QuestionHandler(request.app.state.question_provider)
