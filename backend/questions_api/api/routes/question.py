"""Question Route — GET /question.

Invariants:
    - Consumes no path or query parameters
    - Handler outcome goes through the result mapper unchanged
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from questions_api.api.dependencies import get_question_handler
from questions_api.api.result_mapper import to_response
from questions_api.schemas.question import QuestionResponse
from questions_api.services.handle_question import QuestionHandler

router = APIRouter(tags=["questions"])


@router.get("/question", response_model=None)
async def get_question(
    handler: QuestionHandler = Depends(get_question_handler),
) -> Response:
    outcome = await handler.get_question()
    return to_response(outcome, QuestionResponse.from_domain)
