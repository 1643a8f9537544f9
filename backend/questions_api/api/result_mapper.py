"""Result Mapper — converts an Outcome into exactly one HTTP response.

Invariants:
    - Success → 200 application/json, body rendered through a pydantic schema
    - Failure → error.http_status text/plain, body = error.message
    - Status and body are chosen together from the outcome arm

Design Decisions:
    - Plain text for failures: clients of GET /question match on the fixed
      message "Cannot parse id into integer", not on a JSON envelope
    - render callable keeps the mapper free of domain → schema knowledge
"""

from typing import Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from questions_api.core.outcome import Failure, Outcome, Success

T = TypeVar("T")


def to_response(outcome: Outcome[T], render: Callable[[T], BaseModel]) -> Response:
    if isinstance(outcome, Success):
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=render(outcome.value).model_dump(mode="json"),
        )
    if isinstance(outcome, Failure):
        return PlainTextResponse(
            outcome.error.message, status_code=outcome.error.http_status,
        )
    raise TypeError(f"Not an Outcome: {outcome!r}")
