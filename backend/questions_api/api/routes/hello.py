"""Hello — liveness greeting.

Invariants:
    - GET /hello always returns 200 "hello world!" as text/plain
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    """Liveness probe. Returns 200 if the process is up."""
    return "hello world!"
