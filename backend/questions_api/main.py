"""Questions API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QuestionsApiError → structured JSON responses
    - CORS allow-list configured from settings (not hardcoded)
    - Logging initialized once on startup via lifespan context manager

Design Decisions:
    - create_app factory: tests build apps with fake providers and settings
      without touching the module-level app
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from questions_api.api.error_handlers import register_error_handlers
from questions_api.api.routes import hello, question
from questions_api.config import Settings, get_settings
from questions_api.core.repository_protocols import QuestionProvider
from questions_api.infrastructure.cors import AllowListCorsMiddleware
from questions_api.infrastructure.observability import setup_logging
from questions_api.infrastructure.question_provider import StaticQuestionProvider

logger = logging.getLogger(__name__)


def create_app(
    provider: QuestionProvider | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Questions API started")
        yield
        logger.info("Questions API shutting down")

    app = FastAPI(title="Questions API", version="0.1.0", lifespan=lifespan)
    app.state.question_provider = provider or StaticQuestionProvider()

    app.add_middleware(
        AllowListCorsMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
    )

    app.include_router(hello.router)
    app.include_router(question.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the app on the configured loopback address."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
