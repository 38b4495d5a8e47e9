"""FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import logfire

from agora.config import Settings
from agora.interface.api.routes import answers, health, questions, users, votes
from agora.interface.error import INVALID_REQUEST, error_detail
from agora.util.di.container import create_container, setup_di
from agora.util.observability import instrument_fastapi


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error["msg"])
    return "; ".join(parts) or "Invalid request"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema failures as 400 InvalidRequest instead of 422."""
    message = _describe_validation_errors(exc)
    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error_detail(INVALID_REQUEST, message)},
    )


def create_app(container=None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Agora API",
        description="Backend API for Agora - a community Q&A board where answers are ranked by votes",
        version=settings.version,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
