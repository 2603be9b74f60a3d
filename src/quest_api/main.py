from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import QuestConflictError, QuestNotFoundError
from .repositories import InMemoryQuestRepository, QuestRepository
from .routers import quests as quests_router
from .schemas import GenericResponse
from .settings import Settings, get_settings
from .utils import fail_envelope

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "quests",
        "description": "CRUD operations for quests, with working-days-to-deadline scheduling hints.",
    },
]


async def conflict_exception_handler(request: Request, exc: QuestConflictError) -> JSONResponse:
    """Map a store conflict (duplicate title, missing deadline) to 409 with the fail envelope."""
    logger.warning("Conflict on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=409, content=fail_envelope(exc.message))


async def not_found_exception_handler(request: Request, exc: QuestNotFoundError) -> JSONResponse:
    """Map a missing quest to 404 with the fail envelope."""
    logger.warning("Not found on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=404, content=fail_envelope(exc.message))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "status": "fail",
            "message": "Request validation failed",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    return JSONResponse(
        status_code=422,
        content=fail_envelope("Request validation failed", detail=jsonable_encoder(exc.errors())),
    )


# PUBLIC_INTERFACE
def health_check() -> GenericResponse:
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health.
    """
    return GenericResponse(status="success", message="working")


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[QuestRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The application owns exactly one repository, reachable from handlers via
    app.state.repository. Pass one in to share it or to control its clock;
    otherwise a fresh in-memory repository is created.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Quest API",
        description="Backend API service for tracking quests and the working days left until their deadlines.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.repository = repository if repository is not None else InMemoryQuestRepository()

    # CORS_ALLOW_ORIGINS, with "*" when empty
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QuestConflictError, conflict_exception_handler)
    app.add_exception_handler(QuestNotFoundError, not_found_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_api_route(
        "/api/healthchecker",
        health_check,
        methods=["GET"],
        response_model=GenericResponse,
        summary="Health Check",
        tags=["health"],
    )
    app.include_router(quests_router.router)

    logger.info(
        "Quest API configured (repository=%s, cors=%s)",
        type(app.state.repository).__name__,
        "*" if allow_all else ",".join(settings.cors_allow_origins),
    )
    return app


app = create_app()
