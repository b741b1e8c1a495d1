from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import anyio
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routers import todos as todos_router
from .service import TodoService
from .settings import Settings, get_settings
from .store import TodoStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "todos",
        "description": "CRUD operations for Todo items held in an in-memory store.",
    },
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for malformed request payloads.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the Todo backend application.

    The todo store is started when the application starts up and stopped when it
    shuts down; it is exposed to request handlers as `app.state.todo_service`.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = TodoStore(base_url=settings.base_url)
        async with anyio.create_task_group() as tg:
            await store.start(tg)
            app.state.todo_service = TodoService(store)
            logger.info("Todo store started (base url %s)", settings.base_url)
            try:
                yield
            finally:
                await store.stop()
        logger.info("Todo store stopped")

    app = FastAPI(
        title="Todo Backend",
        description="TodoBackend API service keeping todos in an in-memory store.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    # Configure CORS from CORS_ALLOW_ORIGINS, with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(todos_router.router)
    return app


app = create_app()
