"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /api/signup, /api/signin
- /api/users, /api/workspace
- /api/chats, /api/chats/{chat_id}
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatserver.config.logging_config import setup_logging
from chatserver.config.settings import Config, get_config
from chatserver.infrastructure.persistence import init_db
from chatserver.presentation.api import auth_router, chats_router, workspaces_router
from chatserver.presentation.middleware import RequestContextMiddleware
from chatserver.setup.ioc import create_container

logger = logging.getLogger(__name__)


def create_fastapi_app(
    config: type[Config] = Config, container: Optional[AsyncContainer] = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        config: settings class; defaults to the environment-driven Config
        container: prebuilt DI container (tests pass one with generated keys)

    Returns:
        FastAPI application instance
    """
    setup_logging(config.LOG_LEVEL, config.LOG_PATH or None, config.LOG_FORMAT)

    # Dishka adds middleware, which must happen before the app starts
    container = container or create_container(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.DB_CREATE_TABLES:
            await init_db(await container.get(AsyncEngine))
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title=config.APP_NAME,
        description="Workspaces, users and chats",
        version=config.APP_VERSION,
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id", "X-Server-Time"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": jsonable_errors(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {type(exc).__name__}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Chat server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)  # POST /api/signup, /api/signin
    app.include_router(workspaces_router)  # GET /api/users, /api/workspace
    app.include_router(chats_router)  # /api/chats

    return app


def jsonable_errors(errors) -> list[dict]:
    """Pydantic error dicts may carry exception objects in ctx; keep them printable."""
    return [
        {key: (str(value) if key == "ctx" else value) for key, value in error.items()}
        for error in errors
    ]


app = create_fastapi_app(get_config())
