"""
repodoc - FastAPI Application Entry Point

Usage:
    uvicorn repodoc.main:app --reload

Or:
    python -m repodoc.main
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from repodoc.core.config import Settings, get_settings
from repodoc.core.dependencies import AppContext, build_context
from repodoc.core.exceptions import AppException
from repodoc.api.routes import (
    health_router,
    analysis_router,
    repositories_router,
    auth_router,
)
from repodoc.api.middleware.error_handler import (
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)

logger = logging.getLogger("repodoc")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs startup and shutdown; the context itself is built by create_app.
    """
    settings = app.state.context.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"User store: {settings.user_store_backend}, model: {settings.gemini_model}")

    yield

    logger.info("Shutting down application...")


def create_app(
    settings: Optional[Settings] = None,
    context: Optional[AppContext] = None
) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application. Pass ``context`` to
    supply your own user store, completion client or GitHub transport.
    """
    if context is None:
        context = build_context(settings or get_settings())
    settings = context.settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
## repodoc API

Analyze a GitHub repository and generate a README for it.

### Quick Start
1. Link GitHub via `GET /api/auth/github?code=...` and keep the returned token
2. POST `/api/analyze-repo` with `owner` and `repo` (Bearer token)
3. POST the analysis to `/api/generate-readme`
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.context = context

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(analysis_router, prefix=settings.api_prefix)
    app.include_router(repositories_router, prefix=settings.api_prefix)
    app.include_router(auth_router, prefix=settings.api_prefix)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health"
        }

    return app


# Create the app instance
app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "repodoc.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    main()
