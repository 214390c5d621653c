"""
Todo Auth API - Main Application

Composes the auth and task routers over one AppState.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.config import settings
from todo_api.errors import register_exception_handlers
from todo_api.auth.router import router as auth_router
from todo_api.tasks.router import router as tasks_router
from todo_api.security import validate_security_config
from todo_api.state import AppState

import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")

    yield

    # Nothing is persisted
    await app.state.services.log_summary()


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """Build the application around ``state`` (a fresh AppState by default)."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Shared todo list with JWT bearer authentication",
        docs_url="/api-docs" if settings.DOCS_ENABLED else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.services = state if state is not None else AppState()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """
        Health check endpoint.

        Returns the service status and version information.
        """
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    @app.get("/", tags=["Root"])
    async def root() -> dict:
        """Root endpoint with service information."""
        return {
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/api-docs" if settings.DOCS_ENABLED else "disabled",
        }

    app.include_router(auth_router)
    app.include_router(tasks_router)

    return app


app = create_app()


def main() -> None:
    """Run the ASGI server."""
    uvicorn.run(
        "todo_api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
