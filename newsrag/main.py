"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures
lifespan. Configuration is validated before any client is built so a
missing variable stops startup with a readable message.

Dependencies: fastapi, uvicorn, newsrag.api, newsrag.observability, newsrag.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsrag import __version__
from newsrag.api.deps import ServiceContainer
from newsrag.api.errors import register_exception_handlers
from newsrag.api.routers import (
    chat_router,
    health_router,
    root_router,
    sessions_router,
)
from newsrag.api.routers.chat import SESSION_HEADER
from newsrag.configs import get_settings
from newsrag.observability.logger import configure_logging
from newsrag.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds shared clients at startup and releases them at shutdown.
    A container already placed on app.state (tests) is used as is.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured", extra={"environment": settings.environment})

    owns_container = getattr(app.state, "container", None) is None
    if owns_container:
        try:
            app.state.container = ServiceContainer.from_settings(settings)
        except Exception as e:
            logger.exception(
                "Failed to initialize application resources",
                extra={"error": str(e)},
            )
            raise
    logger.info("Application startup complete: all resources initialized")

    yield

    if owns_container:
        await app.state.container.aclose()
        app.state.container = None
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="News RAG Chat API",
        description="Retrieval-augmented chat over recent news articles",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[SESSION_HEADER, CORRELATION_HEADER],
    )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(chat_router)
    app.include_router(sessions_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "newsrag.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
