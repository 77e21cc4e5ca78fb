"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, middleware and exception
handlers, and configures the uvicorn server.

Dependencies: fastapi, knowledge_assistant.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from knowledge_assistant.api.deps import ServiceContainer
from knowledge_assistant.api.error_handling import register_exception_handlers
from knowledge_assistant.configs import get_settings
from knowledge_assistant.observability.logger import configure_logging
from knowledge_assistant.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import chat_router, health_router, knowledge_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        container: Pre-built service container; built from settings at
            startup when None

    Returns:
        FastAPI: Configured application instance with all routers registered
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        configure_logging(get_settings().log_level)
        services = container or ServiceContainer()
        await services.startup()
        app.state.services = services
        logger.info("Application startup complete")

        yield

        # Shutdown
        await services.shutdown()
        logger.info("Knowledge store connections released")

    app = FastAPI(
        title="Knowledge Assistant API",
        description="Local knowledge-base chat assistant grounded on uploaded files",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(chat_router, prefix=API_PREFIX)
    app.include_router(knowledge_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "knowledge_assistant.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
