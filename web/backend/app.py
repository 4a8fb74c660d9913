#!/usr/bin/env python3
"""
ATS Pro Web API - FastAPI Application

Resume scoring, candidate history and the recruiter leaderboard over the
local-first persistence layer.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from core.app_context import AppContext
from core.config_loader import AppConfig, load_config
from core.exceptions import AtsError, IOFailure
from .exceptions import (
    ats_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .models.responses import HealthResponse
from .routers import (
    auth_router,
    reports_router,
    admin_router,
    stats_router
)

logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None, config: Optional[AppConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Pre-built application context. Built from config on startup if omitted.
        config: Configuration used when no context is given. Loaded from config.yaml if omitted.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = app.state.context
        if ctx is None:
            ctx = AppContext.build(config or load_config())
            app.state.context = ctx

        if not ctx.ready:
            try:
                ctx.initialize()
            except IOFailure as e:
                # Keep serving so /health can report the failure
                logger.error(f"Starting without storage: {e}")

        yield

        ctx.close()
        logger.info("Application context closed")

    app = FastAPI(
        title="ATS Pro API",
        description="API for scoring resumes against job descriptions and ranking candidates",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context

    # Register exception handlers
    app.add_exception_handler(AtsError, ats_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(auth_router)
    app.include_router(reports_router)
    app.include_router(admin_router)
    app.include_router(stats_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        ctx: Optional[AppContext] = app.state.context
        if ctx is None or not ctx.ready:
            error = ctx.init_error if ctx is not None else None
            return JSONResponse(
                status_code=503,
                content=HealthResponse(status="unavailable", error=error).model_dump()
            )
        return HealthResponse(status="healthy")

    return app


def main(config: Optional[AppConfig] = None):
    """Run the web server."""
    import uvicorn

    config = config or load_config()

    logger.info(f"Starting ATS Pro Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        create_app(config=config),
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
