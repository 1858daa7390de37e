"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit, security headers, CORS)
4. Exception handlers
5. Startup/shutdown events

Run with: uvicorn dayrhythm.api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dayrhythm import __version__
from dayrhythm.api.routes import API_PREFIX, api_router
from dayrhythm.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from dayrhythm.core.config import Settings, get_settings
from dayrhythm.core.exceptions import DayRhythmException
from dayrhythm.core.logging_config import get_logger, setup_logging
from dayrhythm.services.container import ServiceContainer, build_services

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: connect Supabase, Groq and Gemini unless services were injected
    - Shutdown: nothing to release; clients live until process exit
    """
    settings: Settings = app.state.settings

    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"Groq model: {settings.groq_model}")
    logger.info(f"Gemini configured: {settings.gemini_configured}")

    if app.state.services is None:
        app.state.services = await build_services(settings)

    yield

    logger.info(f"Shutting down {settings.app_name}")


def _format_validation_errors(exc: RequestValidationError) -> list:
    details = []
    for error in exc.errors():
        source, *location = error.get("loc", ()) or ("body",)
        # a malformed JSON body reports a character offset, not a field
        if not location or not isinstance(location[0], str):
            field = str(source)
        else:
            field = ".".join(str(part) for part in location)
        details.append({"field": field, "message": error.get("msg", "")})
    return details


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to get_settings()
        services: Pre-built service container; built in the lifespan if omitted
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="DayRhythm AI Backend",
        description="""
    AI & analytics service for the DayRhythm planner.

    ## Features

    - **Day insights**: energy heatmap, focus blocks, work/life balance + LLM tips
    - **Schedule parsing**: natural language (Groq or Gemini) and timetable images
    - **Analytics**: date-range statistics and per-task tips
    - **Events**: CRUD and batch sync backed by Supabase
    """,
        version=__version__,
        lifespan=lifespan,
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=f"{API_PREFIX}/redoc",
        openapi_url=f"{API_PREFIX}/openapi.json",
    )
    app.state.settings = settings
    app.state.services = services

    # ============================================================
    # Middleware Configuration (last added runs first)
    # ============================================================

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AuditMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Render pydantic validation failures as 400 with field details."""
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": "Validation failed",
                "code": "validation_error",
                "details": _format_validation_errors(exc),
            },
        )

    @app.exception_handler(DayRhythmException)
    async def dayrhythm_exception_handler(request: Request, exc: DayRhythmException):
        """Handle all custom exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")

        content = {"success": False, "error": "Internal server error", "code": "internal_error"}
        if settings.is_development():
            content["message"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Start uvicorn on PORT."""
    import uvicorn

    settings = get_settings()
    logger.info(f"API URL: http://localhost:{settings.port}{API_PREFIX}")
    logger.info(f"Health: http://localhost:{settings.port}{API_PREFIX}/health")

    uvicorn.run(
        "dayrhythm.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development(),
    )


if __name__ == "__main__":
    run()
