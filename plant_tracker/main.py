# 📄 File: plant_tracker/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the plant tracker, creates the plant list, the undo memory
# and the sign-in switch, and makes sure everything is ready to answer the app's screens.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: per-application state (store, undo buffer, event
# bus, auth flag), lifespan with logging setup, optional seeding and the undo-expiry ticker,
# middleware, router registration and exception handlers rendering the error envelope.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - plant_tracker.shared.config.settings
# - plant_tracker.shared.utils.logging
# - plant_tracker.modules.plant_management (domain services, sample data)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application with explicit settings)

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from plant_tracker.api.middleware import REQUEST_ID_HEADER, RequestLoggingMiddleware
from plant_tracker.api.v1.router import api_v1_router
from plant_tracker.modules.plant_management.domain.services.care_record_store import CareRecordStore
from plant_tracker.modules.plant_management.domain.services.undo_buffer import UndoBuffer
from plant_tracker.modules.plant_management.domain.services.watering_ticker import WateringTicker
from plant_tracker.modules.plant_management.infrastructure.sample_data import seed_sample_data
from plant_tracker.shared.config.settings import Settings, get_settings
from plant_tracker.shared.core.event_bus import EventBus
from plant_tracker.shared.core.exceptions import PlantCareException, validation_error_from_pydantic
from plant_tracker.shared.core.security import AuthState
from plant_tracker.shared.utils.helpers import Clock, utc_now
from plant_tracker.shared.utils.logging import (
    SERVICE_NAME,
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup: logging, optional sample data, undo-expiry ticker.
    Shutdown: the ticker is stopped before the process goes away.
    """
    settings: Settings = app.state.settings

    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )
    log_startup_event(
        SERVICE_NAME,
        settings.APP_VERSION,
        extra={"environment": settings.ENVIRONMENT, "undo_window_ms": settings.UNDO_WINDOW_MS},
    )

    if settings.SEED_SAMPLE_DATA:
        seeded = seed_sample_data(app.state.store)
        logger.info(f"🌱 Sample data loaded ({seeded} plants)")

    undo_buffer: UndoBuffer = app.state.undo_buffer
    expiry_ticker = WateringTicker(
        undo_buffer.expire,
        interval=settings.TICK_INTERVAL_SECONDS,
        name="undo-expiry",
        run_immediately=False,
    )
    app.state.expiry_ticker = expiry_ticker

    logger.info("✅ Plant Tracker API startup complete")
    try:
        async with expiry_ticker:
            yield  # Application is running
    finally:
        log_shutdown_event(SERVICE_NAME, extra={"plants": len(app.state.store)})


def create_application(
    settings: Optional[Settings] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    """
    Application factory function.

    Every application gets its own store, undo buffer, event bus and
    authentication flag on ``app.state``; nothing is shared between two
    applications built here.

    Args:
        settings: Settings to use instead of the cached environment settings
        clock: Source of the current instant for the store and undo buffer

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # APPLICATION STATE
    # =========================================================================

    event_bus = EventBus()
    store = CareRecordStore(clock=clock, event_bus=event_bus)
    app.state.settings = settings
    app.state.event_bus = event_bus
    app.state.store = store
    app.state.undo_buffer = UndoBuffer(
        store,
        clock=clock,
        window_ms=settings.UNDO_WINDOW_MS,
        event_bus=event_bus,
    )
    app.state.auth_state = AuthState()

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PlantCareException)
    async def plant_care_exception_handler(
        request: Request,
        exc: PlantCareException
    ) -> JSONResponse:
        """Handle custom Plant Tracker application exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", path=request.url.path)
        else:
            logger.debug(f"{exc.error_code}: {exc.message}", path=request.url.path)
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Render request body/query validation failures like ValidationError."""
        error = validation_error_from_pydantic(exc, "Request validation failed")
        return _error_response(request, error)

    @app.exception_handler(500)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle 500 Internal Server Error."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        error = PlantCareException(
            "An internal server error occurred",
            details={"error_type": type(exc).__name__} if settings.DEBUG else {},
            error_code="INTERNAL_SERVER_ERROR",
        )
        return _error_response(request, error)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


def _error_response(request: Request, exc: PlantCareException) -> JSONResponse:
    """Error envelope shared by every handler"""
    content = exc.to_dict()
    content["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
    content["error"]["request_id"] = getattr(request.state, "request_id", None)
    return JSONResponse(status_code=exc.status_code, content=content)


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used by ``python -m plant_tracker.main`` and the ``plant-tracker``
    console script. The store lives in process memory, so one worker only.
    """
    settings = get_settings()
    uvicorn.run(
        "plant_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1,
    )


if __name__ == "__main__":
    main()
