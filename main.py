"""
Ziplan Backend Service - Main API Server
Preferences, AI recipe generation and account management
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import structlog
from typing import AsyncGenerator, Optional

from core.config import Settings, settings as default_settings
from core.database import Database
from core.exceptions import AppError
from api.routes import api_router, root_router, API_PREFIX, invalid_body_message
from middleware.logging import LoggingMiddleware
from schemas.common import ApiResponse
from services.ai_service import AIServiceClient


def configure_logging(log_level: str) -> None:
    """Configure structured logging"""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level, logging.INFO)),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(default_settings.LOG_LEVEL)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting Ziplan Backend Service", environment=settings.ENVIRONMENT)

    if app.state.database is None:
        app.state.database = Database.from_settings(settings)
    await app.state.database.connect()
    logger.info("Database connection established")

    if app.state.ai_client is None:
        app.state.ai_client = AIServiceClient(settings)

    logger.info("Backend service startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Ziplan Backend Service")
    await app.state.ai_client.close()
    await app.state.database.close()
    logger.info("Backend service shutdown complete")


async def app_error_handler(request: Request, exc: AppError):
    """Render domain errors as the response envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.error(exc.message).to_content()
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are reported as 400 with the route's message"""
    logger.warning(
        "Request body failed validation",
        path=request.url.path,
        errors=[{"loc": list(err.get("loc", ())), "type": err.get("type")} for err in exc.errors()]
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ApiResponse.error(invalid_body_message(request.url.path)).to_content()
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        exception=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ApiResponse.error("Server error").to_content()
    )


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    ai_client: Optional[AIServiceClient] = None,
) -> FastAPI:
    """Build the application; collaborators not passed in are created at startup"""
    settings = settings or default_settings

    app = FastAPI(
        title="Ziplan Backend Service",
        description="Cooking preferences, AI recipe generation and accounts",
        version=settings.VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database
    app.state.ai_client = ai_client

    app.add_middleware(LoggingMiddleware)

    # Requests without an Origin header are not subject to CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time", "X-Request-ID"]
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(root_router)
    app.include_router(api_router, prefix=API_PREFIX)

    return app


app = create_app()
