"""
Ziplan Health Check Endpoints
Liveness and database readiness
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse
import structlog

from core.database import Database
from core.dependencies import get_database
from schemas.common import ApiResponse

logger = structlog.get_logger()

# Mounted under /api
router = APIRouter(tags=["health"])

# Mounted at the application root
root_router = APIRouter(tags=["health"])


@router.get("/test", response_model=ApiResponse, response_model_exclude_none=True)
async def test_route():
    """Smoke-test endpoint used by the mobile client"""
    logger.info("Test route hit")
    return ApiResponse.ok(message="Server is working!")


@root_router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness check"""
    return "Backend is running!"


@root_router.get("/health")
async def health_check(database: Database = Depends(get_database)):
    """Database-backed health check"""
    if await database.check_connection():
        return {"status": "healthy", "database": "connected"}

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "disconnected"}
    )
