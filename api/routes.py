"""
Ziplan API Routes
Main router configuration for all API endpoints
"""

from fastapi import APIRouter
import structlog

from api.endpoints import auth, health, recipes

logger = structlog.get_logger()

API_PREFIX = "/api"

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(recipes.router)

root_router = health.root_router

# Per-path messages for request bodies that fail schema validation
INVALID_BODY_MESSAGES = {
    f"{API_PREFIX}{path}": message
    for module in (auth, recipes)
    for path, message in module.INVALID_BODY_MESSAGES.items()
}
DEFAULT_INVALID_BODY_MESSAGE = "Invalid request data"


def invalid_body_message(path: str) -> str:
    return INVALID_BODY_MESSAGES.get(path.rstrip("/") or "/", DEFAULT_INVALID_BODY_MESSAGE)
