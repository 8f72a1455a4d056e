"""
Ziplan Authentication Endpoints
Signup, login and profile updates
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from core.dependencies import get_db, get_current_user
from core.exceptions import AppError, ServerError
from models.users import User
from schemas.auth_schemas import Credentials, EmailUpdate, PasswordUpdate
from schemas.common import ApiResponse
from services.auth_service import auth_service

logger = structlog.get_logger()
router = APIRouter(tags=["Authentication"])

# Messages for bodies that fail schema validation
INVALID_BODY_MESSAGES = {
    "/signup": "Email and password required",
    "/login": "Email and password required",
    "/update-email": "Invalid email",
    "/update-password": "Password must be at least 6 characters",
}


@router.post("/signup", response_model=ApiResponse, response_model_exclude_none=True)
async def signup(body: Credentials, db: AsyncSession = Depends(get_db)):
    """Register a new account and return a bearer token"""
    try:
        token = await auth_service.signup(body.email, body.password, db)
        return ApiResponse.ok(token=token)

    except AppError as e:
        logger.warning("Signup rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Signup error", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error during signup")


@router.post("/login", response_model=ApiResponse, response_model_exclude_none=True)
async def login(body: Credentials, db: AsyncSession = Depends(get_db)):
    """Authenticate by email and password"""
    try:
        token = await auth_service.login(body.email, body.password, db)
        return ApiResponse.ok(token=token)

    except AppError as e:
        logger.warning("Login rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Login error", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error during login")


@router.post("/update-email", response_model=ApiResponse, response_model_exclude_none=True)
async def update_email(
    body: EmailUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Change the authenticated user's email"""
    try:
        await auth_service.update_email(current_user, body.email, db)
        return ApiResponse.ok(message="Email updated successfully")

    except AppError as e:
        logger.warning("Email update rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Email update error", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error updating email")


@router.post("/update-password", response_model=ApiResponse, response_model_exclude_none=True)
async def update_password(
    body: PasswordUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Change the authenticated user's password"""
    try:
        await auth_service.update_password(current_user, body.password, db)
        return ApiResponse.ok(message="Password updated successfully")

    except AppError as e:
        logger.warning("Password update rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Password update error", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error updating password")
