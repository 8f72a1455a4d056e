"""
Ziplan Core Dependencies
FastAPI dependencies for database sessions, the AI client and authentication
"""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, AsyncGenerator, Annotated
import structlog

from core.database import Database
from models.users import User
from services.ai_service import AIServiceClient
from services.auth_service import auth_service

logger = structlog.get_logger()

# Security scheme
security = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get database session
    """
    async with database.session() as session:
        yield session


def get_ai_client(request: Request) -> AIServiceClient:
    return request.app.state.ai_client


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Get current authenticated user from the bearer token

    Raises:
        AuthError: If the token is missing, invalid, expired or names no user
    """
    token = credentials.credentials if credentials else None
    user = await auth_service.get_current_user(token, db)

    structlog.contextvars.bind_contextvars(user_id=user.id)
    return user
