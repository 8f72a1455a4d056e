"""
Ziplan Core Module
Central configuration and utilities
"""

from .config import settings, get_settings
from .database import Base, Database
from .exceptions import AppError, ValidationError, ConflictError, AuthError, ServerError

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "Database",
    "AppError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "ServerError",
]
