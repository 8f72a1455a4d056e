"""
Ziplan Error Taxonomy
Domain errors raised by services and rendered as the JSON envelope
"""

from fastapi import status


class AppError(Exception):
    """Base error carrying a user-visible message and an HTTP status"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Malformed or missing input"""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Duplicate email"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    """Bad credentials or a missing/invalid bearer token"""
    status_code = status.HTTP_401_UNAUTHORIZED


class ServerError(AppError):
    """Anything unexpected, including store and network failures"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
