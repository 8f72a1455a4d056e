"""
Ziplan Middleware
Request logging and tracing
"""

from .logging import LoggingMiddleware, log_business_event, get_request_id

__all__ = [
    "LoggingMiddleware",
    "log_business_event",
    "get_request_id",
]
