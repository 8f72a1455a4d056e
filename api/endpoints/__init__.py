"""
Ziplan API Endpoints
All API endpoint modules
"""

# Import all endpoint modules
from . import health, auth, recipes

__all__ = [
    "health",
    "auth",
    "recipes",
]
