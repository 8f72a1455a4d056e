"""
Ziplan Database Models
Central import module for all database models
"""

from .users import User
from .preference_models import PreferenceSet
from .recipe_models import Recipe

__all__ = [
    "User",
    "PreferenceSet",
    "Recipe",
]
