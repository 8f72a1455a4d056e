"""
Ziplan Services Module
Core business logic and AI services
"""

from .ai_service import AIServiceClient, extract_recipe_text
from .auth_service import AuthService, auth_service
from .preference_service import PreferenceService, preference_service
from .prompt_engineering import build_recipe_prompt
from .recipe_service import RecipeService, recipe_service, NO_RECIPE_TEXT

__all__ = [
    # AI Service
    "AIServiceClient",
    "extract_recipe_text",

    # Accounts
    "AuthService",
    "auth_service",

    # Recipes
    "PreferenceService",
    "preference_service",
    "build_recipe_prompt",
    "RecipeService",
    "recipe_service",
    "NO_RECIPE_TEXT",
]
