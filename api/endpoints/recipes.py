"""
Ziplan Recipe Endpoints
Preference intake and AI recipe generation
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from core.dependencies import get_db, get_ai_client
from core.exceptions import AppError, ServerError
from schemas.common import ApiResponse
from schemas.recipe_schemas import PreferencesCreate, RecipeRequest
from services.ai_service import AIServiceClient
from services.preference_service import preference_service
from services.recipe_service import recipe_service

logger = structlog.get_logger()
router = APIRouter(tags=["Recipes"])

# Messages for bodies that fail schema validation
INVALID_BODY_MESSAGES = {
    "/preferences": "Invalid preferences data",
    "/recipe": "Ingredients must be an array",
}


@router.post("/preferences", response_model=ApiResponse, response_model_exclude_none=True)
async def save_preferences(body: PreferencesCreate, db: AsyncSession = Depends(get_db)):
    """Store a new preference set"""
    try:
        await preference_service.save_preferences(
            db,
            dietary=body.dietary,
            equipment=body.equipment,
            budget=body.budget,
            cooking_hours=body.cooking_hours,
            meal_times=body.meal_times,
        )
        return ApiResponse.ok(message="Preferences saved!")

    except AppError as e:
        logger.warning("Preferences rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Error saving preferences", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error saving preferences")


@router.post("/recipe", response_model=ApiResponse, response_model_exclude_none=True)
async def generate_recipe(
    body: RecipeRequest,
    db: AsyncSession = Depends(get_db),
    ai_client: AIServiceClient = Depends(get_ai_client)
):
    """Generate a recipe from the given ingredients and the latest preferences"""
    try:
        recipe_text = await recipe_service.generate(body.ingredients, db, ai_client)
        return ApiResponse.ok(recipe=recipe_text)

    except AppError as e:
        logger.warning("Recipe request rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("Server error in recipe generation", error=str(e), error_type=type(e).__name__)
        raise ServerError("Server error")
