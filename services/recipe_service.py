"""
Ziplan Recipe Generation Service
Builds the recipe prompt, delegates to the language model and stores the result
"""

from typing import Any, Optional
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ValidationError
from middleware.logging import log_business_event
from models.recipe_models import Recipe
from services.ai_service import AIServiceClient, extract_recipe_text
from services.preference_service import PreferenceService, preference_service
from services.prompt_engineering import build_recipe_prompt

logger = structlog.get_logger()

NO_RECIPE_TEXT = "No recipe generated."


class RecipeService:
    def __init__(self, preferences: Optional[PreferenceService] = None):
        self.preferences = preferences or preference_service

    async def generate(self, ingredients: Any, db: AsyncSession, ai_client: AIServiceClient) -> str:
        """Generate, persist and return recipe text for the given ingredients"""
        if not isinstance(ingredients, list):
            raise ValidationError("Ingredients must be an array")

        prefs = await self.preferences.latest(db)
        prompt = build_recipe_prompt(ingredients, prefs)

        data = await ai_client.create_response(prompt)

        recipe_text = extract_recipe_text(data)
        if recipe_text is None:
            logger.warning("AI response carried no recipe text", ingredient_count=len(ingredients))
            recipe_text = NO_RECIPE_TEXT

        recipe = Recipe(ingredients=ingredients, recipe_text=recipe_text)
        db.add(recipe)
        await db.commit()

        log_business_event(
            "recipe_generated",
            {
                "recipe_id": recipe.id,
                "ingredient_count": len(ingredients),
                "used_preferences": prefs is not None,
            }
        )
        return recipe_text


recipe_service = RecipeService()
