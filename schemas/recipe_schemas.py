"""
Ziplan Recipe Schemas
Pydantic models for preference intake and recipe generation
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PreferencesCreate(BaseModel):
    """Schema for a preference submission"""
    model_config = ConfigDict(populate_by_name=True)

    dietary: Optional[List[Any]] = None
    equipment: Optional[List[Any]] = None
    budget: Optional[float] = None
    cooking_hours: Optional[float] = Field(default=None, alias="cookingHours")
    meal_times: Optional[Any] = Field(default=None, alias="mealTimes")


class RecipeRequest(BaseModel):
    """Schema for recipe generation"""
    ingredients: Optional[List[Any]] = None
