"""
Ziplan Prompt Engineering
Recipe prompt built from an ingredient list and the latest preference set
"""

import json
from typing import Any, List, Optional

from models.preference_models import PreferenceSet

RECIPE_PROMPT_TEMPLATE = "\n".join([
    "",
    "Generate a recipe using these ingredients: {ingredients}.",
    "Consider these preferences: ",
    "- Dietary: {dietary}",
    "- Equipment available: {equipment}",
    "- Weekly budget: ${budget}",
    "- Cooking hours per week: {cooking_hours}",
    "- Meal times: {meal_times}",
    "",
    "Include a title, clear ingredients list, and step-by-step instructions.",
    "",
])

# Placeholders used when no preference set exists or a field is empty
DEFAULT_DIETARY = "None"
DEFAULT_EQUIPMENT = "Any"
DEFAULT_AMOUNT = "flexible"


def format_number(value: Optional[float]) -> Optional[str]:
    """Render 50.0 as "50" and 12.5 as "12.5"; zero and None render as None"""
    if not value:
        return None
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_item(item: Any) -> str:
    """Render a list item the way the client's own join would"""
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)


def join_items(items: Optional[List[Any]]) -> str:
    if not items:
        return ""
    return ", ".join(format_item(item) for item in items)


def integral_floats_to_int(value: Any) -> Any:
    """8.0 -> 8 throughout a JSON value, so meal times render as the client sent them"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: integral_floats_to_int(item) for key, item in value.items()}
    if isinstance(value, list):
        return [integral_floats_to_int(item) for item in value]
    return value


def build_recipe_prompt(ingredients: List[Any], preferences: Optional[PreferenceSet] = None) -> str:
    """Embed the ingredients and preferences into the fixed recipe template"""
    dietary = join_items(preferences.dietary) if preferences else ""
    equipment = join_items(preferences.equipment) if preferences else ""
    budget = format_number(preferences.budget) if preferences else None
    cooking_hours = format_number(preferences.cooking_hours) if preferences else None

    # Any falsy value (None, false, 0, "") renders as an empty object
    meal_times = preferences.meal_times if preferences else None
    if not meal_times:
        meal_times = {}

    return RECIPE_PROMPT_TEMPLATE.format(
        ingredients=join_items(ingredients),
        dietary=dietary or DEFAULT_DIETARY,
        equipment=equipment or DEFAULT_EQUIPMENT,
        budget=budget or DEFAULT_AMOUNT,
        cooking_hours=cooking_hours or DEFAULT_AMOUNT,
        meal_times=json.dumps(integral_floats_to_int(meal_times), separators=(",", ":"), ensure_ascii=False),
    )
