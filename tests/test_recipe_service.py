import pytest
from sqlalchemy import func, select

from core.exceptions import ValidationError
from models.preference_models import PreferenceSet
from models.recipe_models import Recipe
from services.preference_service import PreferenceService
from services.recipe_service import NO_RECIPE_TEXT, RecipeService

from conftest import StubAIClient, recipe_response


@pytest.fixture
def preferences():
    return PreferenceService()


@pytest.fixture
def recipes(preferences):
    return RecipeService(preferences)


async def count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


# =============================================================================
# PREFERENCE INTAKE
# =============================================================================

async def test_each_submission_adds_a_row(preferences, session):
    await preferences.save_preferences(session, ["vegan"], ["stove"], 40, 3, {"lunch": "12:00"})
    await preferences.save_preferences(session, ["keto"], ["oven"], 60, 4, None)

    assert await count(session, PreferenceSet) == 2
    latest = await preferences.latest(session)
    assert latest.dietary == ["keto"]


async def test_zero_budget_and_hours_are_valid(preferences, session):
    prefs = await preferences.save_preferences(session, [], [], 0, 0)

    assert prefs.budget == 0
    assert prefs.cooking_hours == 0


@pytest.mark.parametrize("fields", [
    dict(dietary=None, equipment=["oven"], budget=10, cooking_hours=1),
    dict(dietary=["vegan"], equipment=None, budget=10, cooking_hours=1),
    dict(dietary=["vegan"], equipment=["oven"], budget=None, cooking_hours=1),
    dict(dietary=["vegan"], equipment=["oven"], budget=10, cooking_hours=None),
])
async def test_missing_preference_fields_are_rejected(preferences, session, fields):
    with pytest.raises(ValidationError) as exc_info:
        await preferences.save_preferences(session, **fields)

    assert exc_info.value.message == "Invalid preferences data"
    assert await count(session, PreferenceSet) == 0


async def test_latest_is_none_when_empty(preferences, session):
    assert await preferences.latest(session) is None


# =============================================================================
# RECIPE GENERATION
# =============================================================================

async def test_generate_without_preferences(recipes, session):
    ai_client = StubAIClient(recipe_response("Crepes"))

    text = await recipes.generate(["egg", "flour"], session, ai_client)

    assert text == "Crepes"
    prompt = ai_client.prompts[0]
    assert "Dietary: None" in prompt
    assert "Equipment available: Any" in prompt
    assert "$flexible" in prompt

    stored = (await session.execute(select(Recipe))).scalar_one()
    assert stored.ingredients == ["egg", "flour"]
    assert stored.recipe_text == "Crepes"


async def test_generate_uses_latest_preferences(recipes, preferences, session):
    await preferences.save_preferences(session, ["vegan"], ["stove"], 40, 3)
    await preferences.save_preferences(session, ["pescatarian"], ["grill"], 75, 6)
    ai_client = StubAIClient()

    await recipes.generate(["salmon"], session, ai_client)

    prompt = ai_client.prompts[0]
    assert "Dietary: pescatarian" in prompt
    assert "Equipment available: grill" in prompt
    assert "$75" in prompt
    assert "vegan" not in prompt


async def test_generate_substitutes_text_for_unexpected_response(recipes, session):
    ai_client = StubAIClient({"error": {"message": "quota exceeded"}})

    text = await recipes.generate(["egg"], session, ai_client)

    assert text == NO_RECIPE_TEXT == "No recipe generated."
    stored = (await session.execute(select(Recipe))).scalar_one()
    assert stored.recipe_text == "No recipe generated."


@pytest.mark.parametrize("ingredients", [None, "egg, flour", {"egg": 1}])
async def test_generate_requires_a_list(recipes, session, ingredients):
    ai_client = StubAIClient()

    with pytest.raises(ValidationError) as exc_info:
        await recipes.generate(ingredients, session, ai_client)

    assert exc_info.value.message == "Ingredients must be an array"
    assert ai_client.prompts == []
    assert await count(session, Recipe) == 0


async def test_generate_does_not_store_when_model_call_fails(recipes, session):
    ai_client = StubAIClient(error=RuntimeError("network down"))

    with pytest.raises(RuntimeError):
        await recipes.generate(["egg"], session, ai_client)

    assert await count(session, Recipe) == 0
