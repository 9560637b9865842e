"""Recipe eligibility filtering against a user's time, skill and diet."""

from typing import Iterable, List

from meal_deals.data.models import Recipe, UserPreferences
from meal_deals.preferences import max_minutes_for

# Skill levels that should not be offered Hard recipes
LIMITED_SKILLS = {"beginner", "intermediate"}

ANIMAL_CATEGORIES = {"Meat", "Seafood"}


def is_recipe_eligible(recipe: Recipe, preferences: UserPreferences) -> bool:
    """
    Check one recipe against the user's constraints.

    Only the time budget, the skill/difficulty pairing and the Vegetarian
    restriction are enforced. Allergies and other restrictions are not.

    Args:
        recipe: Catalog recipe
        preferences: User preferences

    Returns:
        True if the recipe can be planned for this user
    """
    context = preferences.dietary_context

    if recipe.total_time > max_minutes_for(context.time_per_meal):
        return False

    if context.cooking_skill in LIMITED_SKILLS and recipe.difficulty == "Hard":
        return False

    if "Vegetarian" in context.restrictions:
        if any(ing.category in ANIMAL_CATEGORIES for ing in recipe.ingredients):
            return False

    return True


def filter_eligible_recipes(recipes: Iterable[Recipe], preferences: UserPreferences) -> List[Recipe]:
    """Return a new list of the recipes this user can be planned, in input order."""
    return [recipe for recipe in recipes if is_recipe_eligible(recipe, preferences)]
