"""
Meal selection scoring.

Each candidate recipe for a slot gets an additive score. The slot is then
filled by a uniform random draw among the three best-scoring candidates,
which gives week-to-week variety. Scoring and ranking are deterministic;
only select_meal() draws from the random source.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from meal_deals.data.models import BestDealMeal, Recipe

TOP_N = 3

DEAL_SAVINGS_WEIGHT = 10
REUSE_BONUS = 5
QUICK_MEAL_BONUS = 10
QUICK_MEAL_MINUTES = 30
HEALTHY_BONUS = 5
COMFORT_BONUS = 8

# (slot, recipe category) -> bonus
SLOT_CATEGORY_BONUS: Dict[Tuple[str, str], int] = {
    ("breakfast", "Breakfast"): 15,
    ("dinner", "Dinner"): 10,
    ("lunch", "Lunch"): 10,
}

BREAKFAST_CATEGORIES = {"Breakfast", "Dessert"}


@dataclass
class ScoringContext:
    """What the scorer needs to know beyond the recipe itself."""

    meal_type: str
    meal_preferences: List[str] = field(default_factory=list)
    deal_meals: Dict[str, BestDealMeal] = field(default_factory=dict)  # By recipe id
    used_ingredients: Dict[str, int] = field(default_factory=dict)  # Lowercase name -> uses
    maximize_reuse: bool = True


def slot_pool(meal_type: str, eligible: Iterable[Recipe]) -> List[Recipe]:
    """Candidate recipes for a slot. Breakfast only draws from breakfast-style categories."""
    if meal_type == "breakfast":
        return [r for r in eligible if r.category in BREAKFAST_CATEGORIES]
    return list(eligible)


def score_recipe(recipe: Recipe, context: ScoringContext) -> float:
    """
    Score a recipe for a slot.

    Args:
        recipe: Candidate recipe
        context: Slot, preferences, deal matches and reuse state

    Returns:
        Additive score, higher is better
    """
    score = 0.0

    deal_meal = context.deal_meals.get(recipe.id)
    if deal_meal:
        score += DEAL_SAVINGS_WEIGHT * deal_meal.total_savings

    if context.maximize_reuse:
        for ing in recipe.ingredients:
            if ing.name.lower() in context.used_ingredients:
                score += REUSE_BONUS

    prefs = context.meal_preferences
    if "quick-meals" in prefs and recipe.total_time <= QUICK_MEAL_MINUTES:
        score += QUICK_MEAL_BONUS
    if "healthy" in prefs and recipe.has_tag("healthy", "low-calorie"):
        score += HEALTHY_BONUS
    if "comfort-food" in prefs and recipe.has_tag("comfort-food", "classic"):
        score += COMFORT_BONUS

    score += SLOT_CATEGORY_BONUS.get((context.meal_type, recipe.category), 0)
    return score


def rank_candidates(pool: Iterable[Recipe], context: ScoringContext) -> List[Tuple[Recipe, float]]:
    """Score every candidate, best first. Ties keep pool order."""
    scored = [(recipe, score_recipe(recipe, context)) for recipe in pool]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored


def top_candidates(pool: Iterable[Recipe], context: ScoringContext, n: int = TOP_N) -> List[Recipe]:
    return [recipe for recipe, _ in rank_candidates(pool, context)[:n]]


def select_meal(
    pool: Iterable[Recipe],
    context: ScoringContext,
    rng: Optional[random.Random] = None,
) -> Optional[Recipe]:
    """
    Pick one recipe for a slot.

    Returns:
        A recipe drawn uniformly from the top candidates, or None for an empty pool
    """
    candidates = top_candidates(pool, context)
    if not candidates:
        return None
    rng = rng or random.Random()
    return rng.choice(candidates)
