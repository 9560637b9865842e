"""
Deal-meal matching.

For each eligible recipe, price its ingredients against the active deals and
report what the deals save. Recipes with no matched ingredient are dropped.
"""

import logging
from typing import Dict, Iterable, List, Optional

from meal_deals.data.models import BestDealMeal, DealItem, Recipe, UserPreferences
from meal_deals.planning.eligibility import filter_eligible_recipes

logger = logging.getLogger(__name__)

# Price assumed for an ingredient with no estimate
PLACEHOLDER_PRICE = 2.0


def index_deals(deals: Iterable[DealItem]) -> Dict[str, DealItem]:
    """Map ingredient id to the first deal listed for it."""
    index: Dict[str, DealItem] = {}
    for deal in deals:
        index.setdefault(deal.ingredient_id, deal)
    return index


def match_recipe(recipe: Recipe, deals_by_ingredient: Dict[str, DealItem]) -> Optional[BestDealMeal]:
    """
    Price one recipe against indexed deals.

    Args:
        recipe: Recipe to price (unscaled)
        deals_by_ingredient: Deals keyed by kebab ingredient id

    Returns:
        BestDealMeal, or None when no ingredient is on sale
    """
    normal_cost = 0.0
    discounted_cost = 0.0
    total_savings = 0.0
    deals_used: List[DealItem] = []

    for ing in recipe.ingredients:
        deal = deals_by_ingredient.get(ing.ingredient_id)
        if deal:
            discounted_cost += deal.sale_price
            normal_cost += deal.original_price
            total_savings += deal.original_price - deal.sale_price
            deals_used.append(deal)
        else:
            price = ing.estimated_price if ing.estimated_price is not None else PLACEHOLDER_PRICE
            discounted_cost += price
            normal_cost += price

    if not deals_used:
        return None

    return BestDealMeal(
        recipe=recipe,
        total_savings=total_savings,
        deals_used=deals_used,
        estimated_cost=discounted_cost,
        normal_cost=normal_cost,
        savings_percentage=round(100 * total_savings / normal_cost) if normal_cost > 0 else 0,
    )


def find_best_deal_meals(
    recipes: Iterable[Recipe],
    deals: Iterable[DealItem],
    preferences: UserPreferences,
) -> List[BestDealMeal]:
    """
    Find the recipes that benefit from the given deals.

    Args:
        recipes: Candidate recipes; eligibility is re-applied here
        deals: Active deal set
        preferences: User preferences

    Returns:
        Recipes with at least one matched deal, largest savings first
    """
    deals_by_ingredient = index_deals(deals)
    matches = []
    for recipe in filter_eligible_recipes(recipes, preferences):
        match = match_recipe(recipe, deals_by_ingredient)
        if match:
            matches.append(match)

    matches.sort(key=lambda m: m.total_savings, reverse=True)
    logger.debug(f"[MATCH] {len(matches)} recipes use {len(deals_by_ingredient)} deal ingredients")
    return matches
