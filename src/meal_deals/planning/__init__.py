"""
Planning engine - eligibility, deal matching, scoring, plan assembly,
shopping list and summary.
"""

from meal_deals.planning.eligibility import filter_eligible_recipes, is_recipe_eligible
from meal_deals.planning.matcher import find_best_deal_meals
from meal_deals.planning.scorer import (
    ScoringContext,
    score_recipe,
    rank_candidates,
    top_candidates,
    select_meal,
)
from meal_deals.planning.planner import MealPlanner
from meal_deals.planning.shopping import ShoppingListBuilder, generate_shopping_list
from meal_deals.planning.summary import calculate_weekly_summary
