"""
Weekly meal plan assembly.

MealPlanner drives day-by-day slot selection, tracks which ingredients the
week already uses, prices each planned meal against the user's store deals,
and finishes with the shopping list and summary.
"""

import logging
import random
import time
from collections import Counter
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from meal_deals.data.catalog import RecipeCatalog
from meal_deals.data.models import (
    DailyPlan,
    PlannedMeal,
    Recipe,
    UserPreferences,
    WeeklyMealPlan,
)
from meal_deals.deals.store import DealStore
from meal_deals.planning.eligibility import filter_eligible_recipes
from meal_deals.planning.matcher import PLACEHOLDER_PRICE, find_best_deal_meals
from meal_deals.planning.scorer import ScoringContext, select_meal, slot_pool
from meal_deals.planning.shopping import ShoppingListBuilder
from meal_deals.planning.summary import calculate_weekly_summary
from meal_deals.preferences import servings_to_cook

logger = logging.getLogger(__name__)

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

# Slots are chosen dinner first so dinner ingredients feed the reuse bonus
SELECTION_ORDER = ["dinner", "lunch", "breakfast"]
DISPLAY_ORDER = ["breakfast", "lunch", "dinner"]


def day_of_week(day: date) -> int:
    """Day index with Sunday = 0."""
    return (day.weekday() + 1) % 7


class MealPlanner:
    """Generates weekly meal plans from a recipe catalog and a deal store."""

    def __init__(
        self,
        deal_store: DealStore,
        catalog: Optional[RecipeCatalog] = None,
        rng: Optional[random.Random] = None,
        fallback_store_id: Optional[str] = None,
    ):
        """
        Initialize the planner.

        Args:
            deal_store: Source of active deals
            catalog: Recipe catalog (defaults to the built-in catalog)
            rng: Random source for the top-candidate draw; seed it for repeatable plans
            fallback_store_id: Store for shopping items when no store is selected
        """
        self.deal_store = deal_store
        self.catalog = catalog if catalog is not None else RecipeCatalog.default()
        self.rng = rng or random.Random()
        self.shopping = ShoppingListBuilder(deal_store, fallback_store_id)

    def create_planned_meal(
        self,
        recipe: Recipe,
        day: date,
        meal_type: str,
        servings: int,
        preferences: UserPreferences,
    ) -> PlannedMeal:
        """
        Price a recipe for one slot, scaled to the household.

        Deals are only taken from the user's selected stores.
        """
        scale = servings / recipe.servings
        discounted_cost = 0.0
        normal_cost = 0.0
        uses_deals = False

        for ing in recipe.ingredients:
            deal = self.deal_store.find_deal(ing.ingredient_id, preferences.selected_stores)
            if deal:
                discounted_cost += deal.sale_price * scale
                normal_cost += deal.original_price * scale
                uses_deals = True
            else:
                price = ing.estimated_price if ing.estimated_price is not None else PLACEHOLDER_PRICE
                discounted_cost += price * scale
                normal_cost += price * scale

        dow = day_of_week(day)
        return PlannedMeal(
            id=f"meal_{dow}_{meal_type}_{recipe.id}",
            day_of_week=dow,
            day_name=DAY_NAMES[dow],
            meal_type=meal_type,
            recipe=recipe,
            servings=servings,
            estimated_cost=round(discounted_cost, 2),
            estimated_time=recipe.total_time,
            uses_deals=uses_deals,
            deal_savings=round(normal_cost - discounted_cost, 2),
        )

    def generate_weekly_plan(
        self,
        preferences: UserPreferences,
        plan_days: int = 7,
        start_date: Optional[Union[date, str]] = None,
        prefer_deals: bool = True,
        maximize_ingredient_reuse: bool = True,
    ) -> WeeklyMealPlan:
        """
        Generate a meal plan.

        Args:
            preferences: User preferences
            plan_days: Number of consecutive days to plan
            start_date: First day (date or ISO string, defaults to today)
            prefer_deals: Give recipes using current deals a scoring bonus
            maximize_ingredient_reuse: Favour recipes sharing ingredients already planned

        Returns:
            WeeklyMealPlan with days, shopping list and summary
        """
        if start_date is None:
            start = date.today()
        elif isinstance(start_date, str):
            start = date.fromisoformat(start_date)
        else:
            start = start_date

        servings = servings_to_cook(preferences.household)
        eligible = filter_eligible_recipes(self.catalog, preferences)

        deal_meals = {}
        if prefer_deals:
            if preferences.selected_stores:
                active_deals = self.deal_store.get_deals_for_stores(preferences.selected_stores)
            else:
                active_deals = self.deal_store.get_synthetic_deals()
            deal_meals = {
                match.recipe.id: match
                for match in find_best_deal_meals(eligible, active_deals, preferences)
            }

        logger.info(
            f"[PLAN] Planning {plan_days} days from {start.isoformat()}: "
            f"{len(eligible)} eligible recipes, {len(deal_meals)} with deals, {servings} servings"
        )

        used_ingredients: Counter = Counter()
        days: List[DailyPlan] = []

        for offset in range(plan_days):
            day = start + timedelta(days=offset)
            meals_by_slot = {}

            for meal_type in SELECTION_ORDER:
                context = ScoringContext(
                    meal_type=meal_type,
                    meal_preferences=preferences.meal_preferences,
                    deal_meals=deal_meals,
                    used_ingredients=used_ingredients,
                    maximize_reuse=maximize_ingredient_reuse,
                )
                recipe = select_meal(slot_pool(meal_type, eligible), context, self.rng)
                if recipe is None:
                    logger.debug(f"[PLAN] No candidate for {meal_type} on {day.isoformat()}")
                    continue

                meals_by_slot[meal_type] = self.create_planned_meal(
                    recipe, day, meal_type, servings, preferences
                )
                used_ingredients.update(ing.name.lower() for ing in recipe.ingredients)

            meals = [meals_by_slot[slot] for slot in DISPLAY_ORDER if slot in meals_by_slot]
            dow = day_of_week(day)
            days.append(DailyPlan(
                day_of_week=dow,
                day_name=DAY_NAMES[dow],
                date=day.isoformat(),
                meals=meals,
                total_cost=sum(meal.estimated_cost for meal in meals),
                total_time=sum(meal.estimated_time for meal in meals),
                total_savings=sum(meal.deal_savings for meal in meals),
            ))

        shopping_list = self.shopping.build(days, preferences)
        summary = calculate_weekly_summary(days, dict(used_ingredients), shopping_list)

        plan = WeeklyMealPlan(
            id=f"plan_{int(time.time() * 1000)}",
            created_at=datetime.now().isoformat(),
            week_start_date=start.isoformat(),
            days=days,
            summary=summary,
            shopping_list=shopping_list,
        )
        logger.info(f"[PLAN] {plan.get_summary()}")
        return plan

    def regenerate_plan(self, current_plan: WeeklyMealPlan, preferences: UserPreferences) -> WeeklyMealPlan:
        """Generate a fresh plan for the same week, preferring deals and reuse."""
        return self.generate_weekly_plan(
            preferences,
            plan_days=len(current_plan.days) or 7,
            start_date=current_plan.week_start_date,
            prefer_deals=True,
            maximize_ingredient_reuse=True,
        )
