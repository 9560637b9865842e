"""
Unit tests for weekly summary statistics.
"""

from meal_deals.data.models import DailyPlan, PlannedMeal, SmartShoppingList
from meal_deals.planning.summary import calculate_weekly_summary


def meal(recipe, uses_deals=False):
    return PlannedMeal(
        id=f"meal_0_dinner_{recipe.id}",
        day_of_week=0,
        day_name="Sunday",
        meal_type="dinner",
        recipe=recipe,
        servings=recipe.servings,
        estimated_cost=5.0,
        estimated_time=recipe.total_time,
        uses_deals=uses_deals,
        deal_savings=1.0 if uses_deals else 0.0,
    )


class TestWeeklySummary:
    def test_counts_and_ratios(self, make_recipe):
        a = make_recipe("a", prep_time=10, cook_time=20)
        b = make_recipe("b", prep_time=5, cook_time=15)
        days = [
            DailyPlan(0, "Sunday", "2025-01-12", [meal(a, uses_deals=True), meal(b)]),
            DailyPlan(1, "Monday", "2025-01-13", [meal(b)]),
        ]
        shopping = SmartShoppingList(total_items=4, total_cost=25.50, total_savings=3.00)

        summary = calculate_weekly_summary(days, {"rice": 3, "eggs": 1, "milk": 2}, shopping)

        assert summary.total_meals == 3
        assert summary.total_cost == 25.50
        assert summary.total_savings == 3.00
        assert summary.average_cost_per_meal == 8.5
        assert summary.total_prep_time == 20
        assert summary.total_cook_time == 50
        assert summary.meals_using_deals == 1
        assert summary.deal_percentage == 33
        assert summary.ingredients_reused == 2
        assert summary.unique_ingredients == 3

    def test_no_meals(self):
        days = [DailyPlan(0, "Sunday", "2025-01-12", [])]

        summary = calculate_weekly_summary(days, {}, SmartShoppingList())

        assert summary.total_meals == 0
        assert summary.average_cost_per_meal == 0
        assert summary.deal_percentage == 0
        assert summary.unique_ingredients == 0
