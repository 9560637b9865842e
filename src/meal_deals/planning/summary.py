"""Weekly summary statistics for a generated plan."""

from typing import Dict, List

from meal_deals.data.models import DailyPlan, SmartShoppingList, WeeklySummary


def calculate_weekly_summary(
    days: List[DailyPlan],
    used_ingredients: Dict[str, int],
    shopping_list: SmartShoppingList,
) -> WeeklySummary:
    """
    Summarize a week of meals.

    Args:
        days: Planned days
        used_ingredients: Lowercase ingredient name -> number of meals using it
        shopping_list: The week's shopping list (source of cost and savings)

    Returns:
        WeeklySummary; ratios are 0 when there are no meals
    """
    meals = [meal for day in days for meal in day.meals]
    total_meals = len(meals)
    meals_using_deals = sum(1 for meal in meals if meal.uses_deals)

    return WeeklySummary(
        total_meals=total_meals,
        total_cost=shopping_list.total_cost,
        total_savings=shopping_list.total_savings,
        average_cost_per_meal=round(shopping_list.total_cost / total_meals, 2) if total_meals else 0.0,
        total_prep_time=sum(meal.recipe.prep_time for meal in meals),
        total_cook_time=sum(meal.recipe.cook_time for meal in meals),
        meals_using_deals=meals_using_deals,
        deal_percentage=round(100 * meals_using_deals / total_meals) if total_meals else 0,
        ingredients_reused=sum(1 for count in used_ingredients.values() if count > 1),
        unique_ingredients=len(used_ingredients),
    )
