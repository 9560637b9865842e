#!/usr/bin/env python3
"""
Command line entry point for the deal-aware meal planner.

Plans a week of meals, lists current deals, and browses the recipe catalog.
"""

import logging
import argparse
import random
from typing import List, Optional

from meal_deals import config
from meal_deals.data.catalog import RecipeCatalog
from meal_deals.data.models import HouseholdMember, Household, WeeklyMealPlan
from meal_deals.deals.fetcher import fetch_weekly_deals
from meal_deals.deals.store import DealStore
from meal_deals.planning.planner import MealPlanner
from meal_deals.preferences import (
    TIME_AVAILABILITY,
    COOKING_SKILLS,
    MEAL_PREFERENCES,
    calculate_household_size,
    default_preferences,
)

logger = logging.getLogger(__name__)


class MealDealsAssistant:
    """Ties the catalog, the deal store and the planner together for the CLI."""

    def __init__(
        self,
        deal_store: Optional[DealStore] = None,
        catalog: Optional[RecipeCatalog] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the assistant.

        Args:
            deal_store: Deal store to plan against (sample deals by default)
            catalog: Recipe catalog (built-in catalog by default)
            seed: Seed for repeatable plans
        """
        self.deal_store = deal_store or DealStore()
        self.catalog = catalog if catalog is not None else RecipeCatalog.default()
        self.planner = MealPlanner(self.deal_store, self.catalog, random.Random(seed))

    def plan_week(self, preferences, start_date: Optional[str] = None, plan_days: int = 7) -> WeeklyMealPlan:
        """
        Generate and print a weekly plan.

        Args:
            preferences: UserPreferences to plan for
            start_date: ISO date of the first day (defaults to today)
            plan_days: Number of days

        Returns:
            The generated WeeklyMealPlan
        """
        plan = self.planner.generate_weekly_plan(preferences, plan_days=plan_days, start_date=start_date)
        print("\n" + format_plan(plan))
        return plan

    def show_deals(self, store_ids: List[str], fetch: bool = False):
        """Print the active deals, optionally fetching this week's sample flyer first."""
        if fetch and store_ids:
            result = fetch_weekly_deals(store_ids)
            self.deal_store.set_user_deals(result.deals)
            print(f"\n✓ Fetched {len(result.deals)} deals for week of {result.week_of}")

        deals = self.deal_store.get_deals_for_stores(store_ids) if store_ids else self.deal_store.get_all_deals()
        print(f"\n{len(deals)} deals:")
        for deal in deals:
            flash = " ⚡" if deal.is_flash_sale else ""
            print(
                f"   • {deal.ingredient_name} @ {deal.store_name}: "
                f"${deal.sale_price:.2f} (was ${deal.original_price:.2f}, -{deal.discount_percentage}%){flash}"
            )
        return deals

    def list_recipes(self, meal_type: Optional[str] = None, query: Optional[str] = None):
        recipes = self.catalog.search_recipes(query) if query else self.catalog.recipes
        if meal_type:
            recipes = [r for r in recipes if r.meal_type == meal_type]
        for recipe in recipes:
            print(f"   • [{recipe.id}] {recipe}")
        return recipes


def format_plan(plan: WeeklyMealPlan) -> str:
    """Render a plan as plain text: days, shopping list by store, then totals."""
    lines = ["=" * 70, f"MEAL PLAN - week of {plan.week_start_date}", "=" * 70]

    for day in plan.days:
        lines.append(f"\n{day.day_name} {day.date}  (${day.total_cost:.2f}, {day.total_time} min)")
        for meal in day.meals:
            deal_note = f"  💰 saves ${meal.deal_savings:.2f}" if meal.uses_deals else ""
            lines.append(f"   {meal.meal_type:<10} {meal.recipe.name} x{meal.servings}{deal_note}")

    lines.append("\n🛒 Shopping list")
    for store in plan.shopping_list.by_store:
        lines.append(f"\n  {store.store_name} ({store.item_count} items, ${store.total_cost:.2f})")
        for item in store.items:
            sale = " (on sale)" if item.is_on_sale else ""
            lines.append(f"     [{item.aisle}] {item.ingredient_name}: {item.amount:g} {item.unit} ${item.best_price:.2f}{sale}")

    summary = plan.summary
    lines.append("\n" + "-" * 70)
    lines.append(
        f"{summary.total_meals} meals, ${summary.total_cost:.2f} total, "
        f"${summary.average_cost_per_meal:.2f}/meal, saves ${summary.total_savings:.2f}"
    )
    lines.append(
        f"{summary.meals_using_deals} meals use deals ({summary.deal_percentage}%), "
        f"{summary.ingredients_reused} of {summary.unique_ingredients} ingredients reused"
    )
    return "\n".join(lines)


def build_preferences(args):
    """Build UserPreferences from CLI arguments."""
    preferences = default_preferences()

    members = [HouseholdMember("adult", args.adults)]
    if args.teens:
        members.append(HouseholdMember("teen", args.teens))
    if args.children:
        members.append(HouseholdMember("child", args.children))
    if args.toddlers:
        members.append(HouseholdMember("toddler", args.toddlers))
    preferences.household = Household(members=members, total_people=calculate_household_size(members))

    preferences.selected_stores = args.stores or []
    preferences.dietary_context.time_per_meal = args.time
    preferences.dietary_context.cooking_skill = args.skill
    if args.vegetarian:
        preferences.dietary_context.restrictions.append("Vegetarian")
    if args.prefer:
        preferences.meal_preferences = args.prefer
    return preferences


def main():
    """CLI entry point."""
    logging.basicConfig(
        level=config.get_log_level(),
        format=config.LOG_FORMAT,
    )

    parser = argparse.ArgumentParser(description="Deal-aware meal planner")
    parser.add_argument(
        "command",
        choices=["plan", "deals", "recipes"],
        help="Command to run",
    )
    parser.add_argument("--week", type=str, help="First day of the plan (YYYY-MM-DD)")
    parser.add_argument(
        "--days",
        type=int,
        default=config.get_plan_days(),
        help="Number of days to plan (default: PLAN_DAYS or 7)",
    )
    parser.add_argument("--stores", nargs="*", help="Selected store ids")
    parser.add_argument("--adults", type=int, default=1)
    parser.add_argument("--teens", type=int, default=0)
    parser.add_argument("--children", type=int, default=0)
    parser.add_argument("--toddlers", type=int, default=0)
    parser.add_argument("--time", choices=list(TIME_AVAILABILITY), default="moderate")
    parser.add_argument("--skill", choices=COOKING_SKILLS, default="intermediate")
    parser.add_argument("--vegetarian", action="store_true")
    parser.add_argument("--prefer", nargs="*", choices=MEAL_PREFERENCES, help="Meal preferences")
    parser.add_argument("--seed", type=int, default=config.get_planner_seed(), help="Seed for repeatable plans")
    parser.add_argument("--deals-file", type=str, default=config.get_deals_file(), help="JSON file of user deals")
    parser.add_argument("--fetch", action="store_true", help="Fetch this week's sample deals for --stores")
    parser.add_argument("--meal-type", type=str, help="Recipe meal type filter")
    parser.add_argument("--search", type=str, help="Recipe search text")

    args = parser.parse_args()

    deal_store = DealStore()
    if args.deals_file:
        deal_store.load_user_deals(args.deals_file)

    assistant = MealDealsAssistant(deal_store=deal_store, seed=args.seed)

    if args.command == "plan":
        if args.days < 1:
            print("❌ Error: --days must be at least 1")
            return
        if args.fetch and args.stores:
            deal_store.set_user_deals(fetch_weekly_deals(args.stores).deals)
        assistant.plan_week(build_preferences(args), start_date=args.week, plan_days=args.days)

    elif args.command == "deals":
        assistant.show_deals(args.stores or [], fetch=args.fetch)

    elif args.command == "recipes":
        assistant.list_recipes(meal_type=args.meal_type, query=args.search)


if __name__ == "__main__":
    main()
