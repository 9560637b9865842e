"""
Shopping list builder.

Aggregates every planned meal's scaled ingredients into one line per
(name, unit), resolves where to buy each line, and partitions the result
by store.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from meal_deals.config import get_fallback_store_id
from meal_deals.data.models import (
    DailyPlan,
    SmartShoppingItem,
    SmartShoppingList,
    StoreShoppingList,
    UserPreferences,
    ingredient_key,
)
from meal_deals.data.stores import get_store_name
from meal_deals.deals.store import DealStore
from meal_deals.planning.matcher import PLACEHOLDER_PRICE

logger = logging.getLogger(__name__)

AISLES: Dict[str, str] = {
    "Produce": "Produce",
    "Meat": "Meat & Poultry",
    "Seafood": "Seafood Counter",
    "Dairy": "Dairy",
    "Pantry": "Pantry",
    "Frozen": "Frozen Foods",
    "Bakery": "Bakery",
    "Spices": "Spices & Baking",
}
DEFAULT_AISLE = "General"


@dataclass
class AggregatedIngredient:
    """Running total for one (name, unit) pair across the week."""

    name: str
    unit: str
    category: str
    amount: float = 0.0
    estimated_price: float = 0.0
    recipe_names: List[str] = field(default_factory=list)


def _round2(value: float) -> float:
    return round(value, 2)


def _round_up_tenth(amount: float) -> float:
    # round() first so 0.30000000000000004 does not become 0.4
    return math.ceil(round(amount * 10, 6)) / 10


def aggregate_ingredients(days: List[DailyPlan]) -> Dict[str, AggregatedIngredient]:
    """
    Sum every planned meal's ingredients, scaled to the meal's servings.

    Args:
        days: Planned days

    Returns:
        Aggregates keyed by "lowercase name-unit", in first-seen order
    """
    aggregated: Dict[str, AggregatedIngredient] = {}

    for day in days:
        for meal in day.meals:
            scale = meal.servings / meal.recipe.servings
            for ing in meal.recipe.ingredients:
                key = f"{ing.name.lower()}-{ing.unit}"
                price = ing.estimated_price if ing.estimated_price is not None else PLACEHOLDER_PRICE

                entry = aggregated.get(key)
                if entry is None:
                    entry = AggregatedIngredient(name=ing.name, unit=ing.unit, category=ing.category)
                    aggregated[key] = entry

                entry.amount += ing.amount * scale
                entry.estimated_price += price * scale
                if meal.recipe.name not in entry.recipe_names:
                    entry.recipe_names.append(meal.recipe.name)

    return aggregated


class ShoppingListBuilder:
    """Turns a week of planned meals into a per-store shopping list."""

    def __init__(self, deal_store: DealStore, fallback_store_id: Optional[str] = None):
        self.deal_store = deal_store
        self.fallback_store_id = fallback_store_id or get_fallback_store_id()

    def build_item(self, entry: AggregatedIngredient, preferences: UserPreferences) -> SmartShoppingItem:
        """Resolve the store and price for one aggregated ingredient."""
        ingredient_id = ingredient_key(entry.name)
        selected = preferences.selected_stores

        best_store = selected[0] if selected else self.fallback_store_id
        best_price = entry.estimated_price
        normal_price = entry.estimated_price
        is_on_sale = False

        deal = self.deal_store.find_deal(ingredient_id, selected)
        if deal:
            best_store = deal.store_id
            best_price = deal.sale_price * entry.amount
            normal_price = deal.original_price * entry.amount
            is_on_sale = True

        return SmartShoppingItem(
            ingredient_id=ingredient_id,
            ingredient_name=entry.name,
            amount=_round_up_tenth(entry.amount),
            unit=entry.unit,
            category=entry.category,
            recipe_names=list(entry.recipe_names),
            best_store=best_store,
            best_price=_round2(best_price),
            normal_price=_round2(normal_price),
            savings=_round2(normal_price - best_price),
            is_on_sale=is_on_sale,
            aisle=AISLES.get(entry.category, DEFAULT_AISLE),
        )

    def build(self, days: List[DailyPlan], preferences: UserPreferences) -> SmartShoppingList:
        """
        Build the shopping list for a week of meals.

        Args:
            days: Planned days
            preferences: User preferences (selected stores decide deals)

        Returns:
            SmartShoppingList partitioned by store, largest store list first
        """
        aggregated = aggregate_ingredients(days)

        by_store: Dict[str, List[SmartShoppingItem]] = {}
        for entry in aggregated.values():
            item = self.build_item(entry, preferences)
            by_store.setdefault(item.best_store, []).append(item)

        store_lists = []
        for store_id, items in by_store.items():
            items.sort(key=lambda item: item.category)
            store_lists.append(StoreShoppingList(
                store_id=store_id,
                store_name=get_store_name(store_id),
                items=items,
                total_cost=_round2(sum(item.best_price for item in items)),
                total_savings=_round2(sum(item.savings for item in items)),
                item_count=len(items),
            ))
        store_lists.sort(key=lambda store: store.item_count, reverse=True)

        total_cost = _round2(sum(store.total_cost for store in store_lists))
        total_savings = _round2(sum(store.total_savings for store in store_lists))
        denominator = total_cost + total_savings

        logger.info(
            f"[SHOP] {len(aggregated)} items across {len(store_lists)} stores, "
            f"${total_cost:.2f} (saves ${total_savings:.2f})"
        )

        return SmartShoppingList(
            by_store=store_lists,
            total_items=len(aggregated),
            total_cost=total_cost,
            total_savings=total_savings,
            savings_percentage=round(100 * total_savings / denominator) if denominator > 0 else 0,
        )


def generate_shopping_list(
    days: List[DailyPlan],
    preferences: UserPreferences,
    deal_store: DealStore,
    fallback_store_id: Optional[str] = None,
) -> SmartShoppingList:
    return ShoppingListBuilder(deal_store, fallback_store_id).build(days, preferences)
