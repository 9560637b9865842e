"""
Recipe catalog and lookup helpers.

The catalog is loaded once from seed_recipes.RECIPE_DATA and treated as
read-only. Planning code receives a RecipeCatalog instance rather than
reaching for module globals, so tests can supply a smaller catalog.
"""

import logging
from typing import List, Optional, Dict, Iterable

from meal_deals.data.models import Recipe, GroceryItem
from meal_deals.data.seed_recipes import RECIPE_DATA

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Read-only collection of recipes with lookup helpers."""

    _default: Optional["RecipeCatalog"] = None

    def __init__(self, recipes: Iterable[Recipe]):
        self._recipes: List[Recipe] = list(recipes)
        self._by_id: Dict[str, Recipe] = {recipe.id: recipe for recipe in self._recipes}

    @classmethod
    def from_dicts(cls, data: List[Dict]) -> "RecipeCatalog":
        return cls(Recipe.from_dict(item) for item in data)

    @classmethod
    def default(cls) -> "RecipeCatalog":
        """Get the built-in catalog, loading it on first use."""
        if cls._default is None:
            cls._default = cls.from_dicts(RECIPE_DATA)
            logger.info(f"[CATALOG] Loaded {len(cls._default)} recipes")
        return cls._default

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self):
        return iter(self._recipes)

    @property
    def recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def get_recipes_by_meal_type(self, meal_type: str) -> List[Recipe]:
        return [r for r in self._recipes if r.meal_type == meal_type]

    def get_recipes_by_tag(self, tag: str) -> List[Recipe]:
        return [r for r in self._recipes if tag in r.tags]

    def search_recipes(self, query: str) -> List[Recipe]:
        """
        Case-insensitive substring search over name, description and tags.

        Args:
            query: Text to look for

        Returns:
            Matching recipes in catalog order
        """
        q = query.lower()
        return [
            r for r in self._recipes
            if q in r.name.lower()
            or q in r.description.lower()
            or any(q in tag.lower() for tag in r.tags)
        ]

    def get_quick_recipes(self, max_minutes: int = 30) -> List[Recipe]:
        return [r for r in self._recipes if r.total_time <= max_minutes]

    def get_budget_recipes(self, max_cost_per_serving: float = 3) -> List[Recipe]:
        # Recipes without an estimate count as free
        return [r for r in self._recipes if (r.estimated_cost or 0) <= max_cost_per_serving]


def get_recipe_total_cost(recipe: Recipe) -> float:
    """Sum of ingredient price estimates; unpriced ingredients count as 0."""
    return sum(ing.estimated_price or 0 for ing in recipe.ingredients)


def generate_grocery_list(recipes: List[Recipe]) -> List[GroceryItem]:
    """
    Merge the unscaled ingredients of several recipes into one list.

    Lines with the same name and unit (case-insensitive) are combined:
    amounts and prices are summed and contributing recipe names are
    collected once each.

    Args:
        recipes: Recipes to shop for

    Returns:
        Grocery items sorted by category
    """
    items: Dict[str, GroceryItem] = {}

    for recipe in recipes:
        for ing in recipe.ingredients:
            key = f"{ing.name}-{ing.unit}".lower()
            existing = items.get(key)

            if existing:
                existing.amount += ing.amount
                existing.estimated_price += ing.estimated_price or 0
                if recipe.name not in existing.from_recipes:
                    existing.from_recipes.append(recipe.name)
            else:
                items[key] = GroceryItem(
                    name=ing.name,
                    amount=ing.amount,
                    unit=ing.unit,
                    category=ing.category,
                    estimated_price=ing.estimated_price or 0,
                    from_recipes=[recipe.name],
                )

    return sorted(items.values(), key=lambda item: item.category)
