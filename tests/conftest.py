"""
Pytest configuration and shared fixtures.

Fixtures are reusable test setup that can be injected into tests.
"""

import random
from datetime import datetime, timedelta

import pytest

from meal_deals.data.catalog import RecipeCatalog
from meal_deals.data.models import (
    DealItem,
    DietaryContext,
    Household,
    HouseholdMember,
    Recipe,
    RecipeIngredient,
    UserPreferences,
)
from meal_deals.deals.store import DealStore


FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env from leaking into tests."""
    for name in ("FALLBACK_STORE_ID", "PLAN_DAYS", "PLANNER_SEED", "DEALS_FILE", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def make_recipe():
    """
    Factory for small test recipes.

    Usage in tests:
        def test_something(make_recipe):
            recipe = make_recipe("r1", ingredients=[("Eggs", 2, "large", "Dairy", 0.75)])
    """
    def _make(
        recipe_id="test-recipe",
        name=None,
        category="Dinner",
        meal_type=None,
        prep_time=10,
        cook_time=10,
        servings=4,
        difficulty="Easy",
        ingredients=None,
        tags=None,
        estimated_cost=None,
    ):
        ingredients = ingredients if ingredients is not None else [("Rice", 1, "cup", "Pantry", 1.00)]
        return Recipe(
            id=recipe_id,
            name=name or recipe_id.replace("-", " ").title(),
            description=f"Test recipe {recipe_id}",
            category=category,
            meal_type=meal_type or category.lower(),
            prep_time=prep_time,
            cook_time=cook_time,
            servings=servings,
            difficulty=difficulty,
            ingredients=[
                RecipeIngredient(name=n, amount=a, unit=u, category=c, estimated_price=p)
                for (n, a, u, c, p) in ingredients
            ],
            instructions=["Cook it"],
            tags=tags or ["test"],
            estimated_cost=estimated_cost,
        )

    return _make


@pytest.fixture
def make_deal(fixed_now):
    """Factory for deals valid for a week from FIXED_NOW."""
    def _make(
        ingredient_name,
        store_id="sobeys-avalon-mall",
        original_price=5.00,
        sale_price=4.00,
        discount_percentage=20,
        is_flash_sale=False,
        deal_id=None,
    ):
        ingredient_id = ingredient_name.lower().replace(" ", "-")
        return DealItem(
            id=deal_id or f"deal-{store_id}-{ingredient_id}",
            ingredient_id=ingredient_id,
            ingredient_name=ingredient_name,
            store_id=store_id,
            store_name=store_id,
            original_price=original_price,
            sale_price=sale_price,
            discount_percentage=discount_percentage,
            valid_from=fixed_now.isoformat(),
            valid_until=(fixed_now + timedelta(days=7)).isoformat(),
            quantity="each",
            is_flash_sale=is_flash_sale,
            category="Test",
        )

    return _make


@pytest.fixture
def make_preferences():
    """Factory for UserPreferences with the fields the planner reads."""
    def _make(
        adults=1,
        teens=0,
        children=0,
        toddlers=0,
        stores=None,
        time_per_meal="moderate",
        cooking_skill="intermediate",
        restrictions=None,
        allergies=None,
        meal_preferences=None,
    ):
        members = [HouseholdMember("adult", adults)]
        for member_type, count in (("teen", teens), ("child", children), ("toddler", toddlers)):
            if count:
                members.append(HouseholdMember(member_type, count))
        return UserPreferences(
            id="pref_test",
            selected_stores=list(stores or []),
            household=Household(members=members, total_people=sum(m.count for m in members)),
            dietary_context=DietaryContext(
                allergies=list(allergies or []),
                restrictions=list(restrictions or []),
                cooking_skill=cooking_skill,
                time_per_meal=time_per_meal,
            ),
            meal_preferences=list(meal_preferences or ["weekly-planning"]),
        )

    return _make


@pytest.fixture
def catalog():
    """The built-in recipe catalog."""
    return RecipeCatalog.default()


@pytest.fixture
def deal_store():
    """Deal store seeded with the default sample deals."""
    return DealStore()


@pytest.fixture
def empty_deal_store():
    return DealStore(synthetic_deals=[])


@pytest.fixture
def rng():
    return random.Random(42)
