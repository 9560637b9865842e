"""
Unit tests for shopping list generation.
"""

import pytest

from meal_deals.data.models import DailyPlan, PlannedMeal
from meal_deals.deals.store import DealStore
from meal_deals.planning.shopping import (
    ShoppingListBuilder,
    aggregate_ingredients,
    generate_shopping_list,
)


def planned(recipe, servings=None, meal_type="dinner"):
    """A planned meal with pricing fields the shopping list does not read."""
    return PlannedMeal(
        id=f"meal_0_{meal_type}_{recipe.id}",
        day_of_week=0,
        day_name="Sunday",
        meal_type=meal_type,
        recipe=recipe,
        servings=servings or recipe.servings,
        estimated_cost=0.0,
        estimated_time=recipe.total_time,
        uses_deals=False,
        deal_savings=0.0,
    )


def day(*meals):
    return DailyPlan(day_of_week=0, day_name="Sunday", date="2025-01-12", meals=list(meals))


def only_item(shopping_list):
    items = shopping_list.all_items()
    assert len(items) == 1
    return items[0]


class TestAggregation:
    """Test merging ingredients across meals."""

    def test_same_name_and_unit_merge(self, make_recipe):
        scramble = make_recipe("scramble", name="Scramble", ingredients=[("Eggs", 2, "large", "Dairy", 0.75)])
        quiche = make_recipe("quiche", name="Quiche", ingredients=[("eggs", 4, "large", "Dairy", 1.50)])

        aggregated = aggregate_ingredients([day(planned(scramble), planned(quiche))])

        assert list(aggregated) == ["eggs-large"]
        entry = aggregated["eggs-large"]
        assert entry.name == "Eggs"
        assert entry.amount == pytest.approx(6.0)
        assert entry.estimated_price == pytest.approx(2.25)
        assert entry.recipe_names == ["Scramble", "Quiche"]

    def test_different_units_stay_separate(self, make_recipe):
        a = make_recipe("a", ingredients=[("Milk", 1, "cup", "Dairy", 0.5)])
        b = make_recipe("b", ingredients=[("Milk", 2, "tbsp", "Dairy", 0.1)])

        aggregated = aggregate_ingredients([day(planned(a), planned(b))])

        assert set(aggregated) == {"milk-cup", "milk-tbsp"}

    def test_recipe_listed_once_per_item(self, make_recipe):
        toast = make_recipe("toast", name="Toast", ingredients=[("Bread", 2, "slices", "Bakery", 0.5)])

        aggregated = aggregate_ingredients([day(planned(toast)), day(planned(toast))])

        assert aggregated["bread-slices"].recipe_names == ["Toast"]
        assert aggregated["bread-slices"].amount == pytest.approx(4)

    def test_scaled_to_servings(self, make_recipe):
        rice = make_recipe(servings=4, ingredients=[("Rice", 1, "cup", "Pantry", 1.00)])

        entry = aggregate_ingredients([day(planned(rice, servings=6))])["rice-cup"]

        assert entry.amount == pytest.approx(1.5)
        assert entry.estimated_price == pytest.approx(1.5)


class TestItems:
    def test_amount_rounds_up_to_tenth(self, make_recipe, empty_deal_store, make_preferences):
        recipe = make_recipe(servings=3, ingredients=[("Rice", 1, "cup", "Pantry", 1.00)])

        item = only_item(generate_shopping_list([day(planned(recipe, servings=1))], make_preferences(), empty_deal_store))

        assert item.amount == 0.4
        assert item.best_price == 0.33

    def test_exact_tenths_are_not_bumped(self, make_recipe, empty_deal_store, make_preferences):
        recipe = make_recipe(servings=10, ingredients=[("Rice", 1, "cup", "Pantry", 1.00)])

        item = only_item(generate_shopping_list([day(planned(recipe, servings=3))], make_preferences(), empty_deal_store))

        assert item.amount == 0.3

    def test_missing_price_uses_placeholder(self, make_recipe, empty_deal_store, make_preferences):
        recipe = make_recipe(ingredients=[("Salt", 1, "pinch", "Spices", None)])

        item = only_item(generate_shopping_list([day(planned(recipe))], make_preferences(), empty_deal_store))

        assert item.best_price == 2.0
        assert item.normal_price == 2.0
        assert item.is_on_sale is False
        assert item.savings == 0

    def test_deal_at_selected_store(self, make_recipe, deal_store, make_preferences):
        recipe = make_recipe(ingredients=[("Eggs", 6, "large", "Dairy", 4.50)])
        prefs = make_preferences(stores=["dominion-village-mall"])

        shopping_list = generate_shopping_list([day(planned(recipe))], prefs, deal_store)
        item = only_item(shopping_list)

        assert item.is_on_sale is True
        assert item.best_store == "dominion-village-mall"
        assert item.best_price == pytest.approx(23.94)
        assert item.normal_price == pytest.approx(31.14)
        assert item.savings == pytest.approx(7.2)
        assert shopping_list.savings_percentage == 23

    def test_deal_at_unselected_store_ignored(self, make_recipe, deal_store, make_preferences):
        recipe = make_recipe(ingredients=[("Eggs", 6, "large", "Dairy", 4.50)])
        prefs = make_preferences(stores=["sobeys-avalon-mall"])

        item = only_item(generate_shopping_list([day(planned(recipe))], prefs, deal_store))

        assert item.is_on_sale is False
        assert item.best_store == "sobeys-avalon-mall"
        assert item.best_price == 4.50

    def test_first_selected_store_without_deal(self, make_recipe, empty_deal_store, make_preferences):
        prefs = make_preferences(stores=["costco-st-johns", "sobeys-avalon-mall"])

        item = only_item(generate_shopping_list([day(planned(make_recipe()))], prefs, empty_deal_store))

        assert item.best_store == "costco-st-johns"

    def test_default_fallback_store(self, make_recipe, empty_deal_store, make_preferences):
        item = only_item(generate_shopping_list([day(planned(make_recipe()))], make_preferences(), empty_deal_store))

        assert item.best_store == "sobeys-avalon-mall"

    def test_explicit_fallback_store(self, make_recipe, empty_deal_store, make_preferences):
        builder = ShoppingListBuilder(empty_deal_store, fallback_store_id="dominion-gander")

        shopping_list = builder.build([day(planned(make_recipe()))], make_preferences())

        assert shopping_list.by_store[0].store_id == "dominion-gander"
        assert shopping_list.by_store[0].store_name == "Dominion Gander"

    def test_fallback_store_from_environment(self, make_recipe, empty_deal_store, make_preferences, monkeypatch):
        monkeypatch.setenv("FALLBACK_STORE_ID", "costco-st-johns")

        item = only_item(ShoppingListBuilder(empty_deal_store).build([day(planned(make_recipe()))], make_preferences()))

        assert item.best_store == "costco-st-johns"

    @pytest.mark.parametrize("category, aisle", [
        ("Meat", "Meat & Poultry"),
        ("Produce", "Produce"),
        ("Snacks", "General"),
    ])
    def test_aisle(self, make_recipe, empty_deal_store, make_preferences, category, aisle):
        recipe = make_recipe(ingredients=[("Thing", 1, "each", category, 1.0)])

        item = only_item(generate_shopping_list([day(planned(recipe))], make_preferences(), empty_deal_store))

        assert item.aisle == aisle


class TestStorePartition:
    """Test how items are split by store."""

    @pytest.fixture
    def carrot_store(self, make_deal):
        return DealStore(synthetic_deals=[
            make_deal("Carrots", store_id="dominion-gander", original_price=1.99, sale_price=0.99),
        ])

    @pytest.fixture
    def stew(self, make_recipe):
        return make_recipe("stew", ingredients=[
            ("Rice", 1, "cup", "Pantry", 1.00),
            ("Onion", 1, "medium", "Produce", 0.50),
            ("Carrots", 2, "medium", "Produce", 0.50),
            ("Milk", 1, "cup", "Dairy", 0.40),
        ])

    def test_largest_store_first_and_items_by_category(self, stew, carrot_store, make_preferences):
        prefs = make_preferences(stores=["sobeys-avalon-mall", "dominion-gander"])

        shopping_list = generate_shopping_list([day(planned(stew))], prefs, carrot_store)

        assert [s.store_id for s in shopping_list.by_store] == ["sobeys-avalon-mall", "dominion-gander"]
        sobeys, gander = shopping_list.by_store
        assert [i.ingredient_name for i in sobeys.items] == ["Milk", "Rice", "Onion"]
        assert sobeys.item_count == 3
        assert sobeys.total_cost == pytest.approx(1.90)
        assert [i.ingredient_name for i in gander.items] == ["Carrots"]
        assert gander.total_savings == pytest.approx(2.00)

    def test_totals(self, stew, carrot_store, make_preferences):
        prefs = make_preferences(stores=["sobeys-avalon-mall", "dominion-gander"])

        shopping_list = generate_shopping_list([day(planned(stew))], prefs, carrot_store)

        assert shopping_list.total_items == 4
        assert shopping_list.total_cost == pytest.approx(1.90 + 1.98)
        assert shopping_list.total_savings == pytest.approx(2.00)
        assert shopping_list.savings_percentage == 34

    def test_unknown_store_uses_raw_id(self, make_recipe, empty_deal_store, make_preferences):
        prefs = make_preferences(stores=["corner-store"])

        shopping_list = generate_shopping_list([day(planned(make_recipe()))], prefs, empty_deal_store)

        assert shopping_list.by_store[0].store_name == "corner-store"

    def test_empty_week(self, empty_deal_store, make_preferences):
        shopping_list = generate_shopping_list([day(), day()], make_preferences(), empty_deal_store)

        assert shopping_list.by_store == []
        assert shopping_list.total_items == 0
        assert shopping_list.total_cost == 0
        assert shopping_list.savings_percentage == 0

    def test_building_twice_gives_same_list(self, stew, carrot_store, make_preferences):
        prefs = make_preferences(stores=["sobeys-avalon-mall", "dominion-gander"])
        days = [day(planned(stew)), day(planned(stew, servings=2))]
        builder = ShoppingListBuilder(carrot_store)

        assert builder.build(days, prefs).to_dict() == builder.build(days, prefs).to_dict()
