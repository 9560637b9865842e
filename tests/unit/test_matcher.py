"""
Unit tests for deal-meal matching.
"""

import pytest

from meal_deals.planning.matcher import find_best_deal_meals, index_deals, match_recipe


@pytest.fixture
def chicken_deal(make_deal):
    return make_deal(
        "Chicken Breast",
        store_id="dominion-freshwater-road",
        original_price=8.49,
        sale_price=5.99,
        discount_percentage=29,
    )


class TestMatchRecipe:
    def test_matched_and_unmatched_ingredients(self, make_recipe, chicken_deal):
        recipe = make_recipe(ingredients=[
            ("Chicken Breast", 1, "lb", "Meat", 8.00),
            ("Rice", 1, "cup", "Pantry", None),
        ])

        match = match_recipe(recipe, index_deals([chicken_deal]))

        assert match.deals_used == [chicken_deal]
        assert match.normal_cost == pytest.approx(8.49 + 2.0)
        assert match.estimated_cost == pytest.approx(5.99 + 2.0)
        assert match.total_savings == pytest.approx(2.50)
        assert match.savings_percentage == 24

    def test_no_match_returns_none(self, make_recipe, chicken_deal):
        recipe = make_recipe(ingredients=[("Tofu", 1, "block", "Produce", 3.0)])

        assert match_recipe(recipe, index_deals([chicken_deal])) is None

    def test_matching_uses_kebab_name(self, make_recipe, make_deal):
        # "Large Eggs" deals do not match an ingredient named "Eggs"
        recipe = make_recipe(ingredients=[("Eggs", 2, "large", "Dairy", 0.75)])

        assert match_recipe(recipe, index_deals([make_deal("Large Eggs")])) is None

    def test_first_deal_per_ingredient_wins(self, make_deal):
        first = make_deal("Carrots", store_id="a", deal_id="first")
        second = make_deal("Carrots", store_id="b", deal_id="second")

        assert index_deals([first, second])["carrots"].id == "first"


class TestFindBestDealMeals:
    def test_sorted_by_savings(self, make_recipe, make_deal, make_preferences):
        deals = [
            make_deal("Salt Beef", original_price=9.49, sale_price=6.99),
            make_deal("Cabbage", original_price=2.99, sale_price=1.49),
        ]
        small = make_recipe("cabbage-soup", ingredients=[("Cabbage", 1, "head", "Produce", 2.0)])
        big = make_recipe("salt-beef-dinner", ingredients=[
            ("Salt Beef", 2, "lb", "Meat", 12.0),
            ("Cabbage", 1, "head", "Produce", 2.0),
        ])
        plain = make_recipe("plain-rice")

        matches = find_best_deal_meals([small, big, plain], deals, make_preferences())

        assert [m.recipe.id for m in matches] == ["salt-beef-dinner", "cabbage-soup"]
        assert matches[0].total_savings == pytest.approx(4.00)

    def test_reapplies_eligibility(self, make_recipe, make_deal, make_preferences):
        slow = make_recipe("slow-stew", cook_time=120, ingredients=[("Carrots", 2, "whole", "Produce", 0.5)])

        matches = find_best_deal_meals([slow], [make_deal("Carrots")], make_preferences(time_per_meal="quick"))

        assert matches == []

    def test_no_deals(self, catalog, make_preferences):
        assert find_best_deal_meals(catalog, [], make_preferences()) == []

    def test_sample_deals_against_catalog(self, catalog, deal_store, make_preferences):
        prefs = make_preferences(time_per_meal="flexible")

        matches = find_best_deal_meals(catalog, deal_store.get_synthetic_deals(), prefs)
        ids = [m.recipe.id for m in matches]

        assert "chicken-stir-fry" in ids
        assert "veggie-pasta" not in ids
        savings = [m.total_savings for m in matches]
        assert savings == sorted(savings, reverse=True)
