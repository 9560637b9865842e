"""
Unit tests for the command line interface.
"""

import argparse
import json

import pytest

from meal_deals import main as cli
from meal_deals.data.catalog import RecipeCatalog
from meal_deals.main import MealDealsAssistant, build_preferences


def cli_args(**overrides):
    defaults = dict(
        stores=None, adults=1, teens=0, children=0, toddlers=0,
        time="moderate", skill="intermediate", vegetarian=False, prefer=None,
    )
    defaults.update(overrides)
    return argparse.Namespace(**defaults)


class TestBuildPreferences:
    def test_defaults(self):
        prefs = build_preferences(cli_args())

        assert prefs.household.total_people == 1
        assert prefs.selected_stores == []
        assert prefs.meal_preferences == ["weekly-planning"]

    def test_household_and_diet(self):
        prefs = build_preferences(cli_args(
            adults=2, toddlers=1, stores=["costco-st-johns"], time="quick",
            skill="beginner", vegetarian=True, prefer=["healthy"],
        ))

        assert [(m.type, m.count) for m in prefs.household.members] == [("adult", 2), ("toddler", 1)]
        assert prefs.household.total_people == 3
        assert prefs.selected_stores == ["costco-st-johns"]
        assert prefs.dietary_context.time_per_meal == "quick"
        assert prefs.dietary_context.cooking_skill == "beginner"
        assert prefs.dietary_context.restrictions == ["Vegetarian"]
        assert prefs.meal_preferences == ["healthy"]


class TestAssistant:
    def test_plan_week_prints_plan(self, empty_deal_store, make_preferences, capsys):
        assistant = MealDealsAssistant(deal_store=empty_deal_store, seed=5)

        plan = assistant.plan_week(make_preferences(), start_date="2025-01-12", plan_days=2)

        out = capsys.readouterr().out
        assert "MEAL PLAN - week of 2025-01-12" in out
        assert "Sunday 2025-01-12" in out
        assert "Shopping list" in out
        assert len(plan.days) == 2

    def test_list_recipes(self, capsys):
        recipes = MealDealsAssistant(seed=1).list_recipes(meal_type="breakfast")

        assert len(recipes) == 3
        assert "[pancakes]" in capsys.readouterr().out

    def test_empty_catalog_is_kept(self):
        assistant = MealDealsAssistant(catalog=RecipeCatalog([]), seed=1)

        assert len(assistant.catalog) == 0
        assert assistant.list_recipes() == []


class TestMain:
    """Test the argparse entry point."""

    def test_plan_command(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", [
            "meal-deals", "plan", "--week", "2025-01-12", "--days", "1",
            "--adults", "2", "--stores", "sobeys-avalon-mall", "--seed", "3",
        ])

        cli.main()

        out = capsys.readouterr().out
        assert "Sunday 2025-01-12" in out
        assert "Monday" not in out.split("Shopping list")[0]

    def test_plan_rejects_zero_days(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["meal-deals", "plan", "--days", "0"])

        cli.main()

        assert "--days must be at least 1" in capsys.readouterr().out

    def test_deals_command_with_store_filter(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["meal-deals", "deals", "--stores", "costco-st-johns"])

        cli.main()

        out = capsys.readouterr().out
        assert "2 deals:" in out
        assert "Potatoes @ Costco St. John's" in out

    def test_deals_file(self, monkeypatch, capsys, tmp_path):
        deals_file = tmp_path / "deals.json"
        deals_file.write_text(json.dumps([{
            "ingredient_name": "Turnip",
            "store_id": "sobeys-avalon-mall",
            "store_name": "Sobeys Avalon Mall",
            "original_price": 2.0,
            "sale_price": 1.0,
            "discount_percentage": 50,
            "valid_until": "2099-01-01T00:00:00",
        }]))
        monkeypatch.setattr("sys.argv", ["meal-deals", "deals", "--deals-file", str(deals_file)])

        cli.main()

        out = capsys.readouterr().out
        assert "1 deals:" in out
        assert "Turnip @ Sobeys Avalon Mall" in out

    def test_recipes_search(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["meal-deals", "recipes", "--search", "jiggs"])

        cli.main()

        assert "[jiggs-dinner]" in capsys.readouterr().out

    def test_unknown_command(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["meal-deals", "cook"])

        with pytest.raises(SystemExit):
            cli.main()
