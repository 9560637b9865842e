"""
Tests for the Flask JSON API.
"""

import json
import random

import pytest

from meal_deals.data.catalog import RecipeCatalog
from meal_deals.deals.store import DealStore
from meal_deals.web.app import create_app

pytestmark = pytest.mark.web


@pytest.fixture
def deal_store():
    return DealStore()


@pytest.fixture
def app(deal_store, catalog):
    app = create_app(deal_store=deal_store, catalog=catalog, rng=random.Random(42))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


def plan_request(**options):
    return {
        "preferences": {
            "selected_stores": ["sobeys-avalon-mall", "dominion-freshwater-road"],
            "household": {"members": [{"type": "adult", "count": 2}, {"type": "child", "count": 1}]},
            "dietary_context": {"time_per_meal": "moderate", "cooking_skill": "intermediate"},
            "meal_preferences": ["quick-meals"],
        },
        "options": {"start_date": "2025-01-12", **options},
    }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["recipes"] == 25
        assert data["deals"] == 10

    def test_empty_catalog_is_kept(self, deal_store):
        app = create_app(deal_store=deal_store, catalog=RecipeCatalog([]), rng=random.Random(1))

        with app.test_client() as client:
            data = client.get("/health").get_json()

        assert data["recipes"] == 0
        assert len(app.config["CATALOG"]) == 0


class TestRecipes:
    def test_list_all(self, client):
        data = client.get("/api/recipes").get_json()

        assert data["success"] is True
        assert data["count"] == 25

    def test_filters(self, client):
        data = client.get("/api/recipes?meal_type=breakfast").get_json()
        assert {r["meal_type"] for r in data["recipes"]} == {"breakfast"}

        data = client.get("/api/recipes?tag=newfoundland").get_json()
        assert {r["id"] for r in data["recipes"]} == {"jiggs-dinner", "cod-cakes"}

        data = client.get("/api/recipes?max_minutes=15").get_json()
        assert all(r["prep_time"] + r["cook_time"] <= 15 for r in data["recipes"])

        data = client.get("/api/recipes?q=salmon").get_json()
        assert [r["id"] for r in data["recipes"]] == ["baked-salmon"]

    def test_bad_max_minutes(self, client):
        response = client.get("/api/recipes?max_minutes=soon")

        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_get_recipe(self, client):
        data = client.get("/api/recipes/grilled-cheese").get_json()

        assert data["recipe"]["name"] == "Grilled Cheese Sandwich"

    def test_unknown_recipe(self, client):
        response = client.get("/api/recipes/lobster-thermidor")

        assert response.status_code == 404
        assert "lobster-thermidor" in response.get_json()["error"]


class TestStores:
    def test_filter_by_chain_and_location(self, client):
        data = client.get("/api/stores?chain=costco").get_json()
        assert {s["chain_id"] for s in data["stores"]} == {"costco"}

        data = client.get("/api/stores?location=gander").get_json()
        assert "dominion-gander" in {s["id"] for s in data["stores"]}
        assert {s["city"] for s in data["stores"]} == {"Gander"}


class TestDeals:
    """Test deal listing and management."""

    def test_list_sample_deals(self, client):
        data = client.get("/api/deals").get_json()

        assert data["count"] == 10
        assert data["flash_sales"] == 3
        assert data["potential_savings"] > 0

    def test_filter_by_store(self, client):
        data = client.get("/api/deals?store=costco-st-johns&store=sobeys-torbay-road").get_json()

        assert {d["store_id"] for d in data["deals"]} == {"costco-st-johns", "sobeys-torbay-road"}
        assert data["count"] == 3

    def test_add_and_delete_deal(self, client, deal_store):
        response = client.post("/api/deals", json={
            "ingredient_name": "Ground Beef",
            "store_id": "sobeys-avalon-mall",
            "original_price": 7.99,
            "sale_price": 5.99,
            "quantity": "per lb",
        })

        assert response.status_code == 201
        deal = response.get_json()["deal"]
        assert deal["ingredient_id"] == "ground-beef"
        assert deal["discount_percentage"] == 25
        assert deal["store_name"] == "Sobeys Avalon Mall"
        # The user set now replaces the sample deals
        assert client.get("/api/deals").get_json()["count"] == 1

        assert client.delete(f"/api/deals/{deal['id']}").status_code == 200
        assert deal_store.get_user_deals() == []
        assert client.delete(f"/api/deals/{deal['id']}").status_code == 404

    def test_add_deal_missing_field(self, client):
        response = client.post("/api/deals", json={"ingredient_name": "Ground Beef"})

        assert response.status_code == 400
        assert "store_id" in response.get_json()["error"]

    def test_add_deal_bad_price(self, client):
        response = client.post("/api/deals", json={
            "ingredient_name": "Ground Beef",
            "store_id": "sobeys-avalon-mall",
            "original_price": 0,
            "sale_price": 1,
        })

        assert response.status_code == 400

    def test_add_deal_sale_above_original(self, client, deal_store):
        response = client.post("/api/deals", json={
            "ingredient_name": "Ground Beef",
            "store_id": "sobeys-avalon-mall",
            "original_price": 4.99,
            "sale_price": 6.49,
        })

        assert response.status_code == 400
        assert "exceed" in response.get_json()["error"]
        assert deal_store.get_user_deals() == []

    def test_replace_deals(self, client, deal_store):
        response = client.put("/api/deals", json={"deals": [
            {"ingredient_name": "Cabbage", "store_id": "costco-st-johns", "original_price": 3.0, "sale_price": 2.0},
        ]})

        assert response.get_json()["count"] == 1
        assert deal_store.get_all_deals()[0].ingredient_id == "cabbage"

        client.put("/api/deals", json={"deals": []})
        assert len(deal_store.get_all_deals()) == 10

    def test_replace_deals_invalid(self, client):
        response = client.put("/api/deals", json={"deals": [{"ingredient_name": "Cabbage"}]})

        assert response.status_code == 400

    def test_fetch_deals(self, client, deal_store):
        response = client.post("/api/deals/fetch", json={"store_ids": ["dominion-gander"]})

        data = response.get_json()
        assert data["success"] is True
        assert data["source"] == "sample"
        assert data["store_count"] == 1
        assert {d["store_id"] for d in data["deals"]} == {"dominion-gander"}
        assert len(deal_store.get_user_deals()) == len(data["deals"])

    def test_fetch_requires_stores(self, client):
        assert client.post("/api/deals/fetch", json={}).status_code == 400


class TestPlan:
    def test_generate_plan(self, client):
        response = client.post("/api/plan", json=plan_request())

        assert response.status_code == 200
        plan = response.get_json()["plan"]
        assert plan["week_start_date"] == "2025-01-12"
        assert len(plan["days"]) == 7
        assert plan["summary"]["total_meals"] == 21
        assert plan["days"][0]["meals"][0]["servings"] == 3
        assert plan["shopping_list"]["total_items"] > 0

    def test_plan_days_option(self, client):
        plan = client.post("/api/plan", json=plan_request(plan_days=3)).get_json()["plan"]

        assert [d["date"] for d in plan["days"]] == ["2025-01-12", "2025-01-13", "2025-01-14"]

    @pytest.mark.parametrize("plan_days", [0, 29, "many"])
    def test_invalid_plan_days(self, client, plan_days):
        response = client.post("/api/plan", json=plan_request(plan_days=plan_days))

        assert response.status_code == 400
        assert response.get_json()["success"] is False

    @pytest.mark.parametrize("option", [{"prefer_deals": "false"}, {"maximize_ingredient_reuse": "no"}])
    def test_non_boolean_flags_rejected(self, client, option):
        response = client.post("/api/plan", json=plan_request(**option))

        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_invalid_start_date(self, client):
        response = client.post("/api/plan", json=plan_request(start_date="next tuesday"))

        assert response.status_code == 400

    def test_default_preferences(self, client):
        plan = client.post("/api/plan", json={"options": {"plan_days": 1}}).get_json()["plan"]

        assert len(plan["days"][0]["meals"]) == 3

    def test_planner_failure(self, client, app, mocker):
        mocker.patch.object(
            app.config["PLANNER"], "generate_weekly_plan", side_effect=RuntimeError("catalog unavailable")
        )

        response = client.post("/api/plan", json=plan_request())

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "catalog unavailable"}

    def test_options_passed_to_planner(self, client, app, mocker):
        generate = mocker.patch.object(app.config["PLANNER"], "generate_weekly_plan")
        generate.return_value.to_dict.return_value = {"id": "plan_1"}

        client.post("/api/plan", json=plan_request(prefer_deals=False, maximize_ingredient_reuse=False))

        kwargs = generate.call_args.kwargs
        assert kwargs["prefer_deals"] is False
        assert kwargs["maximize_ingredient_reuse"] is False
        assert kwargs["plan_days"] == 7


class TestGroceryList:
    def test_merged_list(self, client):
        response = client.post("/api/grocery-list", json={"recipe_ids": ["grilled-cheese"]})

        data = response.get_json()
        assert [i["name"] for i in data["items"]] == ["Bread", "Cheddar Cheese", "Butter"]
        assert data["total"] == 2.4

    def test_unknown_recipe(self, client):
        response = client.post("/api/grocery-list", data=json.dumps({"recipe_ids": ["nope"]}),
                               content_type="application/json")

        assert response.status_code == 404
