#!/usr/bin/env python3
"""
Flask web application for the deal-aware meal planner.

JSON API over the recipe catalog, the store directory, the deal store and
the weekly planner. Every response carries a "success" flag; failures add
an "error" message.
"""

import os
import logging
import random
from logging.handlers import RotatingFileHandler
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from meal_deals import config
from meal_deals.data.catalog import RecipeCatalog, generate_grocery_list
from meal_deals.data.models import DealItem, UserPreferences
from meal_deals.data.stores import STORES
from meal_deals.deals.fetcher import fetch_weekly_deals
from meal_deals.deals.store import DealStore
from meal_deals.planning.planner import MealPlanner
from meal_deals.preferences import default_preferences

logger = logging.getLogger(__name__)

MAX_PLAN_DAYS = 28


def configure_logging(log_dir: Optional[str] = None, level: Optional[int] = None):
    """Console logging plus a rotating file log when a log directory is configured."""
    handlers = [logging.StreamHandler()]
    log_dir = log_dir or config.get_log_dir()
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(
            os.path.join(log_dir, "app.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        ))

    logging.basicConfig(
        level=level or config.get_log_level(),
        format=config.LOG_FORMAT,
        handlers=handlers,
    )


def _error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def _flag(options: dict, name: str, default: bool = True) -> bool:
    value = options.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false")
    return value


def _parse_preferences(data: Optional[dict]) -> UserPreferences:
    if not data:
        return default_preferences()
    return UserPreferences.from_dict(data)


def create_app(
    deal_store: Optional[DealStore] = None,
    catalog: Optional[RecipeCatalog] = None,
    rng: Optional[random.Random] = None,
) -> Flask:
    """
    Build the Flask app.

    Args:
        deal_store: Deal store shared by all requests (a fresh one by default,
            seeded from DEALS_FILE when that is configured)
        catalog: Recipe catalog (built-in catalog by default)
        rng: Random source for the planner (seeded from PLANNER_SEED by default)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    CORS(app)

    if deal_store is None:
        deal_store = DealStore()
        deals_file = config.get_deals_file()
        if deals_file:
            loaded = deal_store.load_user_deals(deals_file)
            logger.info(f"[DEALS] Loaded {loaded} user deals from {deals_file}")

    if catalog is None:
        catalog = RecipeCatalog.default()
    if rng is None:
        rng = random.Random(config.get_planner_seed())

    planner = MealPlanner(deal_store, catalog, rng)
    app.config["DEAL_STORE"] = deal_store
    app.config["CATALOG"] = catalog
    app.config["PLANNER"] = planner

    @app.route("/health")
    def health():
        return jsonify({
            "success": True,
            "status": "ok",
            "recipes": len(catalog),
            "deals": len(deal_store.get_all_deals()),
        })

    # ------------------------------------------------------------------
    # Recipes and stores
    # ------------------------------------------------------------------

    @app.route("/api/recipes", methods=["GET"])
    def list_recipes():
        """List recipes, optionally filtered by meal_type, tag, q or max_minutes."""
        try:
            recipes = catalog.recipes

            meal_type = request.args.get("meal_type")
            if meal_type:
                recipes = [r for r in recipes if r.meal_type == meal_type]

            tag = request.args.get("tag")
            if tag:
                recipes = [r for r in recipes if tag in r.tags]

            query = request.args.get("q")
            if query:
                matches = {r.id for r in catalog.search_recipes(query)}
                recipes = [r for r in recipes if r.id in matches]

            max_minutes = request.args.get("max_minutes")
            if max_minutes is not None:
                recipes = [r for r in recipes if r.total_time <= int(max_minutes)]

            return jsonify({
                "success": True,
                "count": len(recipes),
                "recipes": [r.to_dict() for r in recipes],
            })
        except ValueError as e:
            return _error(f"Invalid filter: {e}", 400)
        except Exception as e:
            logger.error(f"Error listing recipes: {e}", exc_info=True)
            return _error(str(e), 500)

    @app.route("/api/recipes/<recipe_id>", methods=["GET"])
    def get_recipe(recipe_id):
        recipe = catalog.get_recipe_by_id(recipe_id)
        if not recipe:
            return _error(f"Recipe '{recipe_id}' not found", 404)
        return jsonify({"success": True, "recipe": recipe.to_dict()})

    @app.route("/api/stores", methods=["GET"])
    def list_stores():
        stores = STORES
        chain = request.args.get("chain")
        if chain:
            stores = [s for s in stores if s.chain_id == chain]
        location = request.args.get("location")
        if location:
            stores = [s for s in stores if s.location_id == location]
        return jsonify({"success": True, "stores": [s.to_dict() for s in stores]})

    # ------------------------------------------------------------------
    # Deals
    # ------------------------------------------------------------------

    @app.route("/api/deals", methods=["GET"])
    def list_deals():
        stores = request.args.getlist("store")
        deals = deal_store.get_deals_for_stores(stores) if stores else deal_store.get_all_deals()
        return jsonify({
            "success": True,
            "count": len(deals),
            "deals": [d.to_dict() for d in deals],
            "flash_sales": len([d for d in deals if d.is_flash_sale]),
            "potential_savings": round(sum(d.savings for d in deals), 2),
        })

    @app.route("/api/deals", methods=["PUT"])
    def replace_deals():
        """Replace the user deal set. An empty list reverts to sample deals."""
        try:
            data = request.get_json(silent=True) or {}
            deals = [DealItem.from_dict(item) for item in data.get("deals", [])]
            deal_store.set_user_deals(deals)
            return jsonify({"success": True, "count": len(deals)})
        except (KeyError, ValueError, TypeError) as e:
            return _error(f"Invalid deal: {e}", 400)
        except Exception as e:
            logger.error(f"Error replacing deals: {e}", exc_info=True)
            return _error(str(e), 500)

    @app.route("/api/deals", methods=["POST"])
    def add_deal():
        try:
            data = request.get_json(silent=True) or {}
            deal = deal_store.add_user_deal(
                ingredient_name=data["ingredient_name"],
                store_id=data["store_id"],
                original_price=float(data["original_price"]),
                sale_price=float(data["sale_price"]),
                quantity=data.get("quantity", ""),
                category=data.get("category", ""),
                valid_days=int(data.get("valid_days", 7)),
                is_flash_sale=bool(data.get("is_flash_sale", False)),
            )
            return jsonify({"success": True, "deal": deal.to_dict()}), 201
        except KeyError as e:
            return _error(f"Missing field: {e}", 400)
        except (ValueError, TypeError) as e:
            return _error(str(e), 400)
        except Exception as e:
            logger.error(f"Error adding deal: {e}", exc_info=True)
            return _error(str(e), 500)

    @app.route("/api/deals/<deal_id>", methods=["DELETE"])
    def delete_deal(deal_id):
        if not deal_store.remove_user_deal(deal_id):
            return _error(f"Deal '{deal_id}' not found", 404)
        return jsonify({"success": True})

    @app.route("/api/deals/fetch", methods=["POST"])
    def fetch_deals():
        """Fetch this week's sample deals for the given stores and make them the user set."""
        try:
            data = request.get_json(silent=True) or {}
            store_ids = data.get("store_ids") or []
            if not store_ids:
                return _error("store_ids is required", 400)

            result = fetch_weekly_deals(store_ids)
            deal_store.set_user_deals(result.deals)
            return jsonify({"success": True, **result.to_dict()})
        except Exception as e:
            logger.error(f"Error fetching deals: {e}", exc_info=True)
            return _error(str(e), 500)

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    @app.route("/api/plan", methods=["POST"])
    def create_plan():
        """Generate a weekly plan from preferences and planning options."""
        try:
            data = request.get_json(silent=True) or {}
            preferences = _parse_preferences(data.get("preferences"))
            options = data.get("options") or {}

            plan_days = int(options.get("plan_days", config.get_plan_days()))
            if not 1 <= plan_days <= MAX_PLAN_DAYS:
                return _error(f"plan_days must be between 1 and {MAX_PLAN_DAYS}", 400)

            plan = planner.generate_weekly_plan(
                preferences,
                plan_days=plan_days,
                start_date=options.get("start_date"),
                prefer_deals=_flag(options, "prefer_deals"),
                maximize_ingredient_reuse=_flag(options, "maximize_ingredient_reuse"),
            )
            return jsonify({"success": True, "plan": plan.to_dict()})
        except (KeyError, ValueError, TypeError) as e:
            return _error(f"Invalid request: {e}", 400)
        except Exception as e:
            logger.error(f"Error generating plan: {e}", exc_info=True)
            return _error(str(e), 500)

    @app.route("/api/grocery-list", methods=["POST"])
    def grocery_list():
        data = request.get_json(silent=True) or {}
        recipe_ids = data.get("recipe_ids") or []

        recipes = []
        for recipe_id in recipe_ids:
            recipe = catalog.get_recipe_by_id(recipe_id)
            if not recipe:
                return _error(f"Recipe '{recipe_id}' not found", 404)
            recipes.append(recipe)

        items = generate_grocery_list(recipes)
        return jsonify({
            "success": True,
            "items": [item.to_dict() for item in items],
            "total": round(sum(item.estimated_price for item in items), 2),
        })

    return app


def main():
    configure_logging()
    app = create_app()
    port = config.get_port()
    logger.info(f"Starting meal planner API on port {port}")
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
