"""
In-memory deal store.

Holds two deal sets: a synthetic set (seeded sample flyer deals) and a
user set (entered by hand or pushed in from a fetch). When the user set is
non-empty it replaces the synthetic set entirely; the two are never merged.

A DealStore is constructed explicitly and handed to the planner and the web
app, so tests can each work with an isolated set of deals.
"""

import json
import logging
import os
import time
from datetime import datetime, timedelta
from typing import List, Optional, Iterable

from meal_deals.data.models import DealItem, ingredient_key
from meal_deals.data.stores import get_store_name
from meal_deals.deals.fetcher import fetch_weekly_deals

logger = logging.getLogger(__name__)


# (id, ingredient_id, name, store, original, sale, discount, days valid, quantity, flash, category)
_SAMPLE_DEALS = [
    ("deal-1", "atlantic-cod", "Atlantic Cod", "sobeys-avalon-mall", 12.99, 9.99, 23, 7, "per lb", False, "Seafood"),
    ("deal-2", "chicken-breast", "Chicken Breast", "dominion-freshwater-road", 8.49, 5.99, 29, 5, "per lb", True, "Poultry"),
    ("deal-3", "potatoes", "Potatoes", "costco-st-johns", 4.99, 3.49, 30, 14, "10 lb bag", False, "Vegetables"),
    ("deal-4", "blueberries", "Wild Blueberries", "sobeys-avalon-mall", 3.99, 2.49, 38, 3, "per cup", True, "Berries"),
    ("deal-5", "eggs", "Large Eggs", "dominion-village-mall", 5.19, 3.99, 23, 7, "dozen", False, "Dairy"),
    ("deal-6", "carrots", "Carrots", "sobeys-torbay-road", 1.99, 0.99, 50, 4, "per lb", True, "Vegetables"),
    ("deal-7", "cabbage", "Cabbage", "dominion-freshwater-road", 2.99, 1.49, 50, 7, "per head", False, "Vegetables"),
    ("deal-8", "flour", "All-Purpose Flour", "costco-st-johns", 7.99, 5.99, 25, 21, "10 lb bag", False, "Baking"),
    ("deal-9", "butter", "Butter", "sobeys-avalon-mall", 6.99, 4.99, 29, 5, "per lb", False, "Dairy"),
    ("deal-10", "salt-beef", "Salt Beef", "dominion-freshwater-road", 9.49, 6.99, 26, 7, "per lb", False, "Meat"),
]


def sample_deals(now: Optional[datetime] = None) -> List[DealItem]:
    """The default St. John's deal set, valid from now."""
    now = now or datetime.now()
    return [
        DealItem(
            id=deal_id,
            ingredient_id=ingredient_id,
            ingredient_name=name,
            store_id=store_id,
            store_name=get_store_name(store_id),
            original_price=original,
            sale_price=sale,
            discount_percentage=discount,
            valid_from=now.isoformat(),
            valid_until=(now + timedelta(days=days)).isoformat(),
            quantity=quantity,
            is_flash_sale=flash,
            category=category,
        )
        for (deal_id, ingredient_id, name, store_id, original, sale,
             discount, days, quantity, flash, category) in _SAMPLE_DEALS
    ]


class DealStore:
    """Effective deal set consulted by the planner."""

    def __init__(self, synthetic_deals: Optional[Iterable[DealItem]] = None):
        """
        Initialize the store.

        Args:
            synthetic_deals: Seed deals; defaults to the St. John's sample set
        """
        self._synthetic: List[DealItem] = (
            list(synthetic_deals) if synthetic_deals is not None else sample_deals()
        )
        self._user: List[DealItem] = []

    # ------------------------------------------------------------------
    # Effective set
    # ------------------------------------------------------------------

    def set_user_deals(self, deals: Iterable[DealItem]) -> None:
        """Replace the user deal set. An empty list falls back to synthetic deals."""
        self._user = list(deals)
        logger.info(f"[DEALS] User deal set replaced ({len(self._user)} deals)")

    def get_all_deals(self) -> List[DealItem]:
        return list(self._user) if self._user else list(self._synthetic)

    def get_synthetic_deals(self) -> List[DealItem]:
        return list(self._synthetic)

    def get_user_deals(self) -> List[DealItem]:
        return list(self._user)

    def get_deals_for_stores(self, store_ids: Iterable[str]) -> List[DealItem]:
        wanted = set(store_ids)
        return [deal for deal in self.get_all_deals() if deal.store_id in wanted]

    def get_flash_sales(self) -> List[DealItem]:
        return [deal for deal in self.get_all_deals() if deal.is_flash_sale]

    def get_best_deals(self, limit: int = 5) -> List[DealItem]:
        """Deals with the largest discount percentage first."""
        ranked = sorted(self.get_all_deals(), key=lambda d: d.discount_percentage, reverse=True)
        return ranked[:limit]

    def get_total_potential_savings(self) -> float:
        return sum(deal.original_price - deal.sale_price for deal in self.get_all_deals())

    def find_deal(self, ingredient_id: str, store_ids: Optional[Iterable[str]] = None) -> Optional[DealItem]:
        """
        Find the first deal on an ingredient.

        Args:
            ingredient_id: Kebab-case ingredient id
            store_ids: Restrict to these stores; None means any store.
                An empty collection matches nothing.

        Returns:
            Matching DealItem or None
        """
        deals = self.get_all_deals() if store_ids is None else self.get_deals_for_stores(store_ids)
        for deal in deals:
            if deal.ingredient_id == ingredient_id:
                return deal
        return None

    # ------------------------------------------------------------------
    # Deal management
    # ------------------------------------------------------------------

    def add_user_deal(
        self,
        ingredient_name: str,
        store_id: str,
        original_price: float,
        sale_price: float,
        quantity: str = "",
        category: str = "",
        valid_days: int = 7,
        is_flash_sale: bool = False,
        now: Optional[datetime] = None,
    ) -> DealItem:
        """
        Add a hand-entered deal to the user set.

        The ingredient id is derived from the name and the discount is
        computed from the two prices.

        Returns:
            The created DealItem
        """
        if original_price <= 0:
            raise ValueError("original_price must be positive")
        if sale_price < 0:
            raise ValueError("sale_price must not be negative")
        if sale_price > original_price:
            raise ValueError("sale_price must not exceed original_price")

        now = now or datetime.now()
        deal = DealItem(
            id=f"user-{int(time.time() * 1000)}-{len(self._user)}",
            ingredient_id=ingredient_key(ingredient_name),
            ingredient_name=ingredient_name,
            store_id=store_id,
            store_name=get_store_name(store_id),
            original_price=original_price,
            sale_price=sale_price,
            discount_percentage=round((1 - sale_price / original_price) * 100),
            valid_from=now.isoformat(),
            valid_until=(now + timedelta(days=valid_days)).isoformat(),
            quantity=quantity,
            is_flash_sale=is_flash_sale,
            category=category,
        )
        self._user = self._user + [deal]
        logger.info(f"[DEALS] Added user deal {deal.id}: {ingredient_name} @ {store_id}")
        return deal

    def remove_user_deal(self, deal_id: str) -> bool:
        """Remove a user deal by id. Returns False when no deal had that id."""
        remaining = [deal for deal in self._user if deal.id != deal_id]
        removed = len(remaining) != len(self._user)
        self._user = remaining
        return removed

    def clear_user_deals(self) -> None:
        self._user = []

    def prune_expired(self, now: Optional[datetime] = None) -> int:
        """Drop expired user deals. Returns how many were removed."""
        active = [deal for deal in self._user if not deal.is_expired(now)]
        removed = len(self._user) - len(active)
        self._user = active
        if removed:
            logger.info(f"[DEALS] Pruned {removed} expired deals")
        return removed

    def regenerate_synthetic_deals(self, store_ids: List[str], now: Optional[datetime] = None) -> List[DealItem]:
        """Replace the synthetic set with this week's generated deals for the stores."""
        result = fetch_weekly_deals(store_ids, now)
        self._synthetic = list(result.deals)
        return self.get_synthetic_deals()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load_user_deals(self, path: str, now: Optional[datetime] = None) -> int:
        """
        Load user deals from a JSON file, skipping expired ones.

        A missing file leaves the user set empty. Malformed JSON raises.

        Returns:
            Number of deals loaded
        """
        if not os.path.exists(path):
            logger.info(f"[DEALS] No deals file at {path}")
            self.set_user_deals([])
            return 0

        with open(path) as f:
            data = json.load(f)

        deals = [DealItem.from_dict(item) for item in data]
        self.set_user_deals(deal for deal in deals if not deal.is_expired(now))
        return len(self._user)

    def save_user_deals(self, path: str) -> None:
        with open(path, "w") as f:
            json.dump([deal.to_dict() for deal in self._user], f, indent=2)
