"""
Weekly deal fetcher.

Generates realistic sample deals for Newfoundland grocery stores. Deals are
seeded by the calendar week so every caller sees the same flyer for a given
store until the week rolls over.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional

from meal_deals.data.models import DealItem, FetchDealsResult, ingredient_key
from meal_deals.data.stores import get_store_by_id

logger = logging.getLogger(__name__)


# Typical NL grocery items with regular shelf prices
TYPICAL_DEALS_DATA: Dict[str, List[Dict]] = {
    "proteins": [
        {"name": "Chicken Breast", "category": "Poultry", "normal_price": 12.99, "unit": "per kg"},
        {"name": "Ground Beef", "category": "Meat", "normal_price": 8.99, "unit": "per lb"},
        {"name": "Pork Chops", "category": "Meat", "normal_price": 7.99, "unit": "per lb"},
        {"name": "Atlantic Salmon", "category": "Seafood", "normal_price": 14.99, "unit": "per lb"},
        {"name": "Atlantic Cod", "category": "Seafood", "normal_price": 12.99, "unit": "per lb"},
        {"name": "Shrimp", "category": "Seafood", "normal_price": 11.99, "unit": "340g bag"},
        {"name": "Bacon", "category": "Meat", "normal_price": 7.99, "unit": "500g pkg"},
        {"name": "Turkey Breast", "category": "Poultry", "normal_price": 9.99, "unit": "per lb"},
        {"name": "Salt Beef", "category": "Meat", "normal_price": 9.49, "unit": "per lb"},
        {"name": "Bologna", "category": "Deli", "normal_price": 4.99, "unit": "500g"},
    ],
    "produce": [
        {"name": "Bananas", "category": "Produce", "normal_price": 1.49, "unit": "per lb"},
        {"name": "Apples", "category": "Produce", "normal_price": 3.99, "unit": "3 lb bag"},
        {"name": "Potatoes", "category": "Produce", "normal_price": 4.99, "unit": "10 lb bag"},
        {"name": "Carrots", "category": "Produce", "normal_price": 2.99, "unit": "2 lb bag"},
        {"name": "Onions", "category": "Produce", "normal_price": 2.99, "unit": "3 lb bag"},
        {"name": "Cabbage", "category": "Produce", "normal_price": 2.49, "unit": "each"},
        {"name": "Turnip", "category": "Produce", "normal_price": 1.99, "unit": "per lb"},
        {"name": "Broccoli", "category": "Produce", "normal_price": 2.99, "unit": "each"},
        {"name": "Celery", "category": "Produce", "normal_price": 2.99, "unit": "bunch"},
        {"name": "Lettuce", "category": "Produce", "normal_price": 2.49, "unit": "head"},
        {"name": "Tomatoes", "category": "Produce", "normal_price": 2.99, "unit": "per lb"},
        {"name": "Cucumbers", "category": "Produce", "normal_price": 1.49, "unit": "each"},
        {"name": "Wild Blueberries", "category": "Produce", "normal_price": 5.99, "unit": "pint"},
        {"name": "Partridgeberries", "category": "Produce", "normal_price": 6.99, "unit": "pint"},
    ],
    "dairy": [
        {"name": "Milk 2%", "category": "Dairy", "normal_price": 5.49, "unit": "4L"},
        {"name": "Large Eggs", "category": "Dairy", "normal_price": 4.99, "unit": "dozen"},
        {"name": "Butter", "category": "Dairy", "normal_price": 5.99, "unit": "454g"},
        {"name": "Cheese Block", "category": "Dairy", "normal_price": 8.99, "unit": "400g"},
        {"name": "Yogurt", "category": "Dairy", "normal_price": 4.99, "unit": "650g"},
        {"name": "Cream Cheese", "category": "Dairy", "normal_price": 4.49, "unit": "250g"},
        {"name": "Sour Cream", "category": "Dairy", "normal_price": 2.99, "unit": "500ml"},
    ],
    "pantry": [
        {"name": "Bread", "category": "Bakery", "normal_price": 3.49, "unit": "loaf"},
        {"name": "All-Purpose Flour", "category": "Baking", "normal_price": 5.99, "unit": "2.5kg"},
        {"name": "Sugar", "category": "Baking", "normal_price": 4.99, "unit": "2kg"},
        {"name": "Rice", "category": "Pantry", "normal_price": 6.99, "unit": "2kg"},
        {"name": "Pasta", "category": "Pantry", "normal_price": 2.49, "unit": "450g"},
        {"name": "Purity Hard Bread", "category": "Bakery", "normal_price": 4.99, "unit": "box"},
        {"name": "Canned Beans", "category": "Pantry", "normal_price": 1.99, "unit": "540ml"},
        {"name": "Canned Tomatoes", "category": "Pantry", "normal_price": 2.49, "unit": "796ml"},
        {"name": "Vegetable Oil", "category": "Pantry", "normal_price": 5.99, "unit": "1L"},
        {"name": "Olive Oil", "category": "Pantry", "normal_price": 8.99, "unit": "500ml"},
        {"name": "Cereal", "category": "Pantry", "normal_price": 5.99, "unit": "box"},
        {"name": "Peanut Butter", "category": "Pantry", "normal_price": 4.99, "unit": "500g"},
    ],
    "frozen": [
        {"name": "Frozen Vegetables", "category": "Frozen", "normal_price": 3.99, "unit": "750g"},
        {"name": "Frozen French Fries", "category": "Frozen", "normal_price": 4.49, "unit": "1kg"},
        {"name": "Ice Cream", "category": "Frozen", "normal_price": 5.99, "unit": "1.5L"},
        {"name": "Frozen Pizza", "category": "Frozen", "normal_price": 6.99, "unit": "each"},
        {"name": "Fish Sticks", "category": "Frozen", "normal_price": 7.99, "unit": "700g"},
    ],
    "beverages": [
        {"name": "Orange Juice", "category": "Beverages", "normal_price": 4.99, "unit": "1.89L"},
        {"name": "Coffee", "category": "Beverages", "normal_price": 9.99, "unit": "340g"},
        {"name": "Tea", "category": "Beverages", "normal_price": 4.99, "unit": "72 bags"},
        {"name": "Soft Drinks", "category": "Beverages", "normal_price": 5.99, "unit": "12-pack"},
    ],
}

# Which item categories each chain tends to put on sale
STORE_DEAL_PATTERNS: Dict[str, List[str]] = {
    "dominion": ["proteins", "produce", "dairy", "pantry"],
    "atlantic-superstore": ["proteins", "produce", "pantry", "frozen"],
    "sobeys": ["proteins", "produce", "dairy", "beverages"],
    "coleman": ["proteins", "produce", "pantry"],
    "walmart": ["pantry", "frozen", "beverages", "dairy"],
    "costco": ["proteins", "dairy", "pantry", "beverages"],
    "nofrills": ["produce", "pantry", "dairy", "frozen"],
    "foodland": ["proteins", "produce", "dairy"],
}
DEFAULT_DEAL_PATTERN = ["produce", "pantry"]

DEAL_VALIDITY = timedelta(days=7)
STALE_AFTER_HOURS = 24


def week_number(day: Optional[datetime] = None) -> int:
    """Whole weeks elapsed since January 1 of the day's year."""
    day = day or datetime.now()
    start = datetime(day.year, 1, 1)
    if not isinstance(day, datetime):
        day = datetime(day.year, day.month, day.day)
    return (day - start) // timedelta(weeks=1)


def seeded_random(seed: int) -> Callable[[], float]:
    """
    Linear congruential generator returning floats in [0, 1).

    The same seed always yields the same sequence, which keeps a store's
    weekly flyer stable across calls.
    """
    state = seed

    def _next() -> float:
        nonlocal state
        state = (state * 9301 + 49297) % 233280
        return state / 233280

    return _next


def generate_store_deals(store_id: str, week_seed: int, now: Optional[datetime] = None) -> List[DealItem]:
    """
    Generate one store's deals for a week.

    Args:
        store_id: Store directory id
        week_seed: Seed for the week (week number x 1000)
        now: Start of the validity window (defaults to current time)

    Returns:
        Between 0 and 8 deals; unknown stores produce none
    """
    store = get_store_by_id(store_id)
    if not store:
        logger.warning(f"[DEALS] Unknown store '{store_id}', no deals generated")
        return []

    now = now or datetime.now()
    valid_until = now + DEAL_VALIDITY
    deal_categories = STORE_DEAL_PATTERNS.get(store.type, DEFAULT_DEAL_PATTERN)
    random = seeded_random(week_seed + ord(store_id[0]))

    deals: List[DealItem] = []
    used_items = set()

    # 4-8 attempts; duplicate picks are dropped rather than retried
    num_deals = int(random() * 5) + 4
    for _ in range(num_deals):
        category = deal_categories[int(random() * len(deal_categories))]
        items = TYPICAL_DEALS_DATA.get(category)
        if not items:
            continue

        item = items[int(random() * len(items))]
        if item["name"] in used_items:
            continue
        used_items.add(item["name"])

        discount_percent = int(random() * 26) + 15
        sale_price = round(item["normal_price"] * (1 - discount_percent / 100), 2)
        is_flash_sale = random() < 0.2

        key = ingredient_key(item["name"])
        deals.append(DealItem(
            id=f"fetched-{store_id}-{key}-{week_seed}",
            ingredient_id=key,
            ingredient_name=item["name"],
            store_id=store_id,
            store_name=store.name,
            original_price=item["normal_price"],
            sale_price=sale_price,
            discount_percentage=discount_percent,
            valid_from=now.isoformat(),
            valid_until=valid_until.isoformat(),
            quantity=item["unit"],
            is_flash_sale=is_flash_sale,
            category=item["category"],
        ))

    return deals


def week_start(day: date) -> date:
    """Sunday that starts the week containing day."""
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)


def fetch_weekly_deals(store_ids: List[str], now: Optional[datetime] = None) -> FetchDealsResult:
    """
    Fetch this week's deals for the selected stores.

    Args:
        store_ids: Store directory ids to fetch for
        now: Reference time (defaults to current time)

    Returns:
        FetchDealsResult with source "sample"
    """
    now = now or datetime.now()
    week_seed = week_number(now) * 1000

    all_deals: List[DealItem] = []
    for store_id in store_ids:
        all_deals.extend(generate_store_deals(store_id, week_seed, now))

    logger.info(f"[DEALS] Fetched {len(all_deals)} deals for {len(store_ids)} stores (seed={week_seed})")

    return FetchDealsResult(
        deals=all_deals,
        fetched_at=now.isoformat(),
        store_count=len(store_ids),
        source="sample",
        week_of=week_start(now.date()).isoformat(),
    )


def _hours_since(fetched_at: str, now: Optional[datetime]) -> float:
    fetched = datetime.fromisoformat(fetched_at)
    now = now or datetime.now()
    return (now - fetched).total_seconds() / 3600


def are_deals_stale(fetched_at: str, now: Optional[datetime] = None) -> bool:
    """True when the deals were fetched more than a day ago."""
    return _hours_since(fetched_at, now) > STALE_AFTER_HOURS


def get_deals_freshness(fetched_at: str, now: Optional[datetime] = None) -> str:
    hours = int(_hours_since(fetched_at, now))

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"

    days = hours // 24
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"
