"""
Deal sources - the in-memory deal store and the weekly sample fetcher.
"""

from meal_deals.deals.store import DealStore, sample_deals
from meal_deals.deals.fetcher import (
    fetch_weekly_deals,
    are_deals_stale,
    get_deals_freshness,
)
