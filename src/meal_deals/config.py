"""
Environment configuration.

Values come from the process environment, optionally seeded from a .env
file via python-dotenv.
"""

import os
import logging
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_FALLBACK_STORE_ID = "sobeys-avalon-mall"


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def get_log_dir() -> Optional[str]:
    return os.environ.get("LOG_DIR") or None


def get_port() -> int:
    return int(os.environ.get("PORT", "5000"))


def get_fallback_store_id() -> str:
    """Store used for shopping items when the user has not selected any store."""
    return os.environ.get("FALLBACK_STORE_ID", DEFAULT_FALLBACK_STORE_ID)


def get_deals_file() -> Optional[str]:
    """Optional JSON file of user deals loaded at startup."""
    return os.environ.get("DEALS_FILE") or None


def get_planner_seed() -> Optional[int]:
    seed = os.environ.get("PLANNER_SEED")
    return int(seed) if seed else None


def get_plan_days() -> int:
    return int(os.environ.get("PLAN_DAYS", "7"))
