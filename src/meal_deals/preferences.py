"""
Household, time and dietary preference constants.

Serving weights, time tiers and the fixed option lists offered during
onboarding live here so the planner and the API agree on them.
"""

import math
import random
import time
from typing import Dict, List

from meal_deals.data.models import (
    UserPreferences,
    Household,
    HouseholdMember,
    DietaryContext,
    Location,
)


# Portion weight of one household member, relative to an adult
SERVING_MULTIPLIERS: Dict[str, float] = {
    "adult": 1.0,
    "teen": 1.0,
    "child": 0.65,
    "toddler": 0.35,
}

# Maximum total recipe time (prep + cook) per time tier
TIME_AVAILABILITY: Dict[str, Dict] = {
    "quick": {"label": "Quick meals", "description": "30 minutes or less", "max_minutes": 30},
    "moderate": {"label": "Moderate", "description": "Up to 1 hour", "max_minutes": 60},
    "flexible": {"label": "Flexible", "description": "I enjoy cooking", "max_minutes": 180},
}

MEAL_PREFERENCES: List[str] = [
    "weekly-planning",
    "family-friendly",
    "quick-meals",
    "healthy",
    "high-protein",
    "comfort-food",
]

DIETARY_RESTRICTIONS: List[str] = [
    "Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Kosher",
    "Halal", "Low-Sodium", "Low-Sugar", "Keto", "Paleo",
]

COMMON_ALLERGIES: List[str] = [
    "Peanuts", "Tree Nuts", "Milk", "Eggs", "Fish", "Shellfish",
    "Soy", "Wheat", "Sesame", "Mustard", "Sulphites",
]

BUDGET_LEVELS: List[str] = ["low", "medium", "flexible"]
COOKING_SKILLS: List[str] = ["beginner", "intermediate", "advanced"]


def max_minutes_for(time_per_meal: str) -> int:
    """Look up the time budget for a tier, treating unknown tiers as moderate."""
    tier = TIME_AVAILABILITY.get(time_per_meal, TIME_AVAILABILITY["moderate"])
    return tier["max_minutes"]


def calculate_servings_needed(household: Household) -> float:
    """
    Weighted portion count for a household (unrounded).

    Args:
        household: Household whose members are weighted by SERVING_MULTIPLIERS

    Returns:
        Sum of count x weight, e.g. 2 adults + 1 child = 2.65
    """
    return sum(
        member.count * SERVING_MULTIPLIERS.get(member.type, 1.0)
        for member in household.members
    )


def servings_to_cook(household: Household) -> int:
    """Whole number of servings the planner scales recipes to."""
    return math.ceil(round(calculate_servings_needed(household), 6))


def calculate_household_size(members: List[HouseholdMember]) -> int:
    return sum(member.count for member in members)


def generate_preferences_id() -> str:
    return f"pref_{int(time.time() * 1000)}_{random.randint(0, 36 ** 9):x}"


def default_preferences() -> UserPreferences:
    """Fresh preferences for a new user: one adult in Newfoundland & Labrador."""
    members = [HouseholdMember(type="adult", count=1)]
    return UserPreferences(
        id=generate_preferences_id(),
        location=Location(city="", region="Newfoundland & Labrador"),
        selected_stores=[],
        household=Household(members=members, total_people=calculate_household_size(members)),
        dietary_context=DietaryContext(
            allergies=[],
            restrictions=[],
            budget_level="medium",
            cooking_skill="intermediate",
            time_per_meal="moderate",
        ),
        meal_preferences=["weekly-planning"],
        auto_search_deals=True,
        onboarding_complete=False,
    )
