"""
Data models for the deal-aware meal planner.

These models define the core entities used throughout the system:
- Recipe / RecipeIngredient: static catalog recipes
- DealItem: a time-bounded discount on one ingredient at one store
- UserPreferences: household, dietary context and store selection
- PlannedMeal / DailyPlan / WeeklyMealPlan: generated meal plans
- SmartShoppingItem / StoreShoppingList / SmartShoppingList: per-store shopping
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict


INGREDIENT_CATEGORIES = [
    "Produce", "Meat", "Seafood", "Dairy", "Pantry", "Frozen", "Bakery", "Spices",
]
RECIPE_CATEGORIES = ["Breakfast", "Lunch", "Dinner", "Snack", "Dessert"]
MEAL_TYPES = ["breakfast", "lunch", "dinner", "snack"]
DIFFICULTIES = ["Easy", "Medium", "Hard"]


def ingredient_key(name: str) -> str:
    """Derive the kebab-case id deals use for an ingredient name.

    "Chicken Breast" -> "chicken-breast"
    """
    return re.sub(r"\s+", "-", name.strip().lower())


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp, accepting the "Z" UTC suffix browsers send."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class RecipeIngredient:
    """One ingredient line of a recipe, priced for the recipe's native servings."""

    name: str
    amount: float
    unit: str
    category: str  # One of INGREDIENT_CATEGORIES
    estimated_price: Optional[float] = None  # CAD
    notes: Optional[str] = None

    @property
    def ingredient_id(self) -> str:
        return ingredient_key(self.name)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "estimated_price": self.estimated_price,
        }
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "RecipeIngredient":
        """Create RecipeIngredient from dictionary."""
        return cls(
            name=data["name"],
            amount=data["amount"],
            unit=data["unit"],
            category=data["category"],
            estimated_price=data.get("estimated_price"),
            notes=data.get("notes"),
        )


@dataclass
class Recipe:
    """Catalog recipe. Treated as immutable once loaded."""

    id: str
    name: str
    description: str
    category: str  # "Breakfast", "Lunch", "Dinner", "Snack", "Dessert"
    meal_type: str  # "breakfast", "lunch", "dinner", "snack"
    prep_time: int  # Minutes
    cook_time: int  # Minutes
    servings: int
    difficulty: str  # "Easy", "Medium", "Hard"
    ingredients: List[RecipeIngredient]
    instructions: List[str]
    tags: List[str]
    estimated_cost: Optional[float] = None  # Per serving, CAD

    @property
    def total_time(self) -> int:
        """Prep plus cook time in minutes."""
        return self.prep_time + self.cook_time

    def has_tag(self, *tags: str) -> bool:
        """Check whether the recipe carries any of the given tags."""
        return any(tag in self.tags for tag in tags)

    def __str__(self) -> str:
        """Human-readable string."""
        return f"{self.name} ({self.category}, {self.total_time} min, serves {self.servings})"

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "meal_type": self.meal_type,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "tags": self.tags,
            "estimated_cost": self.estimated_cost,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Recipe":
        """
        Create Recipe from dictionary.

        Args:
            data: Dictionary representation of Recipe

        Returns:
            Recipe object with RecipeIngredient entries parsed

        Raises:
            ValueError: If servings is not positive
        """
        if data.get("servings", 0) <= 0:
            raise ValueError(f"Recipe '{data.get('id')}' must have positive servings")

        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            category=data["category"],
            meal_type=data["meal_type"],
            prep_time=data.get("prep_time", 0),
            cook_time=data.get("cook_time", 0),
            servings=data["servings"],
            difficulty=data.get("difficulty", "Easy"),
            ingredients=[
                ing if isinstance(ing, RecipeIngredient) else RecipeIngredient.from_dict(ing)
                for ing in data.get("ingredients", [])
            ],
            instructions=list(data.get("instructions", [])),
            tags=list(data.get("tags", [])),
            estimated_cost=data.get("estimated_cost"),
        )


@dataclass
class DealItem:
    """A time-bounded discount on one ingredient at one store."""

    id: str
    ingredient_id: str  # Kebab-case ingredient name, e.g. "chicken-breast"
    ingredient_name: str
    store_id: str
    store_name: str
    original_price: float
    sale_price: float
    discount_percentage: int  # 0-100, may be supplied independently of prices
    valid_from: str  # ISO timestamp
    valid_until: str  # ISO timestamp
    quantity: str  # Free-text unit, e.g. "per lb"
    is_flash_sale: bool = False
    category: str = ""

    @property
    def savings(self) -> float:
        return self.original_price - self.sale_price

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check whether the deal has ended.

        Args:
            now: Reference time (defaults to current time)

        Returns:
            True if valid_until is before now; deals without an end never expire
        """
        if not self.valid_until:
            return False

        now = now or datetime.now()
        valid_until = parse_timestamp(self.valid_until)
        # Compare naive against naive, aware against aware
        if valid_until.tzinfo is not None and now.tzinfo is None:
            valid_until = valid_until.replace(tzinfo=None)
        elif valid_until.tzinfo is None and now.tzinfo is not None:
            now = now.replace(tzinfo=None)
        return valid_until < now

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "ingredient_id": self.ingredient_id,
            "ingredient_name": self.ingredient_name,
            "store_id": self.store_id,
            "store_name": self.store_name,
            "original_price": self.original_price,
            "sale_price": self.sale_price,
            "discount_percentage": self.discount_percentage,
            "valid_from": self.valid_from,
            "valid_until": self.valid_until,
            "quantity": self.quantity,
            "is_flash_sale": self.is_flash_sale,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "DealItem":
        """
        Create DealItem from dictionary.

        User-entered deals often omit ingredient_id; it is derived from the
        ingredient name in that case.
        """
        if "ingredient_name" not in data or "store_id" not in data:
            raise ValueError("DealItem data must contain 'ingredient_name' and 'store_id'")

        ingredient_id = data.get("ingredient_id") or ingredient_key(data["ingredient_name"])
        return cls(
            id=data.get("id") or f"deal_{data['store_id']}_{ingredient_id}",
            ingredient_id=ingredient_id,
            ingredient_name=data["ingredient_name"],
            store_id=data["store_id"],
            store_name=data.get("store_name") or data["store_id"],
            original_price=float(data["original_price"]),
            sale_price=float(data["sale_price"]),
            discount_percentage=int(data.get("discount_percentage", 0)),
            valid_from=data.get("valid_from", ""),
            valid_until=data.get("valid_until", ""),
            quantity=data.get("quantity", ""),
            is_flash_sale=bool(data.get("is_flash_sale", False)),
            category=data.get("category", ""),
        )


@dataclass
class FetchDealsResult:
    """Result of a deal fetch for a set of stores."""

    deals: List[DealItem]
    fetched_at: str
    store_count: int
    source: str  # "sample", "flipp" or "api"
    week_of: str

    def to_dict(self) -> Dict:
        return {
            "deals": [deal.to_dict() for deal in self.deals],
            "fetched_at": self.fetched_at,
            "store_count": self.store_count,
            "source": self.source,
            "week_of": self.week_of,
        }


@dataclass
class HouseholdMember:
    """A group of household members of one type."""

    type: str  # "adult", "teen", "child", "toddler"
    count: int = 1

    def to_dict(self) -> Dict:
        return {"type": self.type, "count": self.count}


@dataclass
class Household:
    members: List[HouseholdMember] = field(default_factory=lambda: [HouseholdMember("adult", 1)])
    total_people: int = 1

    def to_dict(self) -> Dict:
        return {
            "members": [m.to_dict() for m in self.members],
            "total_people": self.total_people,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Household":
        members = [
            HouseholdMember(type=m["type"], count=m.get("count", 1))
            for m in data.get("members", [])
        ]
        total = data.get("total_people")
        if total is None:
            total = sum(m.count for m in members)
        return cls(members=members, total_people=total)


@dataclass
class DietaryContext:
    """Dietary constraints collected during onboarding."""

    allergies: List[str] = field(default_factory=list)
    restrictions: List[str] = field(default_factory=list)  # e.g. ["Vegetarian"]
    budget_level: str = "medium"  # "low", "medium", "flexible"
    cooking_skill: str = "intermediate"  # "beginner", "intermediate", "advanced"
    time_per_meal: str = "moderate"  # "quick", "moderate", "flexible"

    def to_dict(self) -> Dict:
        return {
            "allergies": self.allergies,
            "restrictions": self.restrictions,
            "budget_level": self.budget_level,
            "cooking_skill": self.cooking_skill,
            "time_per_meal": self.time_per_meal,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "DietaryContext":
        return cls(
            allergies=list(data.get("allergies", [])),
            restrictions=list(data.get("restrictions", [])),
            budget_level=data.get("budget_level", "medium"),
            cooking_skill=data.get("cooking_skill", "intermediate"),
            time_per_meal=data.get("time_per_meal", "moderate"),
        )


@dataclass
class Location:
    city: str = ""
    region: str = "Newfoundland & Labrador"

    def to_dict(self) -> Dict:
        return {"city": self.city, "region": self.region}


@dataclass
class UserPreferences:
    """User preferences from onboarding and settings."""

    id: str = ""
    location: Location = field(default_factory=Location)
    selected_stores: List[str] = field(default_factory=list)  # Store IDs
    household: Household = field(default_factory=Household)
    dietary_context: DietaryContext = field(default_factory=DietaryContext)
    meal_preferences: List[str] = field(default_factory=lambda: ["weekly-planning"])
    auto_search_deals: bool = True
    onboarding_complete: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "location": self.location.to_dict(),
            "selected_stores": self.selected_stores,
            "household": self.household.to_dict(),
            "dietary_context": self.dietary_context.to_dict(),
            "meal_preferences": self.meal_preferences,
            "auto_search_deals": self.auto_search_deals,
            "onboarding_complete": self.onboarding_complete,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "UserPreferences":
        """Create UserPreferences from dictionary, filling defaults for missing sections."""
        location = data.get("location") or {}
        now = datetime.now().isoformat()
        return cls(
            id=data.get("id", ""),
            location=Location(
                city=location.get("city", ""),
                region=location.get("region", "Newfoundland & Labrador"),
            ),
            selected_stores=list(data.get("selected_stores", [])),
            household=Household.from_dict(data.get("household") or {"members": [{"type": "adult", "count": 1}]}),
            dietary_context=DietaryContext.from_dict(data.get("dietary_context") or {}),
            meal_preferences=list(data.get("meal_preferences", ["weekly-planning"])),
            auto_search_deals=data.get("auto_search_deals", True),
            onboarding_complete=data.get("onboarding_complete", False),
            created_at=parse_timestamp(data.get("created_at") or now),
            updated_at=parse_timestamp(data.get("updated_at") or now),
        )


@dataclass
class BestDealMeal:
    """A recipe with at least one ingredient on sale, and what the deals save."""

    recipe: Recipe
    total_savings: float
    deals_used: List[DealItem]
    estimated_cost: float
    normal_cost: float
    savings_percentage: int

    def to_dict(self) -> Dict:
        return {
            "recipe_id": self.recipe.id,
            "recipe_name": self.recipe.name,
            "total_savings": self.total_savings,
            "deals_used": [deal.to_dict() for deal in self.deals_used],
            "estimated_cost": self.estimated_cost,
            "normal_cost": self.normal_cost,
            "savings_percentage": self.savings_percentage,
        }


@dataclass
class PlannedMeal:
    """A recipe scheduled for one meal slot, scaled to the household."""

    id: str
    day_of_week: int  # 0-6, Sunday = 0
    day_name: str
    meal_type: str  # "breakfast", "lunch", "dinner"
    recipe: Recipe
    servings: int  # Target servings after scaling
    estimated_cost: float
    estimated_time: int  # prep + cook minutes
    uses_deals: bool
    deal_savings: float

    @property
    def scale_factor(self) -> float:
        return self.servings / self.recipe.servings

    def __str__(self) -> str:
        """Human-readable string."""
        return f"{self.meal_type.title()}: {self.recipe.name} ({self.servings} servings)"

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns:
            Dictionary with all fields, recipe as nested dict
        """
        return {
            "id": self.id,
            "day_of_week": self.day_of_week,
            "day_name": self.day_name,
            "meal_type": self.meal_type,
            "recipe": self.recipe.to_dict(),
            "servings": self.servings,
            "estimated_cost": self.estimated_cost,
            "estimated_time": self.estimated_time,
            "uses_deals": self.uses_deals,
            "deal_savings": self.deal_savings,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "PlannedMeal":
        """Deserialize from dictionary produced by to_dict()."""
        if not isinstance(data.get("recipe"), dict):
            raise ValueError("PlannedMeal data must contain an embedded 'recipe'")

        return cls(
            id=data["id"],
            day_of_week=data["day_of_week"],
            day_name=data.get("day_name", ""),
            meal_type=data["meal_type"],
            recipe=Recipe.from_dict(data["recipe"]),
            servings=data["servings"],
            estimated_cost=data.get("estimated_cost", 0.0),
            estimated_time=data.get("estimated_time", 0),
            uses_deals=data.get("uses_deals", False),
            deal_savings=data.get("deal_savings", 0.0),
        )


@dataclass
class DailyPlan:
    """All planned meals for one calendar day."""

    day_of_week: int
    day_name: str
    date: str  # ISO format: "2025-01-20"
    meals: List[PlannedMeal]
    total_cost: float = 0.0
    total_time: int = 0
    total_savings: float = 0.0

    def get_meal(self, meal_type: str) -> Optional[PlannedMeal]:
        """Get the meal planned for a slot, if any."""
        for meal in self.meals:
            if meal.meal_type == meal_type:
                return meal
        return None

    def to_dict(self) -> Dict:
        return {
            "day_of_week": self.day_of_week,
            "day_name": self.day_name,
            "date": self.date,
            "meals": [meal.to_dict() for meal in self.meals],
            "total_cost": self.total_cost,
            "total_time": self.total_time,
            "total_savings": self.total_savings,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "DailyPlan":
        return cls(
            day_of_week=data["day_of_week"],
            day_name=data.get("day_name", ""),
            date=data["date"],
            meals=[PlannedMeal.from_dict(m) for m in data.get("meals", [])],
            total_cost=data.get("total_cost", 0.0),
            total_time=data.get("total_time", 0),
            total_savings=data.get("total_savings", 0.0),
        )


@dataclass
class SmartShoppingItem:
    """One aggregated line of the weekly shopping list."""

    ingredient_id: str
    ingredient_name: str
    amount: float
    unit: str
    category: str
    recipe_names: List[str]
    best_store: str
    best_price: float
    normal_price: float
    savings: float
    is_on_sale: bool
    aisle: str

    def to_dict(self) -> Dict:
        return {
            "ingredient_id": self.ingredient_id,
            "ingredient_name": self.ingredient_name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "recipe_names": self.recipe_names,
            "best_store": self.best_store,
            "best_price": self.best_price,
            "normal_price": self.normal_price,
            "savings": self.savings,
            "is_on_sale": self.is_on_sale,
            "aisle": self.aisle,
        }


@dataclass
class StoreShoppingList:
    """The part of the shopping list bought at one store."""

    store_id: str
    store_name: str
    items: List[SmartShoppingItem]
    total_cost: float
    total_savings: float
    item_count: int

    def to_dict(self) -> Dict:
        return {
            "store_id": self.store_id,
            "store_name": self.store_name,
            "items": [item.to_dict() for item in self.items],
            "total_cost": self.total_cost,
            "total_savings": self.total_savings,
            "item_count": self.item_count,
        }


@dataclass
class SmartShoppingList:
    """Shopping list for a week of meals, partitioned by store."""

    by_store: List[StoreShoppingList] = field(default_factory=list)
    total_items: int = 0
    total_cost: float = 0.0
    total_savings: float = 0.0
    savings_percentage: int = 0

    def all_items(self) -> List[SmartShoppingItem]:
        """Flatten the per-store partition back into one list."""
        return [item for store in self.by_store for item in store.items]

    def to_dict(self) -> Dict:
        return {
            "by_store": [store.to_dict() for store in self.by_store],
            "total_items": self.total_items,
            "total_cost": self.total_cost,
            "total_savings": self.total_savings,
            "savings_percentage": self.savings_percentage,
        }


@dataclass
class WeeklySummary:
    total_meals: int = 0
    total_cost: float = 0.0
    total_savings: float = 0.0
    average_cost_per_meal: float = 0.0
    total_prep_time: int = 0
    total_cook_time: int = 0
    meals_using_deals: int = 0
    deal_percentage: int = 0
    ingredients_reused: int = 0
    unique_ingredients: int = 0

    def to_dict(self) -> Dict:
        return {
            "total_meals": self.total_meals,
            "total_cost": self.total_cost,
            "total_savings": self.total_savings,
            "average_cost_per_meal": self.average_cost_per_meal,
            "total_prep_time": self.total_prep_time,
            "total_cook_time": self.total_cook_time,
            "meals_using_deals": self.meals_using_deals,
            "deal_percentage": self.deal_percentage,
            "ingredients_reused": self.ingredients_reused,
            "unique_ingredients": self.unique_ingredients,
        }


@dataclass
class WeeklyMealPlan:
    """Generated meal plan with its shopping list and savings summary."""

    id: str
    created_at: str  # ISO timestamp
    week_start_date: str  # ISO date
    days: List[DailyPlan]
    summary: WeeklySummary
    shopping_list: SmartShoppingList

    def all_meals(self) -> List[PlannedMeal]:
        """Get every planned meal across all days, in day order."""
        return [meal for day in self.days for meal in day.meals]

    def get_summary(self) -> str:
        """
        Get a concise summary of the meal plan.

        Returns:
            Summary string with key details
        """
        return (
            f"Meal Plan: week of {self.week_start_date} ({self.summary.total_meals} meals, "
            f"${self.summary.total_cost:.2f}, saves ${self.summary.total_savings:.2f})"
        )

    def __str__(self) -> str:
        return self.get_summary()

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "created_at": self.created_at,
            "week_start_date": self.week_start_date,
            "days": [day.to_dict() for day in self.days],
            "summary": self.summary.to_dict(),
            "shopping_list": self.shopping_list.to_dict(),
        }


@dataclass
class GroceryItem:
    """Single line of a simple catalog grocery list (no store resolution)."""

    name: str
    amount: float
    unit: str
    category: str
    estimated_price: float
    from_recipes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "estimated_price": self.estimated_price,
            "from_recipes": self.from_recipes,
        }
