"""Domain models for recipes and TDEE baselines."""

from dataclasses import dataclass
from enum import StrEnum


class MealType(StrEnum):
    """Meal slots in the order they are planned within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Goal(StrEnum):
    """Fitness goal that adjusts the calorie target."""

    WEIGHT_LOSS = "weight-loss"
    MUSCLE_GAIN = "muscle-gain"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class Recipe:
    """A stored recipe with its macros."""

    id: str
    name: str
    meal_type: MealType | None
    diet_type: str | None
    goal: str | None
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class UserTDEE:
    """Previously calculated TDEE for a user."""

    user_id: str
    calculated_tdee: float
