"""Domain models for generated meal plans."""

from dataclasses import dataclass, field

from meal_planner.domain.recipes import MealType, Recipe


@dataclass(frozen=True)
class DayTotals:
    """Rounded nutrient totals for a single day."""

    total_calories: int
    total_protein: int
    total_carbs: int
    total_fats: int


@dataclass(frozen=True)
class AverageTotals:
    """Rounded daily averages across a plan."""

    avg_calories: int
    avg_protein: int
    avg_carbs: int
    avg_fats: int


@dataclass
class DayPlan:
    """Recipes picked for one day of the plan."""

    day: int
    target_calories: float
    meals: dict[MealType, Recipe] = field(default_factory=dict)
    totals: DayTotals | None = None


@dataclass(frozen=True)
class PlanSummary:
    """Plan-wide figures echoed back to the caller."""

    base_tdee: float
    target_calories: float
    goal: str | None
    diet_type: str | None
    days: int
    average_daily_totals: AverageTotals


@dataclass(frozen=True)
class MealPlan:
    """A generated multi-day plan."""

    days: list[DayPlan]
    summary: PlanSummary
