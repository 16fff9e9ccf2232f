"""Calorie targeting and recipe selection helpers."""

import logging
import math
from collections.abc import Iterable, Sequence

from meal_planner.domain.plans import AverageTotals, DayPlan, DayTotals
from meal_planner.domain.recipes import Goal, MealType, Recipe

WEIGHT_LOSS_DEFICIT = 500
MUSCLE_GAIN_SURPLUS = 300
MATCH_TOLERANCE = 0.15
ROTATION_MIN_CANDIDATES = 3

MEAL_SHARES: dict[MealType, float] = {
    MealType.BREAKFAST: 0.30,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.05,
}

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def target_calories(tdee: float, goal: Goal | str | None) -> float:
    """Return the daily calorie target for a goal.

    Maintenance (or no goal) keeps the TDEE as stored, without rounding.
    """
    if goal == Goal.WEIGHT_LOSS:
        return round_half_up(tdee - WEIGHT_LOSS_DEFICIT)
    if goal == Goal.MUSCLE_GAIN:
        return round_half_up(tdee + MUSCLE_GAIN_SURPLUS)
    return tdee


def meal_split(daily_target: float) -> dict[MealType, int]:
    """Split a daily target across meal slots, rounding each slot on its own."""
    return {
        meal_type: round_half_up(daily_target * share)
        for meal_type, share in MEAL_SHARES.items()
    }


def best_match(
    candidates: Sequence[Recipe],
    target: float,
    tolerance: float = MATCH_TOLERANCE,
) -> Recipe | None:
    """Return the recipe closest to the calorie target.

    Ties keep input order. The tolerance never rejects a candidate: the
    closest recipe is returned even when it falls outside the bound.
    """
    if not candidates:
        return None
    best = min(candidates, key=lambda recipe: abs(recipe.calories - target))
    max_difference = target * tolerance
    if abs(best.calories - target) > max_difference:
        _logger.debug(
            "Closest recipe %s is outside tolerance: calories=%s target=%s",
            best.id,
            best.calories,
            target,
        )
    return best


def group_by_meal_type(recipes: Iterable[Recipe]) -> dict[MealType, list[Recipe]]:
    """Group recipes by meal slot, keeping store order within each slot."""
    grouped: dict[MealType, list[Recipe]] = {meal_type: [] for meal_type in MealType}
    for recipe in recipes:
        if recipe.meal_type is not None:
            grouped[recipe.meal_type].append(recipe)
    return grouped


def build_days(
    grouped: dict[MealType, list[Recipe]],
    daily_target: float,
    days: int,
) -> list[DayPlan]:
    """Pick one recipe per filled meal slot for each day."""
    slot_targets = meal_split(daily_target)
    used: dict[MealType, list[str]] = {meal_type: [] for meal_type in MealType}
    plan: list[DayPlan] = []

    for index in range(days):
        day_plan = DayPlan(day=index + 1, target_calories=daily_target)
        for meal_type in MealType:
            candidates = grouped.get(meal_type, [])
            if not candidates:
                continue
            available = candidates
            if len(candidates) > ROTATION_MIN_CANDIDATES:
                available = [
                    recipe for recipe in candidates if recipe.id not in used[meal_type]
                ]
                if not available:
                    available = candidates
                    used[meal_type] = []
            selected = best_match(available, slot_targets[meal_type])
            if selected is not None:
                day_plan.meals[meal_type] = selected
                used[meal_type].append(selected.id)
        day_plan.totals = day_totals(day_plan)
        plan.append(day_plan)
    return plan


def day_totals(day_plan: DayPlan) -> DayTotals:
    """Sum macros over the filled slots of a day."""
    meals = day_plan.meals.values()
    return DayTotals(
        total_calories=round_half_up(sum(meal.calories for meal in meals)),
        total_protein=round_half_up(sum(meal.protein for meal in meals)),
        total_carbs=round_half_up(sum(meal.carbs for meal in meals)),
        total_fats=round_half_up(sum(meal.fats for meal in meals)),
    )


def average_totals(plan: Sequence[DayPlan]) -> AverageTotals:
    """Average day totals across the plan."""
    totals = [day.totals or day_totals(day) for day in plan]
    count = max(len(totals), 1)
    return AverageTotals(
        avg_calories=round_half_up(sum(t.total_calories for t in totals) / count),
        avg_protein=round_half_up(sum(t.total_protein for t in totals) / count),
        avg_carbs=round_half_up(sum(t.total_carbs for t in totals) / count),
        avg_fats=round_half_up(sum(t.total_fats for t in totals) / count),
    )
