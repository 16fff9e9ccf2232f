"""Meal plan API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from meal_planner.api.auth import require_user
from meal_planner.api.schemas import GenerateMealPlanRequest
from meal_planner.domain.errors import MealPlanError

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer
    from meal_planner.domain.plans import (
        AverageTotals,
        DayPlan,
        DayTotals,
        MealPlan,
        PlanSummary,
    )
    from meal_planner.domain.recipes import Recipe

router = APIRouter(prefix="/meal-plans", tags=["meal-plans"])

_logger = logging.getLogger(__name__)


@router.post("/generate", response_model=None)
def generate_meal_plan(
    request: Request,
    payload: GenerateMealPlanRequest | None = None,
    user_id: str = Depends(require_user),
) -> dict[str, object] | JSONResponse:
    """Generate a meal plan from the caller's TDEE and preferences."""
    container: AppContainer = request.app.state.container
    body = payload or GenerateMealPlanRequest()
    try:
        plan = container.meal_plan_service.generate(
            user_id=user_id,
            diet_type=body.diet_type,
            goal=body.goal,
            days=body.days,
        )
    except MealPlanError as exc:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )
    except Exception as exc:
        _logger.exception("Generate meal plan error", extra={"user_id": user_id})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )
    return _serialize_plan(plan)


def _serialize_plan(plan: MealPlan) -> dict[str, object]:
    return {
        "mealPlan": [_serialize_day(day) for day in plan.days],
        "summary": _serialize_summary(plan.summary),
    }


def _serialize_day(day: DayPlan) -> dict[str, object]:
    return {
        "day": day.day,
        "meals": {
            str(meal_type): _serialize_recipe(recipe)
            for meal_type, recipe in day.meals.items()
        },
        "targetCalories": day.target_calories,
        "totals": _serialize_totals(day.totals) if day.totals else None,
    }


def _serialize_recipe(recipe: Recipe) -> dict[str, object]:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "mealType": recipe.meal_type,
        "dietType": recipe.diet_type,
        "goal": recipe.goal,
        "calories": recipe.calories,
        "protein": recipe.protein,
        "carbs": recipe.carbs,
        "fats": recipe.fats,
    }


def _serialize_totals(totals: DayTotals) -> dict[str, int]:
    return {
        "totalCalories": totals.total_calories,
        "totalProtein": totals.total_protein,
        "totalCarbs": totals.total_carbs,
        "totalFats": totals.total_fats,
    }


def _serialize_averages(averages: AverageTotals) -> dict[str, int]:
    return {
        "avgCalories": averages.avg_calories,
        "avgProtein": averages.avg_protein,
        "avgCarbs": averages.avg_carbs,
        "avgFats": averages.avg_fats,
    }


def _serialize_summary(summary: PlanSummary) -> dict[str, object]:
    return {
        "baseTDEE": summary.base_tdee,
        "targetCalories": summary.target_calories,
        "goal": summary.goal,
        "dietType": summary.diet_type,
        "days": summary.days,
        "averageDailyTotals": _serialize_averages(summary.average_daily_totals),
    }
