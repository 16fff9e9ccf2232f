"""Meal plan generation service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.errors import NoRecipesFoundError, TdeeNotFoundError
from meal_planner.domain.plans import MealPlan, PlanSummary
from meal_planner.domain.recipes import Recipe, UserTDEE
from meal_planner.services.planning import (
    average_totals,
    build_days,
    group_by_meal_type,
    target_calories,
)

DEFAULT_PLAN_DAYS = 7

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Read access to stored recipes."""

    def list_recipes(
        self, diet_type: str | None, goal: str | None
    ) -> list[Recipe]:
        """Return recipes matching the optional filters."""


class TdeeRepository(Protocol):
    """Read access to stored TDEE baselines."""

    def get_by_user(self, user_id: str) -> UserTDEE | None:
        """Return the TDEE record for a user, if present."""


@dataclass
class MealPlanService:
    """Builds meal plans from a user's TDEE and the recipe catalogue."""

    recipe_repository: RecipeRepository
    tdee_repository: TdeeRepository
    default_days: int = DEFAULT_PLAN_DAYS

    def generate(
        self,
        user_id: str,
        diet_type: str | None = None,
        goal: str | None = None,
        days: int | None = None,
    ) -> MealPlan:
        """Generate a plan for the user.

        Raises TdeeNotFoundError when the user has no TDEE baseline and
        NoRecipesFoundError when the filters match no recipe.
        """
        plan_days = self.default_days if days is None else days
        user_tdee = self.tdee_repository.get_by_user(user_id)
        if user_tdee is None:
            raise TdeeNotFoundError

        daily_target = target_calories(user_tdee.calculated_tdee, goal)
        recipes = self.recipe_repository.list_recipes(diet_type, goal)
        if not recipes:
            raise NoRecipesFoundError

        day_plans = build_days(group_by_meal_type(recipes), daily_target, plan_days)
        _logger.info(
            "Generated meal plan: user_id=%s days=%s recipes=%s target=%s",
            user_id,
            plan_days,
            len(recipes),
            daily_target,
        )
        return MealPlan(
            days=day_plans,
            summary=PlanSummary(
                base_tdee=user_tdee.calculated_tdee,
                target_calories=daily_target,
                goal=goal,
                diet_type=diet_type,
                days=plan_days,
                average_daily_totals=average_totals(day_plans),
            ),
        )
