"""Supabase repository for the recipe catalogue."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.recipes import MealType, Recipe
from meal_planner.services.meal_plans import RecipeRepository

_RECIPE_COLUMNS = "id, name, meal_type, diet_type, goal, calories, protein, carbs, fats"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe queries."""

    client: Client
    table_name: str = "recipes"

    def list_recipes(
        self, diet_type: str | None, goal: str | None
    ) -> list[Recipe]:
        """Return recipes, filtered by diet type and goal when given."""
        query = self.client.table(self.table_name).select(_RECIPE_COLUMNS)
        if diet_type:
            query = query.eq("diet_type", diet_type)
        if goal:
            query = query.eq("goal", goal)
        response = query.execute()
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        meal_type=_parse_meal_type(row.get("meal_type")),
        diet_type=_optional_str(row.get("diet_type")),
        goal=_optional_str(row.get("goal")),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
    )


def _parse_meal_type(raw: object) -> MealType | None:
    if not isinstance(raw, str):
        return None
    try:
        return MealType(raw)
    except ValueError:
        return None


def _optional_str(raw: object) -> str | None:
    return str(raw) if raw else None
