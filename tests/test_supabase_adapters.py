"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.adapters.supabase_tdee_repository import SupabaseTdeeRepository
from meal_planner.domain.recipes import Goal, MealType


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    responses: list[list[dict[str, object]] | None] = field(default_factory=list)
    selected: str | None = None
    filters: list[tuple[str, object]] = field(default_factory=list)
    limit_count: int | None = None

    def queue(self, data: list[dict[str, object]] | None) -> None:
        self.responses.append(data)

    def select(self, columns: str) -> "FakeTable":
        self.selected = columns
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeTable":
        self.limit_count = count
        return self

    def execute(self) -> FakeResponse:
        data = self.responses.pop(0) if self.responses else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_recipe_repository_applies_filters() -> None:
    client = FakeSupabaseClient()
    table = client.table("recipes")
    table.queue(
        [
            {
                "id": 42,
                "name": "Oats",
                "meal_type": "breakfast",
                "diet_type": "veg",
                "goal": "weight-loss",
                "calories": 350,
                "protein": 12.5,
                "carbs": 55,
                "fats": 7,
            }
        ]
    )

    repository = SupabaseRecipeRepository(client)
    recipes = repository.list_recipes("veg", Goal.WEIGHT_LOSS)

    assert table.filters == [("diet_type", "veg"), ("goal", "weight-loss")]
    assert len(recipes) == 1
    recipe = recipes[0]
    assert recipe.id == "42"
    assert recipe.meal_type == MealType.BREAKFAST
    assert recipe.diet_type == "veg"
    assert recipe.goal == Goal.WEIGHT_LOSS
    assert recipe.protein == 12.5


def test_recipe_repository_without_filters_tolerates_sparse_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("menu")
    table.queue(
        [
            {"id": "r1", "meal_type": "brunch", "calories": None, "goal": None},
        ]
    )

    repository = SupabaseRecipeRepository(client, table_name="menu")
    recipes = repository.list_recipes(None, None)

    assert table.filters == []
    assert recipes[0].meal_type is None
    assert recipes[0].goal is None
    assert recipes[0].calories == 0.0
    assert recipes[0].name == ""


def test_recipe_repository_handles_empty_response() -> None:
    client = FakeSupabaseClient()
    client.table("recipes").queue(None)

    assert SupabaseRecipeRepository(client).list_recipes(None, None) == []


def test_tdee_repository_returns_record() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_tdee")
    table.queue([{"user_id": "user-1", "calculated_tdee": 2250}])

    repository = SupabaseTdeeRepository(client)
    record = repository.get_by_user("user-1")

    assert record is not None
    assert record.calculated_tdee == 2250.0
    assert table.filters == [("user_id", "user-1")]
    assert table.limit_count == 1


def test_tdee_repository_returns_none_when_missing() -> None:
    client = FakeSupabaseClient()
    client.table("user_tdee").queue([])

    assert SupabaseTdeeRepository(client).get_by_user("user-1") is None


def test_tdee_repository_rejects_incomplete_row() -> None:
    client = FakeSupabaseClient()
    client.table("user_tdee").queue([{"user_id": "user-1"}])

    with pytest.raises(RuntimeError):
        SupabaseTdeeRepository(client).get_by_user("user-1")
