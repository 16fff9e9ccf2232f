"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from meal_planner.adapters.supabase_auth_client import TokenVerifier
from meal_planner.config import Settings
from meal_planner.containers import AppContainer
from meal_planner.domain.recipes import Goal, MealType, Recipe, UserTDEE
from meal_planner.services.meal_plans import (
    MealPlanService,
    RecipeRepository,
    TdeeRepository,
)

VALID_TOKEN = "valid-token"
USER_ID = "user-123"


def make_recipe(  # noqa: PLR0913
    recipe_id: str,
    meal_type: MealType,
    calories: float,
    *,
    diet_type: str = "veg",
    goal: str | None = Goal.WEIGHT_LOSS,
    protein: float = 10,
    carbs: float = 20,
    fats: float = 5,
) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        meal_type=meal_type,
        diet_type=diet_type,
        goal=goal,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
    )


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: list[Recipe] = field(default_factory=list)
    calls: list[tuple[str | None, str | None]] = field(default_factory=list)

    def list_recipes(
        self, diet_type: str | None, goal: str | None
    ) -> list[Recipe]:
        self.calls.append((diet_type, goal))
        return [
            recipe
            for recipe in self.recipes
            if (diet_type is None or recipe.diet_type == diet_type)
            and (goal is None or recipe.goal == goal)
        ]


@dataclass
class InMemoryTdeeRepository(TdeeRepository):
    """In-memory TDEE repository for tests."""

    records: dict[str, UserTDEE] = field(default_factory=dict)

    def get_by_user(self, user_id: str) -> UserTDEE | None:
        return self.records.get(user_id)


@dataclass
class FakeTokenVerifier(TokenVerifier):
    """Token verifier accepting a fixed set of tokens."""

    tokens: dict[str, str] = field(default_factory=lambda: {VALID_TOKEN: USER_ID})
    seen: list[str] = field(default_factory=list)
    error: Exception | None = None

    async def verify(self, token: str) -> str | None:
        self.seen.append(token)
        if self.error is not None:
            raise self.error
        return self.tokens.get(token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.key.signature",
    )


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def tdee_repository() -> InMemoryTdeeRepository:
    return InMemoryTdeeRepository()


@pytest.fixture
def token_verifier() -> FakeTokenVerifier:
    return FakeTokenVerifier()


@pytest.fixture
def container(
    settings: Settings,
    recipe_repository: InMemoryRecipeRepository,
    tdee_repository: InMemoryTdeeRepository,
    token_verifier: FakeTokenVerifier,
) -> AppContainer:
    meal_plan_service = MealPlanService(
        recipe_repository=recipe_repository,
        tdee_repository=tdee_repository,
        default_days=settings.default_plan_days,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        token_verifier=token_verifier,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
