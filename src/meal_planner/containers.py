"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.supabase_auth_client import (
    HttpxSupabaseAuthClient,
    TokenVerifier,
)
from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.adapters.supabase_tdee_repository import SupabaseTdeeRepository
from meal_planner.config import Settings
from meal_planner.services.meal_plans import MealPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_verifier: TokenVerifier
    meal_plan_service: MealPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recipe_repository = SupabaseRecipeRepository(
        supabase_client, table_name=resolved_settings.recipes_table
    )
    tdee_repository = SupabaseTdeeRepository(
        supabase_client, table_name=resolved_settings.tdee_table
    )
    meal_plan_service = MealPlanService(
        recipe_repository=recipe_repository,
        tdee_repository=tdee_repository,
        default_days=resolved_settings.default_plan_days,
    )
    auth_client = HttpxSupabaseAuthClient.create(
        base_url=resolved_settings.supabase_url,
        api_key=resolved_settings.auth_api_key,
    )

    async def close_resources() -> None:
        await auth_client.close()

    return AppContainer(
        settings=resolved_settings,
        token_verifier=auth_client,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
