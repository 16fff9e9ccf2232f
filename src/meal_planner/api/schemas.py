"""Pydantic models for meal plan requests."""

from pydantic import BaseModel, ConfigDict, Field

MAX_PLAN_DAYS = 31


class GenerateMealPlanRequest(BaseModel):
    """Body of a meal plan generation request.

    Diet type and goal are free-form: they filter the recipe store as given,
    and a goal other than weight-loss or muscle-gain keeps the TDEE target.
    """

    model_config = ConfigDict(populate_by_name=True)

    diet_type: str | None = Field(default=None, alias="dietType")
    goal: str | None = None
    days: int | None = Field(default=None, ge=1, le=MAX_PLAN_DAYS)
