"""Errors raised while generating meal plans."""


class MealPlanError(Exception):
    """Base class for expected meal plan failures."""


class TdeeNotFoundError(MealPlanError):
    """The user has no TDEE baseline yet."""

    def __init__(self) -> None:
        super().__init__(
            "TDEE data not found. Please calculate your TDEE first "
            "using the Buono Bot."
        )


class NoRecipesFoundError(MealPlanError):
    """No recipe matches the requested filters."""

    def __init__(self) -> None:
        super().__init__(
            "No recipes found matching your preferences. "
            "Please try different filters."
        )
