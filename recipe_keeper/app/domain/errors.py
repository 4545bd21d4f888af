from __future__ import annotations


class RecipeError(Exception):
    pass


class RecipeValidationError(RecipeError):
    def __init__(self, errors: dict[str, str], message: str = "Invalid recipe"):
        super().__init__(message)
        self.errors = dict(errors)

    @property
    def fields(self) -> list[str]:
        return sorted(self.errors)


class MissingSourceIdError(RecipeError):
    def __init__(self, message: str = "sourceRecipe with a valid id is required"):
        super().__init__(message)


class RecipeNotFoundError(RecipeError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class RecipeStoreError(RecipeError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Recipe store error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class RecipeStoreConfigurationError(RecipeError):
    def __init__(self, errors: list[str]):
        super().__init__(f"Recipe store configuration errors: {', '.join(errors)}")
        self.errors = errors
