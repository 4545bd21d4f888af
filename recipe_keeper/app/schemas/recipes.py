# recipe_keeper/app/schemas/recipes.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from recipe_keeper.app.domain.models import Ingredient, Recipe, RecipeDraft, SourceType

SourceTypeName = Literal["own", "saved"]


class IngredientItem(BaseModel):
    id: str
    name: str
    displayName: str
    amount: Optional[float] = None
    unit: Optional[str] = None

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientItem":
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            displayName=ingredient.display_name,
            amount=ingredient.amount,
            unit=ingredient.unit,
        )


class RecipeResponse(BaseModel):
    id: str
    title: str
    ownerId: str
    sourceType: SourceTypeName
    sourceRecipeId: Optional[str] = None
    ingredients: list[IngredientItem] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    photoUrls: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    createdAt: str
    updatedAt: str

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            title=recipe.title,
            ownerId=recipe.owner_id,
            sourceType=recipe.source_type.value,
            sourceRecipeId=recipe.source_recipe_id,
            ingredients=[IngredientItem.from_domain(item) for item in recipe.ingredients],
            instructions=list(recipe.instructions),
            photoUrls=list(recipe.photo_urls),
            tags=list(recipe.tags),
            createdAt=recipe.created_at,
            updatedAt=recipe.updated_at,
        )


class RecipeCreate(BaseModel):
    # Everything optional: the validator reports missing fields itself.
    title: Optional[str] = None
    ingredientStrings: Optional[list[str]] = None
    instructions: Optional[list[str]] = None
    photoUrls: Optional[list[str]] = None
    tags: Optional[list[str]] = None

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            title=self.title,
            ingredient_strings=self.ingredientStrings,
            instructions=self.instructions,
            photo_urls=self.photoUrls,
            tags=self.tags,
        )


class IngredientIn(BaseModel):
    id: str = ""
    name: str = ""
    displayName: str = ""
    amount: Optional[float] = None
    unit: Optional[str] = None

    def to_domain(self) -> Ingredient:
        return Ingredient(
            id=self.id,
            name=self.name,
            display_name=self.displayName,
            amount=self.amount,
            unit=self.unit,
        )


class SourceRecipeIn(BaseModel):
    """A recipe owned by someone else; its content is copied as-is."""
    id: Optional[str] = None
    title: str = ""
    ownerId: str = ""
    sourceType: SourceTypeName = "own"
    sourceRecipeId: Optional[str] = None
    ingredients: list[IngredientIn] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    photoUrls: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    createdAt: str = ""
    updatedAt: str = ""

    def to_domain(self) -> Recipe:
        return Recipe(
            id=self.id or "",
            title=self.title,
            owner_id=self.ownerId,
            source_type=SourceType(self.sourceType),
            source_recipe_id=self.sourceRecipeId,
            ingredients=[item.to_domain() for item in self.ingredients],
            instructions=list(self.instructions),
            photo_urls=list(self.photoUrls),
            tags=list(self.tags),
            created_at=self.createdAt,
            updated_at=self.updatedAt,
        )


class SaveFromUserRequest(BaseModel):
    sourceRecipe: Optional[SourceRecipeIn] = None
    sourceRecipeId: Optional[str] = None


class RecipeErrorDetail(BaseModel):
    message: str
    errors: Optional[dict[str, str]] = None


class RecipeErrorResponse(BaseModel):
    detail: RecipeErrorDetail
