"""
Recipe list models for the HomeBrew Helper screen.

This module defines the read-only shapes the recipe list screen consumes from
its view-model. All models are immutable: the view-model publishes a new object
on every change, so subscribers can compare emissions by content.

# NOTE: The screen never mutates these objects. Every change goes through a
    view-model intent (toggle_favorite, update_search_query, ...), which then
    emits a fresh RecipeListSnapshot.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BeverageType(str, Enum):
    """Beverage category used to classify and filter recipes."""

    MEAD = "mead"
    CIDER = "cider"
    BEER = "beer"
    WINE = "wine"
    KOMBUCHA = "kombucha"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class RecipeSummary(BaseModel):
    """
    Summary of a recipe as shown in a list row.

    Only the fields a list card needs; full recipe details live behind the
    recipe detail screen.
    """
    id: str = Field(..., min_length=1, description="Unique recipe identifier")
    name: str = Field(..., description="Recipe display name")
    beverage_type: BeverageType = Field(..., description="Beverage category of the recipe")
    description: Optional[str] = Field(None, description="Short free-text description")
    batch_size_liters: Optional[float] = Field(None, ge=0, description="Batch size in liters")
    is_favorite: bool = Field(default=False, description="Whether the user marked this recipe as favorite")
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification time, used to order recent recipes",
    )

    model_config = ConfigDict(frozen=True)


class RecipeStats(BaseModel):
    """Aggregate counts over the user's recipes."""
    total_recipes: int = Field(..., ge=0)
    favorite_recipes: int = Field(..., ge=0)
    most_popular_type: BeverageType

    model_config = ConfigDict(frozen=True)


class IngredientStats(BaseModel):
    """Counts of loaded ingredients by category, plus their average cost."""
    total_ingredients: int = Field(default=0, ge=0)
    custom_ingredients: int = Field(default=0, ge=0)
    grain_count: int = Field(default=0, ge=0)
    hop_count: int = Field(default=0, ge=0)
    yeast_count: int = Field(default=0, ge=0)
    average_cost: Optional[float] = Field(None, ge=0, description="Average cost per ingredient, if any has a cost")

    model_config = ConfigDict(frozen=True)


class RecipeListUiState(BaseModel):
    """
    UI status published by the view-model.

    navigation_target, success_message and error are one-shot signals: the
    screen acts on each value once and acknowledges it through the matching
    clear_* intent.
    """
    is_loading: bool = False
    has_ingredients: bool = False
    ingredient_count: int = Field(default=0, ge=0)
    initialization_message: Optional[str] = None
    error: Optional[str] = None
    success_message: Optional[str] = None
    navigation_target: Optional[str] = Field(None, description="Recipe id the screen should navigate to")
    recipe_stats: Optional[RecipeStats] = None

    model_config = ConfigDict(frozen=True)


class FilterState(BaseModel):
    """Search and filter inputs. Owned by the view-model."""
    search_query: str = ""
    selected_category: Optional[BeverageType] = None
    favorites_only: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def has_search(self) -> bool:
        return bool(self.search_query.strip())

    @property
    def is_active(self) -> bool:
        """True when any filter dimension narrows the recipe list."""
        return self.has_search or self.selected_category is not None or self.favorites_only


class RecipeListSnapshot(BaseModel):
    """Everything the view-model exposes at one emission."""
    ui_state: RecipeListUiState = Field(default_factory=RecipeListUiState)
    recipes: List[RecipeSummary] = Field(default_factory=list)
    recent_recipes: List[RecipeSummary] = Field(default_factory=list)
    filters: FilterState = Field(default_factory=FilterState)
    ingredient_stats: Optional[IngredientStats] = None

    model_config = ConfigDict(frozen=True)
