"""
In-memory recipe list view-model.

Reference implementation of RecipeListViewModel that keeps recipes, filters and
the loaded ingredient catalog in process memory. The Streamlit app creates one
per browser session; tests use it to drive the presenter end to end.

Filtering rules (all case-insensitive, combined with AND):
- search query matches the recipe name or description
- category matches the recipe's beverage type
- favorites-only keeps favorite recipes
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from homebrew.catalog import (
    Ingredient,
    compute_ingredient_stats,
    compute_recipe_stats,
    load_ingredient_catalog,
)
from homebrew.models import (
    BeverageType,
    FilterState,
    IngredientStats,
    RecipeListSnapshot,
    RecipeListUiState,
    RecipeSummary,
)
from homebrew.store import RecipeListViewModel

logger = logging.getLogger(__name__)

INITIALIZATION_MESSAGE = "Loading mead brewing ingredients..."
DEFAULT_RECENT_LIMIT = 5


class RecipeNotFoundError(KeyError):
    """Raised when a recipe id is not known to the view-model."""


def matches_filters(recipe: RecipeSummary, filters: FilterState) -> bool:
    if filters.selected_category is not None and recipe.beverage_type != filters.selected_category:
        return False
    if filters.favorites_only and not recipe.is_favorite:
        return False
    if filters.has_search:
        needle = filters.search_query.strip().lower()
        haystack = f"{recipe.name} {recipe.description or ''}".lower()
        if needle not in haystack:
            return False
    return True


class InMemoryRecipeListViewModel(RecipeListViewModel):
    """
    Recipe list view-model backed by plain Python collections.

    Args:
        recipes: Initial recipes
        ingredient_loader: Returns the ingredient catalog; exceptions it raises are
            surfaced as the ui_state error string
        recent_limit: Number of recently updated recipes exposed as recent_recipes
        auto_initialize: Load ingredients immediately
    """

    def __init__(
        self,
        recipes: Optional[Iterable[RecipeSummary]] = None,
        ingredient_loader: Callable[[], Sequence[Ingredient]] = load_ingredient_catalog,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        auto_initialize: bool = False,
    ) -> None:
        super().__init__()
        self._recipes: Dict[str, RecipeSummary] = {r.id: r for r in (recipes or [])}
        self._ingredient_loader = ingredient_loader
        self._recent_limit = recent_limit
        self._ingredients: List[Ingredient] = []
        self._ingredient_stats: Optional[IngredientStats] = None
        self._filters = FilterState()
        self._ui_state = RecipeListUiState(recipe_stats=compute_recipe_stats(list(self._recipes.values())))

        if auto_initialize:
            self.force_initialization()

    # -- reactive state ----------------------------------------------------

    def snapshot(self) -> RecipeListSnapshot:
        all_recipes = list(self._recipes.values())
        visible = sorted(
            (r for r in all_recipes if matches_filters(r, self._filters)),
            key=lambda r: r.name.lower(),
        )
        recent = sorted(all_recipes, key=lambda r: r.updated_at, reverse=True)[: self._recent_limit]
        return RecipeListSnapshot(
            ui_state=self._ui_state,
            recipes=visible,
            recent_recipes=recent,
            filters=self._filters,
            ingredient_stats=self._ingredient_stats,
        )

    def _update_ui(self, **changes) -> None:
        self._ui_state = self._ui_state.model_copy(update=changes)
        self._emit()

    def _set_filters(self, filters: FilterState) -> None:
        if filters == self._filters:
            return
        self._filters = filters
        self._emit()

    def _recipes_changed(self) -> None:
        self._update_ui(recipe_stats=compute_recipe_stats(list(self._recipes.values())))

    # -- one-shot acknowledgments -----------------------------------------

    def clear_navigation_target(self) -> None:
        if self._ui_state.navigation_target is not None:
            self._update_ui(navigation_target=None)

    def clear_success_message(self) -> None:
        if self._ui_state.success_message is not None:
            self._update_ui(success_message=None)

    def clear_error(self) -> None:
        if self._ui_state.error is not None:
            self._update_ui(error=None)

    # -- ingredient status ------------------------------------------------

    def force_initialization(self) -> None:
        """
        Reload the ingredient catalog.

        Emits a loading state first, then either the loaded counts or an error
        message. Loader failures never propagate to the caller.
        """
        logger.info("Loading ingredient catalog")
        self._update_ui(is_loading=True, initialization_message=INITIALIZATION_MESSAGE, error=None)

        try:
            ingredients = list(self._ingredient_loader())
        except Exception as exc:
            logger.warning("Ingredient catalog failed to load: %s", exc)
            self._update_ui(
                is_loading=False,
                initialization_message=None,
                error=f"Failed to load ingredients: {exc}",
            )
            return

        self._ingredients = ingredients
        self._ingredient_stats = compute_ingredient_stats(ingredients)
        logger.info("Loaded %d ingredients", len(ingredients))
        self._update_ui(
            is_loading=False,
            initialization_message=None,
            has_ingredients=bool(ingredients),
            ingredient_count=len(ingredients),
            success_message=f"Loaded {len(ingredients)} ingredients",
        )

    def check_ingredient_status(self) -> None:
        self._ingredient_stats = compute_ingredient_stats(self._ingredients)
        count = len(self._ingredients)
        message = f"{count} ingredients available" if count else "No ingredients loaded"
        self._update_ui(has_ingredients=count > 0, ingredient_count=count, success_message=message)

    # -- filters ----------------------------------------------------------

    def toggle_favorites_filter(self) -> None:
        self._set_filters(self._filters.model_copy(update={"favorites_only": not self._filters.favorites_only}))

    def update_search_query(self, query: str) -> None:
        self._set_filters(self._filters.model_copy(update={"search_query": query}))

    def select_beverage_type(self, beverage_type: Optional[BeverageType]) -> None:
        self._set_filters(self._filters.model_copy(update={"selected_category": beverage_type}))

    def clear_filters(self) -> None:
        self._set_filters(FilterState())

    # -- recipes ----------------------------------------------------------

    def get_recipe(self, recipe_id: str) -> RecipeSummary:
        try:
            return self._recipes[recipe_id]
        except KeyError:
            raise RecipeNotFoundError(recipe_id) from None

    def toggle_favorite(self, recipe_id: str) -> None:
        """Flip a recipe's favorite flag; unknown ids surface as an error message."""
        recipe = self._recipes.get(recipe_id)
        if recipe is None:
            logger.warning("toggle_favorite on unknown recipe %s", recipe_id)
            self._update_ui(error=f"Recipe not found: {recipe_id}")
            return
        self._recipes[recipe_id] = recipe.model_copy(update={"is_favorite": not recipe.is_favorite})
        self._recipes_changed()

    def save_recipe(self, recipe: RecipeSummary, open_after_save: bool = False) -> None:
        """
        Insert or replace a recipe.

        Args:
            recipe: Recipe to store
            open_after_save: Publish the recipe id as navigation target
        """
        is_new = recipe.id not in self._recipes
        self._recipes[recipe.id] = recipe
        changes = {
            "recipe_stats": compute_recipe_stats(list(self._recipes.values())),
            "success_message": f"{'Created' if is_new else 'Saved'} {recipe.name}",
        }
        if open_after_save:
            changes["navigation_target"] = recipe.id
        self._update_ui(**changes)
