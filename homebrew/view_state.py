"""
View-state projection for the recipe list screen.

Pure functions mapping a RecipeListSnapshot (plus the screen's local debug
toggle) onto what the screen shows. Nothing here talks to a UI toolkit, so the
rules can be exercised directly from tests.

Content selection order (first match wins):
- loading
- no recipes and no active filter  -> new-user empty state
- no recipes with a filter active  -> no-results state
- otherwise                        -> recipe list (with a recent section when unfiltered)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from homebrew.models import (
    BeverageType,
    FilterState,
    IngredientStats,
    RecipeListUiState,
    RecipeStats,
    RecipeSummary,
)

DEFAULT_LOADING_MESSAGE = "Loading..."
RECENT_RECIPES_LIMIT = 3

RECENT_SECTION_TITLE = "Recent Recipes"
ALL_SECTION_TITLE = "All Recipes"


# ---------------------------------------------------------------------------
# Primary content region
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadingContent:
    message: str


@dataclass(frozen=True)
class NewUserEmptyContent:
    """Welcome state for a user without any recipe yet."""
    has_ingredients: bool

    title = "Welcome to HomeBrewHelper!"

    @property
    def body(self) -> str:
        if self.has_ingredients:
            return "Start by creating your first mead recipe"
        return "First, let's load the mead brewing ingredients"

    @property
    def action_label(self) -> str:
        return "Create Recipe" if self.has_ingredients else "Load Ingredients"


@dataclass(frozen=True)
class NoResultsContent:
    filter_description: str

    title = "No recipes found"
    action_label = "Clear Filters"

    @property
    def body(self) -> str:
        return f"Try adjusting your search {self.filter_description}"


@dataclass(frozen=True)
class RecipeSection:
    title: Optional[str]
    recipes: Tuple[RecipeSummary, ...]


@dataclass(frozen=True)
class RecipeListContent:
    sections: Tuple[RecipeSection, ...]

    @property
    def recipe_ids(self) -> List[str]:
        """All row ids in display order (recent rows included)."""
        return [recipe.id for section in self.sections for recipe in section.recipes]


Content = Union[LoadingContent, NewUserEmptyContent, NoResultsContent, RecipeListContent]


def describe_active_filters(filters: FilterState) -> str:
    """
    Build a human-readable summary of the active filter dimensions.

    Examples:
        >>> describe_active_filters(FilterState(search_query="sack", favorites_only=True))
        'for "sack" favorites'
    """
    parts: List[str] = []
    if filters.has_search:
        parts.append(f'for "{filters.search_query}"')
    if filters.selected_category is not None:
        parts.append(f"in {filters.selected_category.display_name}")
    if filters.favorites_only:
        parts.append("favorites")
    return " ".join(parts)


def build_recipe_sections(
    recipes: Sequence[RecipeSummary],
    recent_recipes: Sequence[RecipeSummary],
    filters: FilterState,
) -> Tuple[RecipeSection, ...]:
    """
    Lay out the list rows.

    The recent section only appears while the list is unfiltered; it holds at
    most RECENT_RECIPES_LIMIT rows and is followed by an "All Recipes" header.
    """
    if filters.is_active or not recent_recipes:
        return (RecipeSection(title=None, recipes=tuple(recipes)),)

    return (
        RecipeSection(title=RECENT_SECTION_TITLE, recipes=tuple(recent_recipes[:RECENT_RECIPES_LIMIT])),
        RecipeSection(title=ALL_SECTION_TITLE, recipes=tuple(recipes)),
    )


def select_content(
    ui_state: RecipeListUiState,
    recipes: Sequence[RecipeSummary],
    recent_recipes: Sequence[RecipeSummary],
    filters: FilterState,
) -> Content:
    """Pick the primary content state for one render pass."""
    if ui_state.is_loading:
        return LoadingContent(message=ui_state.initialization_message or DEFAULT_LOADING_MESSAGE)

    if not recipes and not filters.is_active:
        return NewUserEmptyContent(has_ingredients=ui_state.has_ingredients)

    if not recipes:
        return NoResultsContent(filter_description=describe_active_filters(filters))

    return RecipeListContent(sections=build_recipe_sections(recipes, recent_recipes, filters))


# ---------------------------------------------------------------------------
# Status banner
# ---------------------------------------------------------------------------

class BannerTone(str, Enum):
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class StatusBanner:
    visible: bool
    tone: BannerTone
    title: str
    body: str
    show_progress: bool = False
    refresh_enabled: bool = True
    debug_text: Optional[str] = None


def format_average_cost(average_cost: Optional[float]) -> str:
    return f"{average_cost:.2f}" if average_cost is not None else "N/A"


def format_debug_info(stats: IngredientStats) -> str:
    """Fixed-format ingredient statistics dump shown in the debug panel."""
    lines = [
        f"Total: {stats.total_ingredients}",
        f"Custom: {stats.custom_ingredients}",
        f"Grains: {stats.grain_count}",
        f"Hops: {stats.hop_count}",
        f"Yeast: {stats.yeast_count}",
        f"Avg Cost: ${format_average_cost(stats.average_cost)}",
    ]
    return "\n".join(lines)


def should_show_banner(ui_state: RecipeListUiState, show_debug_info: bool) -> bool:
    return (
        ui_state.initialization_message is not None
        or not ui_state.has_ingredients
        or show_debug_info
    )


def build_status_banner(
    ui_state: RecipeListUiState,
    ingredient_stats: Optional[IngredientStats],
    show_debug_info: bool,
) -> StatusBanner:
    """
    Compute the ingredient status banner.

    Priority: error > initializing > has-ingredients > no-ingredients.
    The debug dump is attached only when the toggle is on and stats exist.
    """
    show_progress = False
    if ui_state.error is not None:
        tone = BannerTone.ERROR
        title = "Ingredient Loading Error"
        body = ui_state.error
    elif ui_state.initialization_message is not None:
        tone = BannerTone.INFO
        title = "Loading Ingredients"
        body = ui_state.initialization_message
        show_progress = True
    elif ui_state.has_ingredients:
        tone = BannerTone.SUCCESS
        title = "Mead Brewing Database"
        body = f"✓ {ui_state.ingredient_count} ingredients loaded for mead brewing"
    else:
        tone = BannerTone.ERROR
        title = "No Ingredients Loaded"
        body = "No ingredients available. Tap refresh to load mead brewing ingredients."

    debug_text = None
    if show_debug_info and ingredient_stats is not None:
        debug_text = format_debug_info(ingredient_stats)

    return StatusBanner(
        visible=should_show_banner(ui_state, show_debug_info),
        tone=tone,
        title=title,
        body=body,
        show_progress=show_progress,
        refresh_enabled=not ui_state.is_loading,
        debug_text=debug_text,
    )


# ---------------------------------------------------------------------------
# Filter summary row, filter sheet and stats card
# ---------------------------------------------------------------------------

class ChipKind(str, Enum):
    CATEGORY = "category"
    FAVORITES = "favorites"


@dataclass(frozen=True)
class FilterChip:
    kind: ChipKind
    label: str


@dataclass(frozen=True)
class FilterSummary:
    chips: Tuple[FilterChip, ...] = field(default_factory=tuple)
    clear_all_label: str = "Clear All"


def build_filter_summary(filters: FilterState) -> Optional[FilterSummary]:
    """
    Chips for the active category and favorites filters.

    A search query alone does not produce a summary row; it has its own search box.
    """
    chips: List[FilterChip] = []
    if filters.selected_category is not None:
        chips.append(FilterChip(kind=ChipKind.CATEGORY, label=filters.selected_category.display_name))
    if filters.favorites_only:
        chips.append(FilterChip(kind=ChipKind.FAVORITES, label="Favorites"))
    if not chips:
        return None
    return FilterSummary(chips=tuple(chips))


def filter_sheet_options() -> List[Tuple[str, Optional[BeverageType]]]:
    """Entries of the filter sheet; "All" maps to no category."""
    return [("All", None)] + [(bt.display_name, bt) for bt in BeverageType]


def build_stats_items(stats: Optional[RecipeStats]) -> List[dict]:
    if stats is None:
        return []
    return [
        {"label": "Total", "value": str(stats.total_recipes)},
        {"label": "Favorites", "value": str(stats.favorite_recipes)},
        {"label": "Most Popular", "value": stats.most_popular_type.display_name},
    ]
