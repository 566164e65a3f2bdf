"""
Tests for the recipe list view-state projection.

This module tests homebrew.view_state including:
- Content selection order (loading, new-user empty, no results, list)
- Active filter descriptions
- Recent/all recipe sections
- Status banner priority and debug dump
- Filter summary chips and stats items
"""

import pytest

from conftest import make_recipe
from homebrew.models import (
    BeverageType,
    FilterState,
    IngredientStats,
    RecipeListUiState,
    RecipeStats,
)
from homebrew.view_state import (
    ALL_SECTION_TITLE,
    DEFAULT_LOADING_MESSAGE,
    RECENT_SECTION_TITLE,
    BannerTone,
    ChipKind,
    LoadingContent,
    NewUserEmptyContent,
    NoResultsContent,
    RecipeListContent,
    build_filter_summary,
    build_stats_items,
    build_status_banner,
    describe_active_filters,
    filter_sheet_options,
    format_debug_info,
    select_content,
)

ACTIVE_FILTERS = [
    FilterState(search_query="sack"),
    FilterState(selected_category=BeverageType.CIDER),
    FilterState(favorites_only=True),
    FilterState(search_query="sack", selected_category=BeverageType.MEAD, favorites_only=True),
]


class TestSelectContent:
    """Test cases for primary content selection."""

    @pytest.mark.parametrize("filters", [FilterState()] + ACTIVE_FILTERS)
    def test_loading_wins_over_everything(self, filters, sample_recipes):
        """Loading is shown regardless of recipes and filters."""
        ui_state = RecipeListUiState(is_loading=True, initialization_message="Loading honey...")
        content = select_content(ui_state, sample_recipes, sample_recipes, filters)
        assert content == LoadingContent(message="Loading honey...")

    def test_loading_default_message(self):
        """Without an initialization message the default text is used."""
        content = select_content(RecipeListUiState(is_loading=True), [], [], FilterState())
        assert content.message == DEFAULT_LOADING_MESSAGE == "Loading..."

    def test_new_user_empty_without_filters(self):
        """No recipes and no filter active gives the welcome state."""
        content = select_content(RecipeListUiState(has_ingredients=True), [], [], FilterState())
        assert isinstance(content, NewUserEmptyContent)
        assert content.action_label == "Create Recipe"
        assert content.body == "Start by creating your first mead recipe"

    def test_new_user_empty_without_ingredients(self):
        """Without ingredients the welcome state offers loading them."""
        content = select_content(RecipeListUiState(has_ingredients=False), [], [], FilterState())
        assert isinstance(content, NewUserEmptyContent)
        assert content.action_label == "Load Ingredients"
        assert content.body == "First, let's load the mead brewing ingredients"

    def test_blank_query_counts_as_no_filter(self):
        """A whitespace-only query does not switch to the no-results state."""
        content = select_content(RecipeListUiState(), [], [], FilterState(search_query="   "))
        assert isinstance(content, NewUserEmptyContent)

    @pytest.mark.parametrize("filters", ACTIVE_FILTERS)
    def test_no_results_with_active_filters(self, filters):
        """No recipes with any active filter gives the no-results state."""
        content = select_content(RecipeListUiState(), [], [], filters)
        assert isinstance(content, NoResultsContent)
        assert content.action_label == "Clear Filters"

    def test_list_with_recent_section(self, sample_recipes):
        """Unfiltered list shows at most 3 recent recipes before the full list."""
        recent = list(reversed(sample_recipes))
        content = select_content(RecipeListUiState(), sample_recipes, recent, FilterState())

        assert isinstance(content, RecipeListContent)
        recent_section, all_section = content.sections
        assert recent_section.title == RECENT_SECTION_TITLE
        assert list(recent_section.recipes) == recent[:3]
        assert all_section.title == ALL_SECTION_TITLE
        assert list(all_section.recipes) == sample_recipes

    @pytest.mark.parametrize("recent_count", [1, 2, 3, 4])
    def test_recent_section_size(self, recent_count, sample_recipes):
        """The recent section holds min(3, len(recent)) rows."""
        recent = sample_recipes[:recent_count]
        content = select_content(RecipeListUiState(), sample_recipes, recent, FilterState())
        assert len(content.sections[0].recipes) == min(3, recent_count)

    def test_list_without_recent_recipes(self, sample_recipes):
        """No recent recipes means a single untitled section."""
        content = select_content(RecipeListUiState(), sample_recipes, [], FilterState())
        assert len(content.sections) == 1
        assert content.sections[0].title is None
        assert content.recipe_ids == [r.id for r in sample_recipes]

    @pytest.mark.parametrize("filters", ACTIVE_FILTERS)
    def test_filtered_list_hides_recent_section(self, filters, sample_recipes):
        """Recent recipes are only shown while the list is unfiltered."""
        content = select_content(RecipeListUiState(), sample_recipes[:2], sample_recipes, filters)
        assert len(content.sections) == 1
        assert content.recipe_ids == [r.id for r in sample_recipes[:2]]


class TestDescribeActiveFilters:
    """Test cases for the no-results filter description."""

    def test_query_only(self):
        assert describe_active_filters(FilterState(search_query="sack")) == 'for "sack"'

    def test_category_only(self):
        assert describe_active_filters(FilterState(selected_category=BeverageType.CIDER)) == "in Cider"

    def test_favorites_only(self):
        assert describe_active_filters(FilterState(favorites_only=True)) == "favorites"

    def test_all_dimensions_in_order(self):
        filters = FilterState(search_query="sack", selected_category=BeverageType.MEAD, favorites_only=True)
        assert describe_active_filters(filters) == 'for "sack" in Mead favorites'

    def test_no_results_body(self):
        content = NoResultsContent(filter_description=describe_active_filters(FilterState(favorites_only=True)))
        assert content.body == "Try adjusting your search favorites"


class TestStatusBanner:
    """Test cases for the ingredient status banner."""

    def test_hidden_when_ingredients_loaded(self):
        """Loaded ingredients, no message and no debug toggle hide the banner."""
        banner = build_status_banner(RecipeListUiState(has_ingredients=True, ingredient_count=24), None, False)
        assert banner.visible is False
        assert banner.tone is BannerTone.SUCCESS
        assert banner.body == "✓ 24 ingredients loaded for mead brewing"

    def test_visible_without_ingredients(self):
        banner = build_status_banner(RecipeListUiState(), None, False)
        assert banner.visible is True
        assert banner.tone is BannerTone.ERROR
        assert banner.title == "No Ingredients Loaded"

    def test_visible_with_initialization_message(self):
        ui_state = RecipeListUiState(has_ingredients=True, initialization_message="Loading...", is_loading=True)
        banner = build_status_banner(ui_state, None, False)
        assert banner.visible is True
        assert banner.tone is BannerTone.INFO
        assert banner.title == "Loading Ingredients"
        assert banner.show_progress is True
        assert banner.refresh_enabled is False

    def test_visible_with_debug_toggle(self):
        banner = build_status_banner(RecipeListUiState(has_ingredients=True), None, True)
        assert banner.visible is True
        assert banner.title == "Mead Brewing Database"

    def test_error_has_priority(self):
        """Error beats the initialization message and loaded ingredients."""
        ui_state = RecipeListUiState(
            has_ingredients=True, initialization_message="Loading...", error="disk on fire"
        )
        banner = build_status_banner(ui_state, None, False)
        assert banner.tone is BannerTone.ERROR
        assert banner.title == "Ingredient Loading Error"
        assert banner.body == "disk on fire"
        assert banner.show_progress is False

    def test_debug_text_requires_toggle_and_stats(self):
        stats = IngredientStats(total_ingredients=3)
        assert build_status_banner(RecipeListUiState(), stats, False).debug_text is None
        assert build_status_banner(RecipeListUiState(), None, True).debug_text is None
        assert build_status_banner(RecipeListUiState(), stats, True).debug_text is not None

    def test_debug_dump_format(self):
        stats = IngredientStats(
            total_ingredients=24, custom_ingredients=1, grain_count=3,
            hop_count=2, yeast_count=5, average_cost=4.5,
        )
        assert format_debug_info(stats) == (
            "Total: 24\nCustom: 1\nGrains: 3\nHops: 2\nYeast: 5\nAvg Cost: $4.50"
        )

    def test_debug_dump_without_cost(self):
        assert format_debug_info(IngredientStats()).endswith("Avg Cost: $N/A")


class TestFilterSummary:
    """Test cases for the active filter chips row."""

    def test_hidden_without_category_or_favorites(self):
        assert build_filter_summary(FilterState()) is None
        assert build_filter_summary(FilterState(search_query="sack")) is None

    def test_category_chip(self):
        summary = build_filter_summary(FilterState(selected_category=BeverageType.WINE))
        assert [(c.kind, c.label) for c in summary.chips] == [(ChipKind.CATEGORY, "Wine")]
        assert summary.clear_all_label == "Clear All"

    def test_both_chips(self):
        summary = build_filter_summary(FilterState(selected_category=BeverageType.MEAD, favorites_only=True))
        assert [c.kind for c in summary.chips] == [ChipKind.CATEGORY, ChipKind.FAVORITES]
        assert summary.chips[1].label == "Favorites"


class TestSheetAndStats:
    """Test cases for filter sheet entries and the stats card."""

    def test_sheet_options_start_with_all(self):
        options = filter_sheet_options()
        assert options[0] == ("All", None)
        assert [bt for _, bt in options[1:]] == list(BeverageType)

    def test_stats_items(self):
        stats = RecipeStats(total_recipes=5, favorite_recipes=2, most_popular_type=BeverageType.MEAD)
        assert build_stats_items(stats) == [
            {"label": "Total", "value": "5"},
            {"label": "Favorites", "value": "2"},
            {"label": "Most Popular", "value": "Mead"},
        ]

    def test_no_stats(self):
        assert build_stats_items(None) == []


def test_recipe_ids_include_recent_rows():
    """Recent rows repeat ids from the full list."""
    recipes = [make_recipe("a"), make_recipe("b")]
    content = select_content(RecipeListUiState(), recipes, [recipes[1]], FilterState())
    assert content.recipe_ids == ["b", "a", "b"]
