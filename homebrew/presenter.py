"""
Recipe list presenter.

RecipeListPresenter sits between a RecipeListViewModel and whatever draws the
screen. It subscribes to the view-model, rebuilds an immutable
RecipeListScreen on every emission, hands one-shot signals to the host exactly
once, and forwards user intents to the view-model or the navigation callbacks
without transforming them.

Local state is limited to two UI flags: filter-sheet visibility and debug-panel
visibility. Recipes are never filtered here.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from homebrew import events
from homebrew.models import BeverageType, RecipeListSnapshot
from homebrew.signals import Signal, SignalKind, SignalTracker
from homebrew.store import RecipeListViewModel, Unsubscribe
from homebrew.view_state import (
    ChipKind,
    Content,
    FilterChip,
    FilterSummary,
    StatusBanner,
    build_filter_summary,
    build_stats_items,
    build_status_banner,
    filter_sheet_options,
    select_content,
)

logger = logging.getLogger(__name__)

APP_TITLE = "HomeBrewHelper"


@dataclass
class NavigationCallbacks:
    """Navigation collaborator; each callback leaves the recipe list."""
    on_navigate_to_recipe: Callable[[str], None]
    on_navigate_to_new_recipe: Callable[[], None]
    on_navigate_to_edit_recipe: Callable[[str], None]


@dataclass(frozen=True)
class TopBar:
    has_ingredients: bool
    refresh_enabled: bool
    favorites_only: bool
    title: str = APP_TITLE

    @property
    def status_icon(self) -> str:
        return "✓" if self.has_ingredients else "⚠"

    @property
    def favorites_action_label(self) -> str:
        return "Show all recipes" if self.favorites_only else "Show favorites only"


@dataclass(frozen=True)
class RecipeListScreen:
    """Everything needed to draw one render pass of the recipe list."""
    top_bar: TopBar
    banner: StatusBanner
    content: Content
    search_query: Optional[str] = None
    filter_summary: Optional[FilterSummary] = None
    stats_items: List[dict] = field(default_factory=list)
    show_filter_sheet: bool = False
    selected_category: Optional[BeverageType] = None
    sheet_options: List[Tuple[str, Optional[BeverageType]]] = field(default_factory=list)


def build_screen(
    snapshot: RecipeListSnapshot,
    show_debug_info: bool = False,
    show_filter_sheet: bool = False,
) -> RecipeListScreen:
    """Project a view-model snapshot onto a screen description."""
    ui_state = snapshot.ui_state
    filters = snapshot.filters
    return RecipeListScreen(
        top_bar=TopBar(
            has_ingredients=ui_state.has_ingredients,
            refresh_enabled=not ui_state.is_loading,
            favorites_only=filters.favorites_only,
        ),
        banner=build_status_banner(ui_state, snapshot.ingredient_stats, show_debug_info),
        content=select_content(ui_state, snapshot.recipes, snapshot.recent_recipes, filters),
        search_query=filters.search_query if filters.has_search else None,
        filter_summary=build_filter_summary(filters),
        stats_items=build_stats_items(ui_state.recipe_stats),
        show_filter_sheet=show_filter_sheet,
        selected_category=filters.selected_category,
        sheet_options=filter_sheet_options() if show_filter_sheet else [],
    )


class RecipeListPresenter:
    """
    Presenter for the recipe list screen.

    Args:
        view_model: State owner; receives every forwarded intent
        navigation: Navigation callbacks
        on_render: Called with each new RecipeListScreen
        on_signal: Called once per success or error signal, before it is acknowledged
        session_id: Optional id attached to intent log records
        show_debug_info: Initial debug-panel visibility
    """

    def __init__(
        self,
        view_model: RecipeListViewModel,
        navigation: NavigationCallbacks,
        on_render: Optional[Callable[[RecipeListScreen], None]] = None,
        on_signal: Optional[Callable[[Signal], None]] = None,
        session_id: Optional[str] = None,
        show_debug_info: bool = False,
    ) -> None:
        self._view_model = view_model
        self._navigation = navigation
        self._on_render = on_render
        self._on_signal = on_signal
        self._session_id = session_id
        self._tracker = SignalTracker()
        self._unsubscribe: Optional[Unsubscribe] = None
        self._snapshot: Optional[RecipeListSnapshot] = None
        self._screen: Optional[RecipeListScreen] = None
        self.show_filter_sheet = False
        self.show_debug_info = show_debug_info

    # -- lifecycle --------------------------------------------------------

    def start(self) -> None:
        """Subscribe to the view-model; renders the current state immediately."""
        if self._unsubscribe is None:
            self._unsubscribe = self._view_model.subscribe(self._on_snapshot)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def screen(self) -> RecipeListScreen:
        if self._screen is None:
            raise RuntimeError("RecipeListPresenter.start() must be called before reading the screen")
        return self._screen

    def _on_snapshot(self, snapshot: RecipeListSnapshot) -> None:
        self._snapshot = snapshot
        # Acknowledging a signal makes the view-model emit again, so this
        # method can re-enter; the tracker keeps delivery at most once.
        for signal in self._tracker.collect(snapshot.ui_state):
            self._deliver(signal)
        if self._snapshot is snapshot:
            self._render()

    def _deliver(self, signal: Signal) -> None:
        logger.debug("Delivering %s signal: %s", signal.kind.value, signal.value)
        if signal.kind is SignalKind.NAVIGATION:
            self._navigation.on_navigate_to_recipe(signal.value)
            self._view_model.clear_navigation_target()
        elif signal.kind is SignalKind.SUCCESS:
            if self._on_signal is not None:
                self._on_signal(signal)
            self._view_model.clear_success_message()
        else:
            if self._on_signal is not None:
                self._on_signal(signal)
            self._view_model.clear_error()

    def _render(self) -> None:
        if self._snapshot is None:
            return
        self._screen = build_screen(self._snapshot, self.show_debug_info, self.show_filter_sheet)
        if self._on_render is not None:
            self._on_render(self._screen)

    # -- navigation intents -----------------------------------------------

    def open_recipe(self, recipe_id: str) -> None:
        events.log_recipe_opened(self._session_id, recipe_id)
        self._navigation.on_navigate_to_recipe(recipe_id)

    def edit_recipe(self, recipe_id: str) -> None:
        events.log_recipe_opened(self._session_id, recipe_id, mode="edit")
        self._navigation.on_navigate_to_edit_recipe(recipe_id)

    def create_recipe(self) -> None:
        events.log_recipe_opened(self._session_id, "", mode="new")
        self._navigation.on_navigate_to_new_recipe()

    # -- view-model intents -----------------------------------------------

    def toggle_favorite(self, recipe_id: str) -> None:
        events.log_favorite_toggled(self._session_id, recipe_id)
        self._view_model.toggle_favorite(recipe_id)

    def update_search_query(self, query: str) -> None:
        events.log_search_updated(self._session_id, query)
        self._view_model.update_search_query(query)

    def clear_search(self) -> None:
        self.update_search_query("")

    def toggle_favorites_filter(self) -> None:
        events.log_filter_changed(self._session_id, favorites_only=not self._favorites_only())
        self._view_model.toggle_favorites_filter()

    def select_beverage_type(self, beverage_type: Optional[BeverageType]) -> None:
        events.log_filter_changed(
            self._session_id,
            beverage_type=beverage_type.value if beverage_type else None,
            cleared=beverage_type is None,
        )
        self._view_model.select_beverage_type(beverage_type)

    def clear_filters(self) -> None:
        events.log_filter_changed(self._session_id, cleared=True)
        self._view_model.clear_filters()

    def remove_filter_chip(self, chip: FilterChip) -> None:
        if chip.kind is ChipKind.CATEGORY:
            self.select_beverage_type(None)
        else:
            self.toggle_favorites_filter()

    def force_refresh(self) -> None:
        events.log_refresh_requested(self._session_id, "force_initialization")
        self._view_model.force_initialization()

    def check_status(self) -> None:
        events.log_refresh_requested(self._session_id, "check_status")
        self._view_model.check_ingredient_status()

    def _favorites_only(self) -> bool:
        return self._snapshot is not None and self._snapshot.filters.favorites_only

    # -- local UI flags ---------------------------------------------------

    def toggle_debug_info(self) -> None:
        self.show_debug_info = not self.show_debug_info
        self._render()

    def open_filter_sheet(self) -> None:
        self.show_filter_sheet = True
        self._render()

    def dismiss_filter_sheet(self) -> None:
        self.show_filter_sheet = False
        self._render()

    def select_category_from_sheet(self, beverage_type: Optional[BeverageType]) -> None:
        """Apply the sheet choice and dismiss the sheet in one action."""
        self.show_filter_sheet = False
        self.select_beverage_type(beverage_type)
        # select_beverage_type only re-renders when the filter changed.
        self._render()
