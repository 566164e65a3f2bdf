"""
View-model contract for the recipe list screen.

This module defines the abstract base class every recipe list view-model must
implement. The screen only depends on this interface: it reads the current
snapshot, subscribes to changes, and forwards user intents.

All view-models must:
- Emit a new RecipeListSnapshot to every subscriber whenever their state changes
- Clear one-shot fields (navigation target, success message, error) when asked
- Own all filtering; subscribers never filter recipes themselves
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from homebrew.models import BeverageType, RecipeListSnapshot


Listener = Callable[[RecipeListSnapshot], None]
Unsubscribe = Callable[[], None]


class RecipeListViewModel(ABC):
    """
    Abstract base class for recipe list view-models.

    Subscription handling is shared; subclasses call _emit() after every state
    change. Emission is synchronous and happens on the caller's thread.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    # -- reactive state ----------------------------------------------------

    @abstractmethod
    def snapshot(self) -> RecipeListSnapshot:
        """Return the current state."""

    def subscribe(self, listener: Listener, emit_current: bool = True) -> Unsubscribe:
        """
        Register a listener for state changes.

        Args:
            listener: Called with each new snapshot
            emit_current: If True, the listener immediately receives the current snapshot

        Returns:
            Callable that removes the listener. Calling it twice is a no-op.
        """
        self._listeners.append(listener)
        if emit_current:
            listener(self.snapshot())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        current = self.snapshot()
        # Copy: listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(current)

    # -- one-shot acknowledgments -----------------------------------------

    @abstractmethod
    def clear_navigation_target(self) -> None: ...

    @abstractmethod
    def clear_success_message(self) -> None: ...

    @abstractmethod
    def clear_error(self) -> None: ...

    # -- ingredient status ------------------------------------------------

    @abstractmethod
    def force_initialization(self) -> None:
        """Reload the ingredient database."""

    @abstractmethod
    def check_ingredient_status(self) -> None:
        """Recount loaded ingredients without reloading them."""

    # -- filters ----------------------------------------------------------

    @abstractmethod
    def toggle_favorites_filter(self) -> None: ...

    @abstractmethod
    def update_search_query(self, query: str) -> None: ...

    @abstractmethod
    def select_beverage_type(self, beverage_type: Optional[BeverageType]) -> None: ...

    @abstractmethod
    def clear_filters(self) -> None:
        """Reset the search query, category and favorites-only filters."""

    # -- recipes ----------------------------------------------------------

    @abstractmethod
    def toggle_favorite(self, recipe_id: str) -> None: ...
