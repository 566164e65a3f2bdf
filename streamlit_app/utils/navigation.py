"""
Route handling for the Streamlit front end.

Navigating to a recipe, to the editor or to the new-recipe form stores a route
in st.session_state; app.py renders the recipe details or the recipe form for
it, each with a way back to the list.
"""

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from homebrew.presenter import NavigationCallbacks

ROUTE_KEY = "route"

ROUTE_LIST = "list"
ROUTE_RECIPE = "recipe"
ROUTE_EDIT = "edit"
ROUTE_NEW = "new"


@dataclass(frozen=True)
class Route:
    screen: str = ROUTE_LIST
    recipe_id: Optional[str] = None


def get_route() -> Route:
    route = st.session_state.get(ROUTE_KEY)
    if isinstance(route, Route):
        return route
    st.session_state[ROUTE_KEY] = Route()
    return st.session_state[ROUTE_KEY]


def set_route(route: Route) -> None:
    st.session_state[ROUTE_KEY] = route


def back_to_list() -> None:
    set_route(Route())


def session_navigation() -> NavigationCallbacks:
    """Navigation callbacks that switch the session's route."""
    return NavigationCallbacks(
        on_navigate_to_recipe=lambda recipe_id: set_route(Route(ROUTE_RECIPE, recipe_id)),
        on_navigate_to_new_recipe=lambda: set_route(Route(ROUTE_NEW)),
        on_navigate_to_edit_recipe=lambda recipe_id: set_route(Route(ROUTE_EDIT, recipe_id)),
    )
