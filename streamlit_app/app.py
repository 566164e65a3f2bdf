"""
HomeBrew Helper - Streamlit Frontend Main Entry Point.

Sets up the page configuration and renders the recipe list screen, the recipe
details, or the recipe form for whatever route the list navigated to.

Run with:
    streamlit run streamlit_app/app.py

Open with `?q=<text>` to start the session with a search query.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so the homebrew package imports without installation
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before anything else reads the environment
import homebrew.config  # noqa: F401

import streamlit as st

from homebrew.logging_config import configure_logging
from ui.filter_sheet import render_filter_sheet
from ui.recipe_form import render_recipe_form
from ui.recipe_list import render_notices, render_recipe_list_screen
from ui.styles import load_global_styles
from utils.navigation import ROUTE_EDIT, ROUTE_NEW, ROUTE_RECIPE, back_to_list, get_route
from utils.session import drain_notices, get_presenter, get_view_model

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="HomeBrewHelper",
    page_icon="🍯",
    layout="centered",
)

load_global_styles()

presenter = get_presenter()
route = get_route()

if route.screen == ROUTE_RECIPE:
    recipe = get_view_model().get_recipe(route.recipe_id)
    st.markdown(f"# {recipe.name}")
    st.caption(recipe.beverage_type.display_name)
    if recipe.description:
        st.write(recipe.description)
    if recipe.batch_size_liters is not None:
        st.caption(f"Batch size: {recipe.batch_size_liters:g} L")
    back_col, edit_col = st.columns(2)
    back_col.button("← Back to recipes", on_click=back_to_list)
    edit_col.button("✏️ Edit", key="detail_edit", on_click=presenter.edit_recipe, args=(recipe.id,))
elif route.screen == ROUTE_EDIT:
    view_model = get_view_model()
    recipe = view_model.get_recipe(route.recipe_id)
    st.markdown(f"# Edit {recipe.name}")
    render_recipe_form(view_model, recipe)
    st.button("← Back to recipes", on_click=back_to_list)
elif route.screen == ROUTE_NEW:
    st.markdown("# New Recipe")
    render_recipe_form(get_view_model())
    st.button("← Back to recipes", on_click=back_to_list)
else:
    screen = presenter.screen
    render_notices(drain_notices())
    render_recipe_list_screen(screen, presenter)
    if screen.show_filter_sheet:
        render_filter_sheet(presenter, screen.sheet_options, screen.selected_category)
