"""
Minimal recipe editor for the New and Edit routes.

Saving goes through the view-model with open_after_save=True, so the recipe
is opened by the presenter's navigation signal like any other navigation.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Optional

import streamlit as st

from homebrew.models import BeverageType, RecipeSummary
from homebrew.view_model import InMemoryRecipeListViewModel
from ui.feedback import show_error

SAVE_LABEL = "💾 Save recipe"


def new_recipe_id(name: str) -> str:
    """Slug of the name plus a short random suffix, e.g. "sack-mead-3f9a1c"."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "recipe"
    return f"{slug}-{uuid.uuid4().hex[:6]}"


def render_recipe_form(view_model: InMemoryRecipeListViewModel, recipe: Optional[RecipeSummary] = None) -> None:
    """
    Render the editor form and save on submit.

    Args:
        view_model: Receives the saved recipe
        recipe: Recipe to edit; None creates a new one
    """
    types = list(BeverageType)
    key_suffix = recipe.id if recipe else "new"

    with st.form(f"recipe_form_{key_suffix}", clear_on_submit=False):
        name = st.text_input("Name", value=recipe.name if recipe else "", key=f"recipe_name_{key_suffix}")
        beverage_type = st.selectbox(
            "Beverage type",
            types,
            index=types.index(recipe.beverage_type) if recipe else 0,
            format_func=lambda bt: bt.display_name,
            key=f"recipe_type_{key_suffix}",
        )
        description = st.text_area(
            "Description",
            value=(recipe.description or "") if recipe else "",
            key=f"recipe_description_{key_suffix}",
        )
        batch_size = st.number_input(
            "Batch size (L)",
            min_value=0.0,
            value=float(recipe.batch_size_liters or 0.0) if recipe else 0.0,
            step=0.5,
            key=f"recipe_batch_{key_suffix}",
        )
        submitted = st.form_submit_button(SAVE_LABEL, type="primary")

    if not submitted:
        return
    if not name.strip():
        show_error("Recipe name is required")
        return

    saved = RecipeSummary(
        id=recipe.id if recipe else new_recipe_id(name),
        name=name.strip(),
        beverage_type=beverage_type,
        description=description.strip() or None,
        batch_size_liters=batch_size or None,
        is_favorite=recipe.is_favorite if recipe else False,
        updated_at=datetime.now(timezone.utc),
    )
    view_model.save_recipe(saved, open_after_save=True)
    st.rerun()
