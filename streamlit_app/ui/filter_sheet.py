"""
Filter sheet for the recipe list.

A modal dialog listing every beverage category plus "All". Picking an entry
applies the category and closes the dialog in the same click.
"""

from typing import List, Optional, Tuple

import streamlit as st

from homebrew.models import BeverageType
from homebrew.presenter import RecipeListPresenter


def render_sheet_options(
    presenter: RecipeListPresenter,
    options: List[Tuple[str, Optional[BeverageType]]],
    selected: Optional[BeverageType],
) -> None:
    """Beverage type options; picking one applies it and dismisses the sheet."""
    st.markdown("#### Beverage Type")
    cols = st.columns(3)
    for idx, (label, beverage_type) in enumerate(options):
        is_selected = beverage_type == selected
        if cols[idx % 3].button(
            f"● {label}" if is_selected else label,
            key=f"sheet_option_{label}",
            type="primary" if is_selected else "secondary",
            use_container_width=True,
        ):
            presenter.select_category_from_sheet(beverage_type)
            st.rerun()


filter_sheet = st.dialog("Filter Recipes")(render_sheet_options)


def render_filter_sheet(presenter: RecipeListPresenter, options, selected: Optional[BeverageType]) -> None:
    """
    Open the dialog for this run.

    st.dialog owns visibility once opened (closing it with ✕ does not rerun the
    script), so the presenter flag is reset right after opening.
    """
    filter_sheet(presenter, options, selected)
    presenter.dismiss_filter_sheet()
