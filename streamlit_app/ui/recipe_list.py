"""
Recipe list screen widgets.

Draws a RecipeListScreen produced by homebrew.presenter with Streamlit
primitives. Every widget forwards its intent to the presenter through an
on_click/on_change callback, so the view-model has emitted (and the presenter
has re-rendered) before Streamlit reruns the script.

Nothing in this module decides what to show; those rules live in
homebrew.view_state.
"""

from typing import Optional

import streamlit as st

from homebrew.models import RecipeSummary
from homebrew.presenter import RecipeListPresenter, RecipeListScreen
from homebrew.signals import Signal, SignalKind
from homebrew.view_state import (
    Content,
    FilterSummary,
    LoadingContent,
    NewUserEmptyContent,
    NoResultsContent,
    RecipeListContent,
    StatusBanner,
)
from ui.feedback import show_empty_state, show_error, show_loading
from ui.layout import kpi_row, page_header, section_title

SEARCH_BOX_KEY = "recipe_search_box"


def render_notices(notices: list[Signal]) -> None:
    """Show delivered error signals once; success messages are only acknowledged."""
    for notice in notices:
        if notice.kind is SignalKind.ERROR:
            show_error(notice.value)


def render_top_bar(screen: RecipeListScreen, presenter: RecipeListPresenter) -> None:
    top_bar = screen.top_bar

    def actions() -> None:
        cols = st.columns(6)
        cols[0].button(
            top_bar.status_icon,
            key="topbar_status",
            help="Ingredient status",
            on_click=presenter.toggle_debug_info,
        )
        cols[1].button(
            "🔄",
            key="topbar_refresh",
            help="Refresh ingredients",
            disabled=not top_bar.refresh_enabled,
            on_click=presenter.force_refresh,
        )
        cols[2].button(
            "❤️" if top_bar.favorites_only else "🤍",
            key="topbar_favorites",
            help=top_bar.favorites_action_label,
            on_click=presenter.toggle_favorites_filter,
        )
        cols[3].button("⚙️", key="topbar_filter", help="Filter recipes", on_click=presenter.open_filter_sheet)
        # No search toggle yet; the search box appears while a query is set (?q=...).
        cols[4].button("🔍", key="topbar_search", help="Search recipes", disabled=True)
        cols[5].button(
            "➕",
            key="topbar_create",
            help="Create new recipe",
            type="primary",
            on_click=presenter.create_recipe,
        )

    page_header(top_bar.title, actions)


def render_status_banner(banner: StatusBanner, presenter: RecipeListPresenter) -> None:
    if not banner.visible:
        return

    with st.container(border=True):
        title_col, check_col, refresh_col = st.columns([6, 1, 1])
        with title_col:
            st.markdown(f"**{banner.title}**")
        check_col.button("ℹ️", key="banner_check", help="Check status", on_click=presenter.check_status)
        refresh_col.button(
            "🔄",
            key="banner_refresh",
            help="Refresh ingredients",
            disabled=not banner.refresh_enabled,
            on_click=presenter.force_refresh,
        )

        # BannerTone values name the matching st alert: error, info, success.
        alert = getattr(st, banner.tone.value)
        alert(banner.body, icon="⏳" if banner.show_progress else None)

        if banner.debug_text is not None:
            st.divider()
            st.markdown("**Debug Information**")
            st.code(banner.debug_text, language=None)


def render_search_box(query: Optional[str], presenter: RecipeListPresenter) -> None:
    if query is None:
        return

    def on_change() -> None:
        presenter.update_search_query(st.session_state[SEARCH_BOX_KEY])

    box_col, clear_col = st.columns([8, 1])
    with box_col:
        st.text_input(
            "Search recipes",
            value=query,
            key=SEARCH_BOX_KEY,
            placeholder="Search recipes...",
            label_visibility="collapsed",
            on_change=on_change,
        )
    clear_col.button("✕", key="search_clear", help="Clear search", on_click=presenter.clear_search)


def render_filter_summary(summary: Optional[FilterSummary], presenter: RecipeListPresenter) -> None:
    if summary is None:
        return

    cols = st.columns([1] + [1] * len(summary.chips) + [1])
    cols[0].caption("Filters:")
    for idx, chip in enumerate(summary.chips, start=1):
        cols[idx].button(
            f"{chip.label} ✕",
            key=f"chip_{chip.kind.value}",
            help="Remove filter",
            on_click=presenter.remove_filter_chip,
            args=(chip,),
        )
    cols[-1].button(summary.clear_all_label, key="chip_clear_all", on_click=presenter.clear_filters)


def render_recipe_card(recipe: RecipeSummary, presenter: RecipeListPresenter, key_prefix: str) -> None:
    """
    Render a compact recipe row.

    Args:
        recipe: Recipe to display
        presenter: Receives open, favorite and edit intents
        key_prefix: Keeps widget keys unique when a recipe appears in several sections
    """
    with st.container(border=True):
        info_col, fav_col, edit_col = st.columns([6, 1, 1])
        with info_col:
            st.button(
                f"**{recipe.name}**",
                key=f"{key_prefix}_open_{recipe.id}",
                type="tertiary",
                on_click=presenter.open_recipe,
                args=(recipe.id,),
            )
            meta = f"<span class='hbh-beverage-tag'>{recipe.beverage_type.display_name}</span>"
            if recipe.batch_size_liters is not None:
                meta += f" · {recipe.batch_size_liters:g} L"
            st.markdown(meta, unsafe_allow_html=True)
            if recipe.description:
                st.caption(recipe.description)
        fav_col.button(
            "❤️" if recipe.is_favorite else "🤍",
            key=f"{key_prefix}_fav_{recipe.id}",
            help="Toggle favorite",
            on_click=presenter.toggle_favorite,
            args=(recipe.id,),
        )
        edit_col.button(
            "✏️",
            key=f"{key_prefix}_edit_{recipe.id}",
            help="Edit recipe",
            on_click=presenter.edit_recipe,
            args=(recipe.id,),
        )


def render_content(content: Content, presenter: RecipeListPresenter) -> None:
    if isinstance(content, LoadingContent):
        show_loading(content.message)
    elif isinstance(content, NewUserEmptyContent):
        show_empty_state(
            title=content.title,
            subtitle=content.body,
            action_label=content.action_label,
            on_action=presenter.create_recipe if content.has_ingredients else presenter.force_refresh,
            icon="🍯",
            key="empty_state_action",
        )
    elif isinstance(content, NoResultsContent):
        show_empty_state(
            title=content.title,
            subtitle=content.body,
            action_label=content.action_label,
            on_action=presenter.clear_filters,
            icon="🔎",
            key="no_results_action",
        )
    elif isinstance(content, RecipeListContent):
        for section_idx, section in enumerate(content.sections):
            if section.title:
                section_title(section.title)
            for recipe in section.recipes:
                render_recipe_card(recipe, presenter, key_prefix=f"s{section_idx}")


def render_recipe_list_screen(screen: RecipeListScreen, presenter: RecipeListPresenter) -> None:
    """Draw the whole screen in the fixed top-to-bottom order."""
    render_top_bar(screen, presenter)
    render_status_banner(screen.banner, presenter)
    render_search_box(screen.search_query, presenter)
    render_filter_summary(screen.filter_summary, presenter)
    kpi_row(screen.stats_items)
    render_content(screen.content, presenter)
