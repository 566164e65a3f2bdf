"""
Session management utilities for the Streamlit front end.

This module wires one view-model and one presenter per browser session and
keeps them in st.session_state so they survive Streamlit's script reruns.

One-shot notices (success and error signals) delivered by the presenter are
queued in session state and drained by the page on its next render, so each
notice is shown exactly once.
"""

import logging
import uuid
from typing import List

import streamlit as st

from homebrew.catalog import sample_recipes
from homebrew.config import AppConfig
from homebrew.presenter import RecipeListPresenter
from homebrew.signals import Signal
from homebrew.view_model import InMemoryRecipeListViewModel
from utils.navigation import session_navigation

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "session_id"
VIEW_MODEL_KEY = "recipe_list_view_model"
PRESENTER_KEY = "recipe_list_presenter"
NOTICES_KEY = "pending_notices"
SEARCH_PARAM = "q"


def get_or_create_session_id() -> str:
    """
    Get or create a persistent session ID stored in st.session_state.

    The same ID is reused for every rerun within one browser session and is
    attached to intent log records.
    """
    if SESSION_ID_KEY not in st.session_state:
        st.session_state[SESSION_ID_KEY] = str(uuid.uuid4())
    return st.session_state[SESSION_ID_KEY]


def _queue_notice(signal: Signal) -> None:
    st.session_state.setdefault(NOTICES_KEY, []).append(signal)


def drain_notices() -> List[Signal]:
    """Return and forget the queued notices."""
    notices = st.session_state.get(NOTICES_KEY, [])
    st.session_state[NOTICES_KEY] = []
    return notices


def get_view_model() -> InMemoryRecipeListViewModel:
    if VIEW_MODEL_KEY not in st.session_state:
        recipes = sample_recipes() if AppConfig.seed_sample_recipes() else []
        st.session_state[VIEW_MODEL_KEY] = InMemoryRecipeListViewModel(recipes=recipes)
    return st.session_state[VIEW_MODEL_KEY]


def get_presenter() -> RecipeListPresenter:
    """
    Get or create the session's presenter.

    On first creation the presenter subscribes to the view-model, the
    ingredient catalog is loaded, and the `q` query parameter (if any) seeds
    the search query.
    """
    if PRESENTER_KEY in st.session_state:
        return st.session_state[PRESENTER_KEY]

    session_id = get_or_create_session_id()
    view_model = get_view_model()
    presenter = RecipeListPresenter(
        view_model,
        navigation=session_navigation(),
        on_signal=_queue_notice,
        session_id=session_id,
        show_debug_info=AppConfig.show_debug_panel(),
    )
    st.session_state[PRESENTER_KEY] = presenter
    presenter.start()
    logger.info("Recipe list session %s started", session_id)

    view_model.force_initialization()

    query = st.query_params.get(SEARCH_PARAM)
    if query:
        presenter.update_search_query(query)

    return presenter
