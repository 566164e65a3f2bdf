"""
Layout primitives for the recipe list screen.

Provides the app bar, stats row and section headers.
"""

from typing import Callable, Dict, List

import streamlit as st


def page_header(title: str, actions: Callable[[], None]) -> None:
    """
    Render the app bar: title on the left, action buttons on the right.

    Args:
        title: App title
        actions: Callable that renders the action buttons into the right column
    """
    col_title, col_actions = st.columns([2, 3], vertical_alignment="center")
    with col_title:
        st.markdown(f"# {title}")
    with col_actions:
        actions()


def kpi_row(items: List[Dict[str, str]]) -> None:
    """
    Render the recipe stats as a row of metrics.

    Args:
        items: Dicts with "label" and "value" keys; nothing is drawn when empty
    """
    if not items:
        return
    with st.container(border=True):
        for col, item in zip(st.columns(len(items)), items):
            col.metric(label=item["label"], value=item["value"])


def section_title(title: str) -> None:
    st.markdown(f'<div class="hbh-section-title">{title}</div>', unsafe_allow_html=True)
