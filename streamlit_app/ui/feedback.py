"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, notices, empty states, and
loading indicators on the recipe list in a consistent manner.
"""

from typing import Callable, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    on_action: Optional[Callable[[], None]] = None,
    icon: str = "🍯",
    key: str = "empty_state_action",
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        on_action: Called when the action button is clicked
        icon: Emoji shown above the title
        key: Widget key of the action button
    """
    st.markdown(f"<div style='text-align:center;font-size:4rem'>{icon}</div>", unsafe_allow_html=True)
    st.markdown(f"<h3 style='text-align:center'>{title}</h3>", unsafe_allow_html=True)
    if subtitle:
        st.markdown(f"<p style='text-align:center'>{subtitle}</p>", unsafe_allow_html=True)

    if action_label and on_action is not None:
        _, mid, _ = st.columns([1, 1, 1])
        with mid:
            if st.button(action_label, key=key, use_container_width=True, type="primary"):
                on_action()
                st.rerun()


def show_loading(message: str) -> None:
    """Centered loading indicator that stays on screen until the next render."""
    st.markdown(f"<p style='text-align:center;font-size:1.25rem'>⏳ {message}</p>", unsafe_allow_html=True)
