"""
UI Styling and Components Module.

This module provides global CSS styling, layout primitives and the recipe list
widgets for the HomeBrew Helper Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import kpi_row, page_header, section_title

__all__ = [
    "load_global_styles",
    "kpi_row",
    "page_header",
    "section_title",
]
