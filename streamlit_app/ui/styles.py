"""
Global CSS Styling for HomeBrew Helper.

This module provides load_global_styles() to inject consistent styling for the
recipe list: typography, rounded buttons, section titles and beverage tags.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the HomeBrew Helper app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles buttons as rounded pills
    - Defines the section title and beverage tag classes used by ui.layout and
      ui.recipe_list
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
        }

        /* Section titles inside the recipe list */
        .hbh-section-title {
            font-weight: 700;
            font-size: 1.1rem;
            margin: 0.5rem 0 0.5rem 0;
        }

        .hbh-beverage-tag {
            display: inline-block;
            background-color: #fef3c7;
            border-radius: 999px;
            padding: 2px 8px;
            font-size: 0.75rem;
            color: #78350f;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
