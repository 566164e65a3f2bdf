"""
Utility modules for the Streamlit frontend.

This package contains:
- session: Per-session view-model and presenter wiring
- navigation: Route handling between the recipe list and its targets
"""
