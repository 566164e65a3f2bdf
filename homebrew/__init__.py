"""
HomeBrew Helper core package.

View-state projection, one-shot signal handling and the presenter for the
recipe list screen, plus the reference in-memory view-model it talks to.
"""
