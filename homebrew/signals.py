"""
One-shot signal tracking.

The view-model publishes navigation targets, success messages and errors as
fields of RecipeListUiState. The screen must act on each distinct value once,
even when render passes repeat with the same state object or are triggered by
unrelated changes, and then acknowledge it so the owner clears the field.

SignalTracker remembers the last value delivered per signal kind. A value is
delivered again only after the field has been observed empty in between.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from homebrew.models import RecipeListUiState


class SignalKind(str, Enum):
    # Declaration order is delivery order.
    NAVIGATION = "navigation_target"
    SUCCESS = "success_message"
    ERROR = "error"


@dataclass(frozen=True)
class Signal:
    kind: SignalKind
    value: str


class SignalTracker:
    """At-most-once delivery bookkeeping for one-shot UI signals."""

    def __init__(self) -> None:
        self._delivered: Dict[SignalKind, Optional[str]] = {kind: None for kind in SignalKind}

    def observe(self, kind: SignalKind, value: Optional[str]) -> bool:
        """
        Record an observed value for a signal kind.

        Returns:
            True when the value is a new emission the caller should act on.
        """
        if value is None:
            self._delivered[kind] = None
            return False
        if self._delivered[kind] == value:
            return False
        self._delivered[kind] = value
        return True

    def collect(self, ui_state: RecipeListUiState) -> List[Signal]:
        """Observe every signal field of ui_state and return the new ones, in delivery order."""
        fresh: List[Signal] = []
        for kind in SignalKind:
            value = getattr(ui_state, kind.value)
            if self.observe(kind, value):
                fresh.append(Signal(kind=kind, value=value))
        return fresh
