# homebrew/events.py
"""
Intent logging for the HomeBrew Helper recipe list.

Responsibilities:
- Provide a single log_event(...) function that appends a JSONL record to the
  configured event log file.
  Never raises exceptions (the intent log is strictly non-blocking).

- Provide small helper functions for the intents the recipe list forwards:
  - log_recipe_opened(...)
  - log_favorite_toggled(...)
  - log_filter_changed(...)
  - log_search_updated(...)
  - log_refresh_requested(...)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from homebrew.config import AppConfig

logger = logging.getLogger(__name__)

EVENT_LOG_FILE = AppConfig.get_event_log_path()


def _write_to_file(record: Dict[str, Any]) -> None:
    """
    Append a single JSON record to the event log as JSONL.
    Never raise exceptions.
    """
    try:
        path = Path(EVENT_LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except Exception as exc:
        logger.debug("Failed to write event to %s: %s", EVENT_LOG_FILE, exc)


def log_event(
    event: str,
    session_id: Optional[str],
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Core event logger.

    Builds a record with keys ts, event, session_id, payload and appends it to
    the event log. Never raises.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "session_id": session_id,
        "payload": payload or {},
    }
    _write_to_file(record)


# ---------------------------------------------------------------------------
# Helper functions for common event types
# ---------------------------------------------------------------------------

def log_recipe_opened(session_id: Optional[str], recipe_id: str, mode: str = "view") -> None:
    """
    Log a recipe_opened event.

    payload:
    {
        "recipe_id": "...",
        "mode": "view" | "edit" | "new"
    }
    """
    log_event("recipe_opened", session_id, {"recipe_id": recipe_id, "mode": mode})


def log_favorite_toggled(session_id: Optional[str], recipe_id: str) -> None:
    log_event("favorite_toggled", session_id, {"recipe_id": recipe_id})


def log_filter_changed(
    session_id: Optional[str],
    beverage_type: Optional[str] = None,
    favorites_only: Optional[bool] = None,
    cleared: bool = False,
) -> None:
    """
    Log a filter_changed event.

    payload:
    {
        "beverage_type": "mead" | None,   # optional
        "favorites_only": true,           # optional
        "cleared": false
    }
    """
    payload: Dict[str, Any] = {"cleared": cleared}
    if beverage_type is not None:
        payload["beverage_type"] = beverage_type
    if favorites_only is not None:
        payload["favorites_only"] = favorites_only
    log_event("filter_changed", session_id, payload)


def log_search_updated(session_id: Optional[str], query: str) -> None:
    log_event("search_updated", session_id, {"query": query, "length": len(query)})


def log_refresh_requested(session_id: Optional[str], kind: str) -> None:
    """kind is "force_initialization" or "check_status"."""
    log_event("refresh_requested", session_id, {"kind": kind})
