"""
Shared fixtures for the recipe list tests.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from homebrew.models import BeverageType, RecipeSummary

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_recipe(recipe_id: str, name: str = None, beverage_type: BeverageType = BeverageType.MEAD,
                is_favorite: bool = False, days_ago: int = 0, description: str = None) -> RecipeSummary:
    return RecipeSummary(
        id=recipe_id,
        name=name or recipe_id.replace("-", " ").title(),
        beverage_type=beverage_type,
        description=description,
        is_favorite=is_favorite,
        updated_at=BASE_TIME - timedelta(days=days_ago),
    )


@pytest.fixture
def sample_recipes():
    """Five recipes across three categories; two favorites."""
    return [
        make_recipe("show-mead", "Show Mead", BeverageType.MEAD, is_favorite=True, days_ago=0,
                    description="Just honey and water"),
        make_recipe("melomel", "Raspberry Melomel", BeverageType.MEAD, days_ago=1),
        make_recipe("cyser", "Spiced Cyser", BeverageType.CIDER, days_ago=2),
        make_recipe("pale-ale", "Pale Ale", BeverageType.BEER, days_ago=3),
        make_recipe("country-wine", "Country Wine", BeverageType.WINE, is_favorite=True, days_ago=4),
    ]


@pytest.fixture(autouse=True)
def event_log_file(tmp_path):
    """Send intent log records to a per-test file."""
    log_file = tmp_path / "events.log"
    with patch("homebrew.events.EVENT_LOG_FILE", log_file):
        yield log_file
