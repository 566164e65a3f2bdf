"""
Ingredient catalog and sample recipes.

This module holds the built-in mead brewing ingredient catalog the in-memory
view-model "loads", a few sample recipes, and the statistics helpers that
summarize both.

# NOTE: The catalog is static data kept in process memory. Loading from a
    database or a bundled JSON file is the view-model's concern and can replace
    INGREDIENT_CATALOG without touching the statistics helpers.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import pandas as pd

from homebrew.models import BeverageType, IngredientStats, RecipeStats, RecipeSummary

# Ingredient categories counted separately in IngredientStats
CATEGORY_GRAIN = "grain"
CATEGORY_HOP = "hop"
CATEGORY_YEAST = "yeast"


@dataclass
class Ingredient:
    """
    Brewing ingredient.

    Attributes:
        name: Ingredient name
        category: "honey", "fruit", "spice", "nutrient", "grain", "hop" or "yeast"
        cost_per_unit: Optional cost in dollars per purchase unit
        is_custom: True for user-defined ingredients
    """
    name: str
    category: str
    cost_per_unit: Optional[float] = None
    is_custom: bool = False


INGREDIENT_CATALOG: List[Ingredient] = [
    Ingredient("Wildflower Honey", "honey", 12.50),
    Ingredient("Orange Blossom Honey", "honey", 15.00),
    Ingredient("Buckwheat Honey", "honey", 14.25),
    Ingredient("Clover Honey", "honey", 9.75),
    Ingredient("Raspberries", "fruit", 6.00),
    Ingredient("Blackberries", "fruit", 6.50),
    Ingredient("Tart Cherries", "fruit", 7.25),
    Ingredient("Apple Juice", "fruit", 4.00),
    Ingredient("Cinnamon Stick", "spice", 0.80),
    Ingredient("Vanilla Bean", "spice", 3.50),
    Ingredient("Whole Cloves", "spice", 1.10),
    Ingredient("Fermaid-O", "nutrient", 2.40),
    Ingredient("DAP", "nutrient", 1.20),
    Ingredient("Pale Malt", CATEGORY_GRAIN, 2.10),
    Ingredient("Crystal 60", CATEGORY_GRAIN, 2.60),
    Ingredient("Flaked Oats", CATEGORY_GRAIN, 1.90),
    Ingredient("Cascade", CATEGORY_HOP, 2.99),
    Ingredient("Saaz", CATEGORY_HOP, 3.25),
    Ingredient("Lalvin 71B", CATEGORY_YEAST, 1.50),
    Ingredient("Lalvin EC-1118", CATEGORY_YEAST, 1.25),
    Ingredient("Lalvin D47", CATEGORY_YEAST, 1.50),
    Ingredient("Safale US-05", CATEGORY_YEAST, 4.50),
    Ingredient("Wyeast 4184 Sweet Mead", CATEGORY_YEAST, 8.99),
    Ingredient("Chamomile", "spice", None),
]


def load_ingredient_catalog() -> List[Ingredient]:
    """Return a fresh copy of the built-in ingredient catalog."""
    return [Ingredient(i.name, i.category, i.cost_per_unit, i.is_custom) for i in INGREDIENT_CATALOG]


def compute_ingredient_stats(ingredients: Sequence[Ingredient]) -> IngredientStats:
    """
    Summarize ingredients by category.

    The average cost only covers ingredients with a known cost; it is None when
    no ingredient has one.
    """
    if not ingredients:
        return IngredientStats()

    df = pd.DataFrame(
        [
            {"category": i.category, "cost": i.cost_per_unit, "is_custom": i.is_custom}
            for i in ingredients
        ]
    )
    counts = df["category"].value_counts()
    cost = pd.to_numeric(df["cost"], errors="coerce").mean()

    return IngredientStats(
        total_ingredients=len(df),
        custom_ingredients=int(df["is_custom"].sum()),
        grain_count=int(counts.get(CATEGORY_GRAIN, 0)),
        hop_count=int(counts.get(CATEGORY_HOP, 0)),
        yeast_count=int(counts.get(CATEGORY_YEAST, 0)),
        average_cost=None if pd.isna(cost) else float(cost),
    )


def compute_recipe_stats(recipes: Sequence[RecipeSummary]) -> Optional[RecipeStats]:
    """
    Summarize the user's recipes.

    Ties for the most popular type go to the type declared first in BeverageType.
    Returns None when there are no recipes.
    """
    if not recipes:
        return None

    df = pd.DataFrame(
        [{"beverage_type": r.beverage_type.value, "is_favorite": r.is_favorite} for r in recipes]
    )
    counts = df["beverage_type"].value_counts().reindex([bt.value for bt in BeverageType], fill_value=0)

    return RecipeStats(
        total_recipes=len(df),
        favorite_recipes=int(df["is_favorite"].sum()),
        most_popular_type=BeverageType(counts.idxmax()),
    )


def sample_recipes(now: Optional[datetime] = None) -> List[RecipeSummary]:
    """Starter recipes for a fresh session, newest first."""
    now = now or datetime.now(timezone.utc)
    rows = [
        ("traditional-mead", "Traditional Show Mead", BeverageType.MEAD,
         "Wildflower honey, water and 71B. Nothing else.", 19.0, True),
        ("raspberry-melomel", "Raspberry Melomel", BeverageType.MEAD,
         "Fruit-forward melomel with raspberries in secondary.", 11.0, False),
        ("spiced-cyser", "Spiced Cyser", BeverageType.CIDER,
         "Apple juice and clover honey with cinnamon and cloves.", 19.0, False),
        ("cascade-pale-ale", "Cascade Pale Ale", BeverageType.BEER,
         "Single-hop pale ale.", 23.0, False),
        ("blackberry-wine", "Blackberry Country Wine", BeverageType.WINE,
         None, 4.5, True),
    ]
    return [
        RecipeSummary(
            id=recipe_id,
            name=name,
            beverage_type=beverage_type,
            description=description,
            batch_size_liters=batch_size,
            is_favorite=favorite,
            updated_at=now - timedelta(days=index),
        )
        for index, (recipe_id, name, beverage_type, description, batch_size, favorite) in enumerate(rows)
    ]
