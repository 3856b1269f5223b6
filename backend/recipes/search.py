from __future__ import annotations

from typing import Sequence

import pandas as pd

from .models import Recipe, SearchFilters


def _build_frame(recipes: Sequence[Recipe]) -> pd.DataFrame:
    """One row per recipe, in input order, with lowercased columns for matching."""
    return pd.DataFrame({
        "name_lower": [r.name.lower() for r in recipes],
        "ingredients_lower": [[i.lower() for i in r.ingredients] for r in recipes],
        "tags_lower": [[t.lower() for t in r.metadata.tags] for r in recipes],
        "cuisine_lower": [r.metadata.cuisine_type.lower() for r in recipes],
        "status": [r.status.value for r in recipes],
        "preparation_time": [r.metadata.preparation_time for r in recipes],
    })


def _any_contains(items: list[str], needle: str) -> bool:
    return any(needle in item for item in items)


def search_recipes(
    recipes: Sequence[Recipe],
    filters: SearchFilters | None = None,
) -> list[Recipe]:
    """
    Return the recipes matching every provided criterion, in input order.

    - ``query``: case-insensitive substring of the name, any ingredient,
      any tag or the cuisine type. Empty matches everything.
    - ``cuisine_type``: case-insensitive exact match.
    - ``status``: exact match.
    - ``max_prep_time``: preparation time at most this many minutes.
    """
    filters = filters or SearchFilters()
    if not recipes:
        return []

    df = _build_frame(recipes)
    mask = pd.Series(True, index=df.index)

    if filters.query:
        query_lower = filters.query.lower()
        mask = mask & (
            df["name_lower"].str.contains(query_lower, regex=False)
            | df["ingredients_lower"].apply(_any_contains, needle=query_lower)
            | df["tags_lower"].apply(_any_contains, needle=query_lower)
            | df["cuisine_lower"].str.contains(query_lower, regex=False)
        )

    if filters.cuisine_type:
        mask = mask & (df["cuisine_lower"] == filters.cuisine_type.lower())

    if filters.status is not None:
        mask = mask & (df["status"] == filters.status.value)

    if filters.max_prep_time is not None:
        mask = mask & (df["preparation_time"] <= filters.max_prep_time)

    return [recipes[i] for i in df.loc[mask].index]
