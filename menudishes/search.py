"""Token-subset search over the dish catalog."""

from __future__ import annotations

from menudishes.models import Catalog, Dish
from menudishes.normalize import normalize


def searchable_text(dish: Dish) -> str:
    """Normalized name, description and ingredients of a dish, space separated."""
    return normalize(f"{dish.name} {dish.description} {' '.join(dish.ingredients)}")


def _matches(text: str, tokens: list[str]) -> bool:
    return all(token in text for token in tokens)


def search(catalog: Catalog, query: str) -> list[Dish]:
    """Return dishes whose searchable text contains every query token.

    Matching is substring containment, not whole words ("knedl" matches
    "knedliky"), and results keep the catalog's stored order. Only the exact
    empty string short-circuits; a whitespace-only query yields empty tokens,
    which every dish satisfies.
    """
    if not query:
        return list(catalog)

    tokens = normalize(query).split(" ")
    return [dish for dish in catalog if _matches(searchable_text(dish), tokens)]
