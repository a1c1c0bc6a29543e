"""Static catalog loading."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from menudishes.config import CATALOG_JSON_ENV
from menudishes.constant import DISH_TABLE
from menudishes.models import Catalog, Dish, new_dish_id

logger = logging.getLogger(__name__)


def _validate_entries(entries: list[Any]) -> list[str]:
    errors: list[str] = []
    seen_ids: set[str] = set()

    for idx, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            errors.append(f"dish[{idx}] must be an object")
            continue

        dish_id = entry.get("id")
        label = dish_id or f"dish[{idx}]"
        if dish_id is not None:
            if not isinstance(dish_id, str) or not dish_id:
                errors.append(f"dish[{idx}] id must be a non-empty string")
            elif dish_id in seen_ids:
                errors.append(f"duplicate id: {dish_id}")
            else:
                seen_ids.add(dish_id)

        name = entry.get("name")
        if not name or not isinstance(name, str):
            errors.append(f"{label}: missing name")

        description = entry.get("description", "")
        if not isinstance(description, str):
            errors.append(f"{label}: description must be a string")

        for key in ("ingredients", "images"):
            values = entry.get(key, [])
            if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                errors.append(f"{label}: {key} must be a list of strings")

    return errors


def _to_dish(entry: dict[str, Any]) -> Dish:
    return Dish(
        id=entry.get("id") or new_dish_id(),
        name=entry["name"],
        description=entry.get("description", ""),
        ingredients=tuple(entry.get("ingredients", [])),
        images=tuple(entry.get("images", [])),
    )


def catalog_from_entries(entries: list[Any]) -> Catalog:
    """Validate raw dish entries and build a Catalog in the given order."""
    errors = _validate_entries(entries)
    if errors:
        raise ValueError("Catalog validation failed:\n" + "\n".join(errors))
    return Catalog(tuple(_to_dish(entry) for entry in entries))


def embedded_catalog() -> Catalog:
    """Build the catalog from the embedded dish table."""
    return catalog_from_entries([{"id": dish_id, **entry} for dish_id, entry in DISH_TABLE.items()])


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Load the catalog once at startup.

    Resolution order:
    1. `path` (if given)
    2. MENU_DISHES_CATALOG_JSON (if set)
    3. The embedded dish table
    """
    source = path or os.environ.get(CATALOG_JSON_ENV, "").strip()
    if not source:
        catalog = embedded_catalog()
        logger.info("catalog loaded source=embedded dishes=%d", len(catalog))
        return catalog

    json_path = Path(source)
    data = json.loads(json_path.read_text(encoding="utf-8"))
    entries = data.get("dishes") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"{json_path}: expected an object with a 'dishes' list")

    catalog = catalog_from_entries(entries)
    logger.info("catalog loaded source=%s dishes=%d", json_path, len(catalog))
    return catalog
