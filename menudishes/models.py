"""Domain models for the dish catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
from uuid import uuid4

from menudishes.normalize import normalize


def new_dish_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Dish:
    """One menu entry. Images are logical names; the first one is the primary image."""

    name: str
    description: str = ""
    ingredients: tuple[str, ...] = ()
    images: tuple[str, ...] = ()
    id: str = field(default_factory=new_dish_id)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("dish name must not be empty")
        # Accept lists from callers but store tuples so the record stays immutable.
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "images", tuple(self.images))

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class Catalog:
    """The fixed, ordered collection of dishes available to search.

    Stored order is the authored order. Dish ids are unique; names may repeat.
    """

    dishes: tuple[Dish, ...] = ()

    def __post_init__(self) -> None:
        dishes = tuple(self.dishes)
        seen: set[str] = set()
        for dish in dishes:
            if dish.id in seen:
                raise ValueError(f"duplicate dish id: {dish.id}")
            seen.add(dish.id)
        object.__setattr__(self, "dishes", dishes)

    def __iter__(self) -> Iterator[Dish]:
        return iter(self.dishes)

    def __len__(self) -> int:
        return len(self.dishes)

    def get(self, dish_id: str) -> Dish | None:
        for dish in self.dishes:
            if dish.id == dish_id:
                return dish
        return None

    def sorted_by_name(self) -> list[Dish]:
        """Display order: by folded name, ties broken by raw name then stored order."""
        return sorted(self.dishes, key=lambda dish: (normalize(dish.name), dish.name))
