"""Tests for the immutable Dish and Catalog records."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from menudishes.models import Catalog, Dish


def test_dish_ids_are_assigned_and_unique() -> None:
    first = Dish("Koleno")
    second = Dish("Koleno")
    assert first.id and second.id
    assert first.id != second.id


def test_dish_is_immutable_and_stores_tuples() -> None:
    dish = Dish("Topinky", ingredients=["Pão de centeio", "Alho"], images=["topinky"])
    assert dish.ingredients == ("Pão de centeio", "Alho")
    assert dish.images == ("topinky",)
    with pytest.raises(FrozenInstanceError):
        dish.name = "Other"  # type: ignore[misc]


def test_dish_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        Dish("")


def test_primary_image_is_first_or_none() -> None:
    assert Dish("A", images=("one", "two")).primary_image == "one"
    assert Dish("A").primary_image is None


def test_catalog_rejects_duplicate_ids() -> None:
    with pytest.raises(ValueError):
        Catalog((Dish("A", id="x"), Dish("B", id="x")))


def test_catalog_allows_duplicate_names() -> None:
    catalog = Catalog((Dish("Svíčková na smetaně", id="a"), Dish("Svíčková na smetaně", id="b")))
    assert len(catalog) == 2
    assert catalog.get("b") is catalog.dishes[1]
    assert catalog.get("missing") is None


def test_sorted_by_name_folds_diacritics_and_keeps_catalog_intact() -> None:
    catalog = Catalog(
        (
            Dish("Zelňačka", id="z"),
            Dish("Česnečka", id="c"),
            Dish("Bramboráky", id="b"),
        )
    )
    assert [dish.id for dish in catalog.sorted_by_name()] == ["b", "c", "z"]
    assert [dish.id for dish in catalog] == ["z", "c", "b"]
