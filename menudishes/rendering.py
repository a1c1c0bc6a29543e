"""Rendering helpers for the list and detail views."""

from __future__ import annotations

from rich.text import Text

from menudishes.config import INGREDIENTS_HEADING
from menudishes.models import Dish

IMAGE_MARK = "▣"


def image_tag_style(primary: bool) -> str:
    """Return a consistent style for image reference tags."""
    if primary:
        return "bold #0b1f0f on #5fbf72"
    return "#dddddd on #2f3b4a"


def format_image_tag(image_name: str, primary: bool = False) -> Text:
    return Text(f"{IMAGE_MARK} {image_name}", style=image_tag_style(primary))


def format_dish_row(dish: Dish, selected: bool = False) -> Text:
    """Render one list row: pointer, bold name and the primary image reference."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(dish.name, style="bold" if selected else "")
    if dish.primary_image is not None:
        text.append("\n    ")
        text.append_text(format_image_tag(dish.primary_image, primary=True))
    return text


def format_dish_detail(dish: Dish) -> Text:
    """Render the detail body: every image, the description and the ingredient list."""
    text = Text(style="white")
    for idx, image_name in enumerate(dish.images):
        if idx > 0:
            text.append("\n")
        text.append_text(format_image_tag(image_name, primary=idx == 0))
    if dish.images:
        text.append("\n\n")

    if dish.description:
        text.append(dish.description)
        text.append("\n\n")

    text.append(INGREDIENTS_HEADING, style="bold")
    if not dish.ingredients:
        text.append("\n  —", style="dim")
    for ingredient in dish.ingredients:
        text.append(f"\n  {ingredient}")
    return text
