"""Dish detail modal screen."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from menudishes.models import Dish
from menudishes.rendering import format_dish_detail


class DishDetailModal(ModalScreen[None]):
    """Centered modal showing every image, the description and the ingredients of one dish."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("s", "speak", "Speak name"),
        ("j", "scroll(1)", "Scroll down"),
        ("k", "scroll(-1)", "Scroll up"),
        ("down", "scroll(1)", "Scroll down"),
        ("up", "scroll(-1)", "Scroll up"),
    ]

    CSS = """
    DishDetailModal {
        align: center middle;
        background: $background 60%;
    }

    #detail-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #detail-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #detail-scroll {
        height: auto;
        max-height: 24;
    }

    #detail-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, dish: Dish, on_speak: Callable[[Dish], None]) -> None:
        super().__init__()
        self.dish = dish
        self.on_speak = on_speak

    def compose(self) -> ComposeResult:
        with Container(id="detail-dialog"):
            yield Static(self.dish.name, id="detail-title")
            with VerticalScroll(id="detail-scroll"):
                yield Static(format_dish_detail(self.dish), id="detail-body")
            yield Static("S speak name, J/K/↑/↓ scroll, Esc/q close", id="detail-help")

    def action_close(self) -> None:
        self.dismiss()

    def action_speak(self) -> None:
        self.on_speak(self.dish)

    def action_scroll(self, delta: int) -> None:
        scroll = self.query_one("#detail-scroll", VerticalScroll)
        scroll.scroll_relative(y=delta, animate=False)
