"""Main Textual app class."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from menudishes.config import APP_TITLE, SEARCH_PROMPT
from menudishes.detail_modal import DishDetailModal
from menudishes.export import export_catalog
from menudishes.models import Catalog, Dish
from menudishes.rendering import format_dish_row
from menudishes.search import search
from menudishes.speech import OpenAISpeechAdapter, SpeechPort, announce

logger = logging.getLogger(__name__)

# Each result row is the dish name plus its primary image line.
_ROW_HEIGHT = 2


class MenuDishesApp(App):
    """A Textual app for searching the dish catalog and opening dish details."""

    TITLE = APP_TITLE
    SUB_TITLE = "Pratos checos"

    CSS = """
    Screen {
        layout: vertical;
    }

    #browser {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status {
        height: 1;
        color: #dddddd;
    }
    """

    search_text = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next dish"),
        ("up", "cycle_results(-1)", "Previous dish"),
        ("down", "cycle_results(1)", "Next dish"),
        ("enter", "open_detail", "Open dish"),
        ("backspace", "backspace_query", "Delete query char"),
        ("ctrl+u", "clear_query", "Clear search"),
        Binding("ctrl+e", "export", "Export HTML", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Catalog,
        speech: SpeechPort | None = None,
        export_path: str | Path | None = None,
        image_dir: str | Path | None = None,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.speech = speech if speech is not None else OpenAISpeechAdapter()
        self.export_path = export_path
        self.image_dir = image_dir
        self.system_status = ""
        self._display_rank = {dish.id: idx for idx, dish in enumerate(catalog.sorted_by_name())}
        logger.info("app_init dishes=%d", len(catalog))

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="browser"):
            yield Static(id="search-bar")
            yield Static(id="results")
            yield Static(id="status")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, DishDetailModal):
            return
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        self.search_text += event.character
        self.selected_index = 0
        logger.debug("query_changed search_text=%r", self.search_text)
        self._refresh_search()
        event.stop()

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, DishDetailModal):
            return

        results = self.filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_open_detail(self) -> None:
        if isinstance(self.screen, DishDetailModal):
            return

        results = self.filtered_results()
        if not results:
            self.bell()
            return

        dish = results[min(self.selected_index, len(results) - 1)]
        logger.info("detail_open dish_id=%s", dish.id)
        self.push_screen(DishDetailModal(dish, on_speak=self.speak_dish), callback=self._on_detail_closed)

    def _on_detail_closed(self, _result: None) -> None:
        self._set_status(self.system_status)

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, DishDetailModal):
            return
        if not self.search_text:
            return
        self.search_text = self.search_text[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_clear_query(self) -> None:
        if isinstance(self.screen, DishDetailModal):
            return
        self.search_text = ""
        self.selected_index = 0
        self._refresh_search()

    def action_export(self) -> None:
        try:
            path = export_catalog(self.catalog, self.export_path, self.image_dir)
        except OSError as exc:
            logger.exception("export_failed")
            self._set_status(f"Export failed: {exc}")
            self.bell()
            return
        self._set_status(f"Exported {len(self.catalog)} dishes to {path}")

    def speak_dish(self, dish: Dish) -> None:
        self._set_status(f"Speaking: {dish.name}")
        self._speak_worker(dish.name)

    @work(thread=True, exclusive=True, group="speech")
    def _speak_worker(self, text: str) -> None:
        try:
            announce(text, self.speech)
        except Exception as exc:
            # Speech problems stay local to the announcement; browsing carries on.
            logger.warning("speech_failed error=%r", exc)
            self.call_from_thread(self._speech_failed, str(exc))
            return
        self.call_from_thread(self._set_status, "")

    def _speech_failed(self, message: str) -> None:
        self.bell()
        self._set_status(f"Speech failed: {message}")

    def filtered_results(self) -> list[Dish]:
        """Search results in display order (by name)."""
        return sorted(search(self.catalog, self.search_text), key=lambda dish: self._display_rank[dish.id])

    def _set_status(self, message: str) -> None:
        self.system_status = message
        try:
            self.query_one("#status", Static).update(message)
        except NoMatches:
            return

    def _refresh_all(self) -> None:
        self._refresh_search()
        self._set_status(self.system_status)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height // _ROW_HEIGHT)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        self._refresh_results(self.filtered_results())

    def _refresh_search_bar(self) -> None:
        bar = self.query_one("#search-bar", Static)
        text = Text()
        if self.search_text:
            text.append(f"🔍 {self.search_text}")
        else:
            text.append(f"🔍 {SEARCH_PROMPT}", style="dim")
        bar.update(text)

    def _refresh_results(self, results: list[Dish]) -> None:
        results_widget = self.query_one("#results", Static)
        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(format_dish_row(results[idx], selected=idx == self.selected_index))

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
