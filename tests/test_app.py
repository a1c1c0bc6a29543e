"""Headless tests for the Textual catalog browser."""

from __future__ import annotations

from pathlib import Path

import pytest

from menudishes.catalog_app import MenuDishesApp
from menudishes.detail_modal import DishDetailModal
from menudishes.models import Catalog, Dish
from menudishes.speech import OpenAISpeechAdapter, SpeechError, SpeechPort


class _FailingSpeech(SpeechPort):
    def __init__(self) -> None:
        self.texts: list[str] = []

    def synthesize(self, text: str, output_path: Path) -> Path:
        self.texts.append(text)
        raise SpeechError("no voice")


def _catalog() -> Catalog:
    return Catalog(
        (
            Dish("Knedlíky", "Bolinhos de pão.", ("Farinha", "Ovo"), ("BORUVKOVE-KNEDLIKY",), id="knedliky"),
            Dish("Guláš", "Servido com knedlíky.", ("Carne de vaca",), ("Goulash-tcheco",), id="gulas"),
            Dish("Houskový knedlík", "", ("Pão seco",), (), id="housky"),
            Dish("Koleno", "", ("Cerveja",), ("koleno",), id="koleno"),
        )
    )


@pytest.mark.asyncio
async def test_results_start_sorted_by_name() -> None:
    app = MenuDishesApp(_catalog())
    async with app.run_test():
        assert [dish.id for dish in app.filtered_results()] == ["gulas", "housky", "knedliky", "koleno"]


@pytest.mark.asyncio
async def test_typing_filters_and_backspace_widens() -> None:
    app = MenuDishesApp(_catalog())
    async with app.run_test() as pilot:
        await pilot.press("k", "n", "e", "d", "l")
        assert app.search_text == "knedl"
        assert [dish.id for dish in app.filtered_results()] == ["gulas", "housky", "knedliky"]

        await pilot.press("space", "o", "v", "o")
        assert [dish.id for dish in app.filtered_results()] == ["knedliky"]

        for _ in range(4):
            await pilot.press("backspace")
        assert app.search_text == "knedl"
        assert len(app.filtered_results()) == 3


@pytest.mark.asyncio
async def test_enter_opens_selected_dish_and_escape_closes() -> None:
    app = MenuDishesApp(_catalog())
    async with app.run_test() as pilot:
        await pilot.press("down", "enter")
        assert isinstance(app.screen, DishDetailModal)
        assert app.screen.dish.id == "housky"

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, DishDetailModal)


@pytest.mark.asyncio
async def test_enter_without_results_stays_on_list() -> None:
    app = MenuDishesApp(_catalog())
    async with app.run_test() as pilot:
        await pilot.press("x", "y", "z", "z", "y")
        assert app.filtered_results() == []
        await pilot.press("enter")
        assert not isinstance(app.screen, DishDetailModal)


@pytest.mark.asyncio
async def test_speech_failure_is_reported_not_raised() -> None:
    speech = _FailingSpeech()
    app = MenuDishesApp(_catalog(), speech=speech)
    async with app.run_test() as pilot:
        await pilot.press("enter", "s")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert speech.texts == ["Guláš"]
        assert app.system_status == "Speech failed: no voice"
        assert isinstance(app.screen, DishDetailModal)


@pytest.mark.asyncio
async def test_ctrl_e_exports_catalog(tmp_path: Path) -> None:
    out = tmp_path / "ementa.html"
    app = MenuDishesApp(_catalog(), export_path=out, image_dir=tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+e")
        assert out.is_file()
        assert app.system_status == f"Exported 4 dishes to {out}"


@pytest.mark.asyncio
async def test_default_speech_adapter_is_reused_across_presses(monkeypatch: pytest.MonkeyPatch) -> None:
    ports: list[SpeechPort] = []
    monkeypatch.setattr("menudishes.catalog_app.announce", lambda text, port: ports.append(port))
    app = MenuDishesApp(_catalog())
    assert isinstance(app.speech, OpenAISpeechAdapter)

    async with app.run_test() as pilot:
        await pilot.press("enter", "s")
        await app.workers.wait_for_complete()
        await pilot.press("s")
        await app.workers.wait_for_complete()
        await pilot.pause()

    assert len(ports) == 2
    assert ports[0] is ports[1] is app.speech
