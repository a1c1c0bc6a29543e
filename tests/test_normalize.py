"""Tests for diacritic/case folding and the character whitelist."""

from __future__ import annotations

import pytest

from menudishes.normalize import normalize


def test_folds_czech_diacritics_and_case() -> None:
    assert normalize("Řízek") == "rizek"
    assert normalize("rizek") == "rizek"
    assert normalize("Svíčková na smetaně") == "svickova na smetane"
    assert normalize("Zelňačka") == "zelnacka"


def test_strips_punctuation_without_replacement() -> None:
    assert normalize("Guláš!") == "gulas"
    assert normalize("Fruta (ameixa ou morango)") == "fruta ameixa ou morango"
    # No substitute character: tokens joined by punctuation merge.
    assert normalize("s-tuna") == "stuna"


def test_keeps_digits_and_plain_spaces_only() -> None:
    assert normalize("6308_superapetite 10") == "6308superapetite 10"
    assert normalize("a\tb\nc") == "abc"
    assert normalize("  a  b ") == "  a  b "


def test_drops_characters_without_latin_decomposition() -> None:
    assert normalize("smørrebrød") == "smrrebrd"
    assert normalize("шницель") == ""
    assert normalize("🍺 pivo") == " pivo"


def test_empty_input_yields_empty_output() -> None:
    assert normalize("") == ""


@pytest.mark.parametrize(
    "text",
    ["Vepřo knedlo zelo", "Óleo para fritar", "Queijo Olomoucké tvarůžky", "ÀÉÎõü ß", "!!!", "  "],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once
