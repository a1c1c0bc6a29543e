"""Tests for the command-line entry points."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from menudishes import main as entry
from menudishes.config import CATALOG_JSON_ENV


@pytest.fixture(autouse=True)
def _quiet_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(entry, "configure_logging", lambda: None)
    monkeypatch.delenv(CATALOG_JSON_ENV, raising=False)


def test_export_help_exits_without_writing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["menu-dishes-export", "--help"])

    with pytest.raises(SystemExit) as excinfo:
        entry.export_main()

    assert excinfo.value.code == 0
    assert not (tmp_path / "--help").exists()
    assert list(tmp_path.iterdir()) == []


def test_export_writes_to_given_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "ementa.html"

    entry.export_main([str(out), "--image-dir", str(tmp_path / "images")])

    assert "40 pratos" in out.read_text(encoding="utf-8")
    assert capsys.readouterr().out.strip() == str(out)


def test_export_rejects_unknown_option(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        entry.export_main(["--verbose"])

    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []
