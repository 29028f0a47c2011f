"""Tests for settings.ini loading and writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from duallistbox.config import (
    decode_items,
    initial_items,
    layout_params,
    load_settings,
    parse_items,
    save_items,
)
from duallistbox.layout import LayoutParams


def test_defaults_without_file(isolated_xdg: Path) -> None:
    settings = load_settings()
    assert settings.path == isolated_xdg / "config" / "duallistbox" / "settings.ini"
    assert settings.get("general", "left_title") == "Used Filters"
    assert settings.get("general", "right_title") == "Available Filters"
    assert settings.getboolean("general", "remember_items") is False
    assert settings.getint("window", "width") == 400
    assert initial_items(settings) == (["Apple", "Banana", "Cherry", "Date"], [])
    assert layout_params(settings) == LayoutParams()


def test_file_overrides_defaults(tmp_path: Path) -> None:
    ini = tmp_path / "custom.ini"
    ini.write_text(
        "[general]\nleft_title = Chosen\n"
        "[layout]\nbutton_width = 64\n"
        "[items]\navailable = x, y\nselected = z\n",
        encoding="utf-8",
    )
    settings = load_settings(ini)
    assert settings.get("general", "left_title") == "Chosen"
    assert settings.get("general", "right_title") == "Available Filters"
    assert layout_params(settings).button_width == 64
    assert layout_params(settings).title_height == 30
    assert initial_items(settings) == (["x", "y"], ["z"])


def test_invalid_int_falls_back(tmp_path: Path) -> None:
    ini = tmp_path / "bad.ini"
    ini.write_text("[layout]\ngutter = wide\n", encoding="utf-8")
    settings = load_settings(ini)
    assert layout_params(settings).gutter == 20
    with pytest.raises(ValueError):
        settings.getint("layout", "gutter")


def test_percent_in_items_is_read_verbatim(tmp_path: Path) -> None:
    """'%' is not an interpolation marker in settings.ini."""
    ini = tmp_path / "percent.ini"
    ini.write_text("[items]\navailable = 50% off, 100%\n", encoding="utf-8")
    assert initial_items(load_settings(ini)) == (["50% off", "100%"], [])


def test_save_items_with_percent(tmp_path: Path) -> None:
    ini = tmp_path / "settings.ini"
    save_items(load_settings(ini), ["50% off"], ["%(left_title)s"])
    assert initial_items(load_settings(ini)) == (["50% off"], ["%(left_title)s"])


def test_save_items_keeps_commas_and_whitespace(tmp_path: Path) -> None:
    """Items that a comma separated list cannot hold come back unchanged."""
    ini = tmp_path / "settings.ini"
    available = ["Smith, John", " Kiwi", "tab\there", "two\nlines", "[draft]"]
    save_items(load_settings(ini), available, ["Émile"])
    assert initial_items(load_settings(ini)) == (available, ["Émile"])


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('["a, b", "c"]', ["a, b", "c"]),
        ('["a", ""]', ["a"]),
        ("[draft], notes", ["[draft]", "notes"]),
        ("[1, 2]", ["[1", "2]"]),
        ("plain, list", ["plain", "list"]),
    ],
)
def test_decode_items(text: str, expected: list[str]) -> None:
    assert decode_items(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, []),
        ("", []),
        ("Apple", ["Apple"]),
        ("Apple, Banana ,Cherry", ["Apple", "Banana", "Cherry"]),
        ("Apple\nBanana, Cherry\n\n", ["Apple", "Banana", "Cherry"]),
        (" , ,Apple,,", ["Apple"]),
    ],
)
def test_parse_items(text: str | None, expected: list[str]) -> None:
    assert parse_items(text) == expected


def test_save_items_round_trips_and_keeps_other_values(tmp_path: Path) -> None:
    ini = tmp_path / "nested" / "settings.ini"
    settings = load_settings(ini)
    settings.config.set("general", "left_title", "Mine")
    save_items(settings, ["Apple", "Cherry"], ["Banana"])

    assert ini.exists()
    reloaded = load_settings(ini)
    assert initial_items(reloaded) == (["Apple", "Cherry"], ["Banana"])
    assert reloaded.get("general", "left_title") == "Mine"
    # no temp files left behind
    assert [p.name for p in ini.parent.iterdir()] == ["settings.ini"]
