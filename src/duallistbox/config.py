"""
Configuration loading for duallistbox.

- settings.ini in XDG config dir (~/.config/duallistbox/settings.ini)

Provides:
- Settings (INI) as a lightweight dict-like wrapper.
- Item list parsing for the [items] section and CLI overrides.
- Layout parameters for the dual list box ([layout] section).
- Atomic write-back of the current item partition.

Interpolation is disabled: item names are stored verbatim, '%' included.
Saved item lists are JSON arrays so commas and surrounding whitespace
survive a round trip; hand-written comma separated lists are still read.
"""

from __future__ import annotations

import configparser
import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .layout import LayoutParams
from .platform import settings_path


DEFAULT_SETTINGS = {
    "general": {
        "left_title": "Used Filters",
        "right_title": "Available Filters",
        "remember_items": "false",
    },
    "window": {
        "width": "400",
        "height": "300",
    },
    "layout": {
        "title_height": "30",
        "button_width": "50",
        "button_height": "30",
        "gutter": "20",
        "right_inset": "10",
        "button_gap": "10",
    },
    "items": {
        "available": "Apple, Banana, Cherry, Date",
        "selected": "",
    },
}


@dataclass
class Settings:
    config: configparser.ConfigParser
    path: Path

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> str:
        return self.config.get(section, key, fallback=fallback)  # type: ignore[no-any-return]

    def getint(self, section: str, key: str, fallback: Optional[int] = None) -> int:
        try:
            return self.config.getint(section, key)  # type: ignore[no-any-return]
        except (configparser.Error, ValueError):
            if fallback is None:
                raise
            return fallback

    def getboolean(self, section: str, key: str, fallback: Optional[bool] = None) -> bool:
        try:
            return self.config.getboolean(section, key)  # type: ignore[no-any-return]
        except (configparser.Error, ValueError):
            if fallback is None:
                raise
            return fallback


def _parser_with_defaults() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    for section, kv in DEFAULT_SETTINGS.items():
        parser.add_section(section)
        for k, v in kv.items():
            parser.set(section, k, v)
    return parser


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings.ini with DEFAULT_SETTINGS preloaded.
    Raises configparser.Error for a malformed file.
    """
    ini_path = Path(path) if path is not None else settings_path()

    parser = _parser_with_defaults()
    if ini_path.exists():
        parser.read(ini_path, encoding="utf-8")

    return Settings(parser, ini_path)


def parse_items(text: Optional[str]) -> List[str]:
    """
    Split a comma or newline separated item list.
    Whitespace around items is trimmed and empty entries are dropped.
    """
    if not text:
        return []
    out: List[str] = []
    for line in text.splitlines():
        for part in line.split(","):
            item = part.strip()
            if item:
                out.append(item)
    return out


def encode_items(items: Iterable[str]) -> str:
    return json.dumps(list(items), ensure_ascii=False)


def decode_items(text: Optional[str]) -> List[str]:
    """
    Read an [items] value: a JSON array of strings as written by
    save_items(), otherwise a hand-written comma separated list.
    """
    if text and text.lstrip().startswith("["):
        try:
            data = json.loads(text)
        except ValueError:
            data = None
        if isinstance(data, list) and all(isinstance(x, str) for x in data):
            return [x for x in data if x]
    return parse_items(text)


def initial_items(settings: Settings) -> Tuple[List[str], List[str]]:
    """Return (available, selected) from the [items] section."""
    available = decode_items(settings.get("items", "available", fallback=""))
    selected = decode_items(settings.get("items", "selected", fallback=""))
    return available, selected


def layout_params(settings: Settings) -> LayoutParams:
    defaults = LayoutParams()
    return LayoutParams(
        title_height=settings.getint("layout", "title_height", fallback=defaults.title_height),
        button_width=settings.getint("layout", "button_width", fallback=defaults.button_width),
        button_height=settings.getint("layout", "button_height", fallback=defaults.button_height),
        gutter=settings.getint("layout", "gutter", fallback=defaults.gutter),
        right_inset=settings.getint("layout", "right_inset", fallback=defaults.right_inset),
        button_gap=settings.getint("layout", "button_gap", fallback=defaults.button_gap),
    )


# --------- Settings write helpers (atomic) ---------

def _write_ini_atomic(parser: configparser.ConfigParser, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", encoding="utf-8", delete=False, dir=path.parent, prefix=path.name + ".") as tf:
        parser.write(tf)
        tf.flush()
        os.fsync(tf.fileno())
        tmpname = tf.name
    os.replace(tmpname, path)


def save_items(settings: Settings, available: Iterable[str], selected: Iterable[str]) -> None:
    """
    Write the [items] section back to settings.path, keeping every other
    value that is currently loaded.
    """
    parser = settings.config
    if not parser.has_section("items"):
        parser.add_section("items")
    parser.set("items", "available", encode_items(available))
    parser.set("items", "selected", encode_items(selected))
    _write_ini_atomic(parser, settings.path)
