#!/usr/bin/env python3
"""
duallistbox CLI

Subcommands:
  - show (default): open the GTK demo window
  - list: build the item partition headlessly, apply moves, print JSON
  - paths: print the settings and log file locations

Exit codes:
  0: success
  1: GUI not available or general error
  2: invalid arguments, an unreadable settings file or an unknown item in a move
"""

from __future__ import annotations

import argparse
import configparser
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Settings, initial_items, load_settings, parse_items
from .logging_setup import LEVEL_NAMES, setup_logging
from .model import ItemNotFoundError, ItemTransferList
from .platform import LOG_FILENAME, settings_path, xdg_state_dir


logger = logging.getLogger("duallistbox.cli")

Move = Tuple[str, str]


def _to_selected(item: str) -> Move:
    return ("selected", item)


def _to_available(item: str) -> Move:
    return ("available", item)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(Path(args.config) if args.config else None)


def build_model(settings: Settings, available: Optional[str] = None,
                selected: Optional[str] = None) -> ItemTransferList:
    """
    Initial partition from settings.ini; explicit comma separated
    overrides replace the corresponding side.
    """
    cfg_available, cfg_selected = initial_items(settings)
    avail = parse_items(available) if available is not None else cfg_available
    sel = parse_items(selected) if selected is not None else cfg_selected
    return ItemTransferList(avail, sel)


def apply_moves(model: ItemTransferList, moves: List[Move]) -> None:
    logger.debug("Applying %d move(s)", len(moves))
    for target, item in moves:
        if target == "selected":
            model.move_to_selected(item)
        else:
            model.move_to_available(item)


def cmd_show(args: argparse.Namespace) -> int:
    try:
        settings = _settings_from_args(args)
        model = build_model(settings, args.available, args.selected)
    except configparser.Error as e:
        print(f"invalid config: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    # imported lazily: GTK is only required for the GUI
    from .app import DualListBoxApplication

    app = DualListBoxApplication(settings, model,
                                 left_title=args.left_title, right_title=args.right_title,
                                 log_level=args.log_level)
    return app.run([sys.argv[0]])


def cmd_list(args: argparse.Namespace) -> int:
    setup_logging(args.log_level, file_logging=False)
    try:
        settings = _settings_from_args(args)
        model = build_model(settings, args.available, args.selected)
        apply_moves(model, args.moves or [])
    except configparser.Error as e:
        print(f"invalid config: {e}", file=sys.stderr)
        return 2
    except ItemNotFoundError as e:
        print(f"move failed: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    data = {"available": model.get_available(), "selected": model.get_selected()}
    print(json.dumps(data, ensure_ascii=False, indent=2 if args.pretty else None))
    return 0


def cmd_paths(args: argparse.Namespace) -> int:
    setup_logging(args.log_level, file_logging=False)
    cfg = Path(args.config) if args.config else settings_path()
    data = {
        "settings": str(cfg),
        "log": str(xdg_state_dir() / LOG_FILENAME),
    }
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        for k, v in data.items():
            print(f"{k}: {v}")
    return 0


def _add_item_overrides(p: argparse.ArgumentParser) -> None:
    p.add_argument("--available", help="comma separated available items (overrides settings)")
    p.add_argument("--selected", help="comma separated used items (overrides settings)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="duallistbox", description="Dual list box demo and tools")
    p.add_argument("--config", help="path to settings.ini (default: XDG config dir)")
    p.add_argument("--log-level", type=str.upper, choices=LEVEL_NAMES,
                   help="log level (default: $DUALLISTBOX_LOG_LEVEL or INFO)")
    p.set_defaults(func=cmd_show, available=None, selected=None, left_title=None, right_title=None)
    sub = p.add_subparsers(dest="sub")

    p_show = sub.add_parser("show", help="open the demo window")
    _add_item_overrides(p_show)
    p_show.add_argument("--left-title", help="label above the left (used) list")
    p_show.add_argument("--right-title", help="label above the right (available) list")
    p_show.set_defaults(func=cmd_show)

    p_list = sub.add_parser("list", help="print the item partition as JSON after applying moves")
    _add_item_overrides(p_list)
    p_list.add_argument("--to-selected", dest="moves", action="append", type=_to_selected,
                        metavar="ITEM", help="move ITEM from available to used (repeatable)")
    p_list.add_argument("--to-available", dest="moves", action="append", type=_to_available,
                        metavar="ITEM", help="move ITEM from used to available (repeatable)")
    p_list.add_argument("--pretty", action="store_true", help="indent the JSON output")
    p_list.set_defaults(func=cmd_list)

    p_paths = sub.add_parser("paths", help="print settings and log file paths")
    p_paths.add_argument("--json", action="store_true", help="print as JSON")
    p_paths.set_defaults(func=cmd_paths)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())
