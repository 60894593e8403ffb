# This module is the command-line entry point for replaying a navigation script over a ring of items.
# Values come from the YAML config, then environment overrides, then command-line flags.
# Output is either the bracketed rotation order or a JSON summary of the final zipper state.

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from list_zipper.common.logging import configure_logging
from list_zipper.navigation.moves import apply_moves, parse_moves, summarize
from list_zipper.navigation.navigation_config import (
    DEFAULT_CONFIG_PATH,
    VALID_OUTPUT_FORMATS,
    NavigationConfig,
    load_navigation_config,
)
from list_zipper.zipper.conversion import zipper_from_iterable

LOGGER = logging.getLogger("navigation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Walk a ring of items with a scripted sequence of moves")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML file with items, moves, output_format")
    parser.add_argument("--items", nargs="*", default=None, help="Items forming the ring, in order")
    parser.add_argument(
        "--moves",
        nargs="*",
        default=None,
        help="Move tokens: > < ^ $ =VALUE ~VALUE (or forward, backward, start, end, find:VALUE, rfind:VALUE)",
    )
    parser.add_argument("--format", choices=sorted(VALID_OUTPUT_FORMATS), default=None, help="Output format")
    return parser


def resolve_config(args: argparse.Namespace) -> NavigationConfig:
    return load_navigation_config(
        config_path=args.config,
        items=args.items,
        moves=args.moves,
        output_format=args.format,
    )


def run_navigation(config: NavigationConfig) -> dict[str, Any]:
    moves = parse_moves(config.moves)
    zipper = zipper_from_iterable(config.items)
    apply_moves(zipper, moves)
    LOGGER.info(
        "navigation completed size=%d moves=%d focus=%s",
        len(zipper),
        len(moves),
        zipper.focus(),
    )
    return {"summary": summarize(zipper), "rendered": str(zipper)}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        config = resolve_config(args)
        result = run_navigation(config)
    except ValueError as exc:
        parser.error(str(exc))

    if config.output_format == "json":
        print(json.dumps(result["summary"], indent=2, default=str))
    else:
        print(result["rendered"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
