# This module turns short move tokens into zipper navigation calls.
# It exists so a navigation session can be written down as data (YAML, env, or CLI args) and replayed.
# Steps, resets, and value searches map one-to-one onto the zipper's own operations.
# Unknown tokens are rejected up front so a script never half-applies.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from list_zipper.zipper.ring_zipper import Zipper

STEP_FORWARD_TOKENS = {">", "f", "forward"}
STEP_BACKWARD_TOKENS = {"<", "b", "backward"}
RESET_START_TOKENS = {"^", "start"}
RESET_END_TOKENS = {"$", "end"}
FIND_PREFIXES = ("=", "find:")
RFIND_PREFIXES = ("~", "rfind:")


@dataclass(frozen=True)
class Move:
    action: str
    value: str | None = None

    @property
    def as_text(self) -> str:
        if self.value is None:
            return self.action
        return f"{self.action}:{self.value}"


def _strip_prefix(token: str, prefixes: tuple[str, ...]) -> str | None:
    for prefix in prefixes:
        if token.startswith(prefix):
            return token[len(prefix) :]
    return None


def parse_move(token: str) -> Move:
    normalized = token.strip()
    lowered = normalized.lower()
    if lowered in STEP_FORWARD_TOKENS:
        return Move("forward")
    if lowered in STEP_BACKWARD_TOKENS:
        return Move("backward")
    if lowered in RESET_START_TOKENS:
        return Move("start")
    if lowered in RESET_END_TOKENS:
        return Move("end")

    for action, prefixes in (("find", FIND_PREFIXES), ("rfind", RFIND_PREFIXES)):
        value = _strip_prefix(normalized, prefixes)
        if value is None:
            continue
        if value == "":
            raise ValueError(f"Move {token!r} needs a value to search for")
        return Move(action, value)

    raise ValueError(f"Unknown move token: {token!r}")


def parse_moves(tokens: list[str]) -> list[Move]:
    return [parse_move(token) for token in tokens if token.strip()]


def _matches(value: str) -> Callable[[Any], bool]:
    def predicate(item: Any) -> bool:
        return str(item) == value

    return predicate


def apply_moves(zipper: Zipper[Any], moves: list[Move]) -> Zipper[Any]:
    """Apply ``moves`` to ``zipper`` in order and return it."""

    for move in moves:
        if move.action == "forward":
            zipper.step_forwards()
        elif move.action == "backward":
            zipper.step_backwards()
        elif move.action == "start":
            zipper.reset_start()
        elif move.action == "end":
            zipper.reset_end()
        elif move.action == "find":
            zipper.refocus(_matches(str(move.value)))
        elif move.action == "rfind":
            zipper.refocus_backwards(_matches(str(move.value)))
        else:
            raise ValueError(f"Unsupported move action: {move.action!r}")
    return zipper


def summarize(zipper: Zipper[Any]) -> dict[str, Any]:
    return {
        "size": len(zipper),
        "focus": zipper.focus(),
        "position": zipper.position,
        "rotation": zipper.to_list(),
    }
