# This file defines runtime configuration for a scripted navigation run.
# The loader merges YAML defaults with environment overrides so ad hoc and scripted runs share one surface.
# Lists are comma-separated in the environment (a literal comma is written "\,") and plain sequences in YAML.

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

VALID_OUTPUT_FORMATS = {"text", "json"}
DEFAULT_CONFIG_PATH = "configs/navigation.yaml"
_UNESCAPED_COMMA_RE = re.compile(r"(?<!\\),")


def _load_yaml(path: str) -> dict[str, Any]:
    if not Path(path).exists():
        return {}
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_list(name: str) -> list[str] | None:
    # Comma-separated; write a literal comma as "\,".
    value = _env_str(name)
    if value is None:
        return None
    parts = (part.replace("\\,", ",").strip() for part in _UNESCAPED_COMMA_RE.split(value))
    return [part for part in parts if part]


def _as_str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list, got: {type(value).__name__}")
    return [str(item) for item in value]


@dataclass(frozen=True)
class NavigationConfig:
    items: list[str]
    moves: list[str]
    output_format: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": list(self.items),
            "moves": list(self.moves),
            "output_format": self.output_format,
        }


def load_navigation_config(
    *,
    config_path: str = DEFAULT_CONFIG_PATH,
    items: list[str] | None = None,
    moves: list[str] | None = None,
    output_format: str | None = None,
) -> NavigationConfig:
    """Resolve a navigation run; explicit arguments win over environment and YAML values."""

    cfg = _load_yaml(config_path)

    if items is None:
        items = _env_list("NAVIGATION_ITEMS")
        if items is None:
            items = _as_str_list(cfg.get("items"), "items")
    if moves is None:
        moves = _env_list("NAVIGATION_MOVES")
        if moves is None:
            moves = _as_str_list(cfg.get("moves"), "moves")
    if output_format is None:
        output_format = str(_env_str("NAVIGATION_OUTPUT_FORMAT", str(cfg.get("output_format", "text"))))
    output_format = output_format.lower()

    if output_format not in VALID_OUTPUT_FORMATS:
        raise ValueError(
            f"NAVIGATION_OUTPUT_FORMAT must be one of {sorted(VALID_OUTPUT_FORMATS)}, got: {output_format!r}"
        )

    return NavigationConfig(items=list(items), moves=list(moves), output_format=output_format)
