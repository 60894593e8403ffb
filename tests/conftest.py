"""
Shared test configuration.
It pins environment settings so tests do not depend on the developer's shell or `.env` file.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from list_zipper.common import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings resolve to known values and navigation overrides are unset."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)
    for key in ("NAVIGATION_ITEMS", "NAVIGATION_MOVES", "NAVIGATION_OUTPUT_FORMAT"):
        monkeypatch.delenv(key, raising=False)

    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
