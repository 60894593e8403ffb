# This test file exercises the navigation CLI end to end in-process.
# It covers text and JSON output, config-file defaults, and usage errors for bad scripts.

from __future__ import annotations

import json
from pathlib import Path

import pytest

from list_zipper.navigation.navigate import main, run_navigation
from list_zipper.navigation.navigation_config import NavigationConfig


def test_run_navigation_returns_summary_and_rendering() -> None:
    result = run_navigation(NavigationConfig(items=["a", "b", "c", "d"], moves=["<", "<"], output_format="text"))
    assert result["rendered"] == "[c, d, a, b]"
    assert result["summary"]["focus"] == "c"
    assert result["summary"]["position"] == 2


def test_cli_prints_text_rendering(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--config", str(tmp_path / "absent.yaml"), "--items", "a", "b", "c", "--moves", "=b"])
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "[b, c, a]"


def test_cli_prints_json_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "nav.yaml"
    config_path.write_text("items: [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]\nmoves: ['=5']\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "--moves", "=5", ">", "--format", "json"])
    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["focus"] == "6"
    assert payload["rotation"] == ["6", "7", "8", "9", "0", "1", "2", "3", "4", "5"]


def test_cli_uses_config_file_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "nav.yaml"
    config_path.write_text("items: [p, q, r]\nmoves: ['$']\n", encoding="utf-8")

    main(["--config", str(config_path)])
    assert capsys.readouterr().out.strip() == "[r, p, q]"


def test_cli_rejects_bad_moves_as_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "absent.yaml"), "--items", "a", "--moves", "jump"])
    assert excinfo.value.code == 2


def test_cli_with_no_items_prints_empty_ring(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path / "absent.yaml"), "--moves", ">", "<"])
    assert capsys.readouterr().out.strip() == "[]"


def test_cli_format_flag_replaces_invalid_environment_format(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("NAVIGATION_OUTPUT_FORMAT", "xml")
    exit_code = main(["--config", str(tmp_path / "absent.yaml"), "--items", "a", "b", "--format", "text"])
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "[a, b]"


def test_cli_items_flag_replaces_malformed_yaml_items(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "nav.yaml"
    config_path.write_text("items: abc\nmoves: ['>']\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "--items", "a", "b"])
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "[b, a]"
