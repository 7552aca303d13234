"""Smoke tests for the CLI entry point."""
from __future__ import annotations

import json

import pytest

from outreach_parser import __main__
from outreach_parser.cli import main


def _write_blob(tmp_path):
    input_path = tmp_path / "pasted.txt"
    input_path.write_text(
        "1. Room 814 - Jane Doe - 0821234567\nB12 0735551111\nJohn - 082 555 1234\n",
        encoding="utf-8",
    )
    return input_path


def test_cli_prints_table(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([str(_write_blob(tmp_path))])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Jane Doe" in captured.out
    assert "+27821234567" in captured.out
    assert "Total lines: 3  Contacts found: 2  Errors: 0" in captured.out


def test_cli_json_output_with_config(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"parser": {"country_code": "27"}}), encoding="utf-8")

    exit_code = main([str(_write_blob(tmp_path)), "--config", str(config_path), "--format", "json", "--concurrent"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["total_lines"] == 3
    assert payload["successfully_parsed"] == 2
    assert payload["skipped_lines"] == [2]
    assert [contact["name"] for contact in payload["contacts"]] == ["Jane Doe", "John"]


def test_module_entry_point_delegates_to_cli(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main([str(_write_blob(tmp_path)), "--format", "json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["successfully_parsed"] == 2


def test_module_entry_point_without_arguments_shows_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main([])

    captured = capsys.readouterr()
    assert "python -m outreach_parser" in captured.out
    assert exit_code == 2


def test_module_entry_point_usage_errors_name_the_module(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        __main__.main([str(_write_blob(tmp_path)), "--format", "csv"])

    assert excinfo.value.code == 2
    assert "usage: python -m outreach_parser" in capsys.readouterr().err
