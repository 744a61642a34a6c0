"""Tests for the create CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from resolution.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestCreateCommand:
    def test_create_writes_record(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["create", "Learn Rust", "-p", "5", "-d", "2999-01-01"])
        assert result.exit_code == 0, result.output
        store_file = tmp_path / "files" / "resolutions.csv"
        assert store_file.read_text(encoding="utf-8") == "Learn Rust,5,2999-01-01\n"

    def test_create_report(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["create", "Learn Rust", "--priority", "5", "--deadline", "2999-01-01"]
        )
        assert result.output.splitlines() == [
            "The following New Year's resolution has been created:",
            " - Text: Learn Rust",
            " - Priority: 5",
            " - Deadline: 2999-01-01",
        ]

    def test_create_without_deadline_omits_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "Run"])
        assert result.exit_code == 0
        assert "Priority: 1" in result.output
        assert "Deadline" not in result.output

    def test_invalid_priority(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["create", "Run", "-p", "11"])
        assert result.exit_code == 1
        expected = "The priority 11 is not valid. Please use a priority between 1 and 10."
        assert expected in result.output
        assert not (tmp_path / "files").exists()

    def test_invalid_deadline_format(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "Run", "-d", "2999/01/01"])
        assert result.exit_code == 1
        assert "Please use the format yyyy-MM-dd." in result.output

    def test_past_deadline(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "Run", "-d", "2000-01-01"])
        assert result.exit_code == 1
        assert "Please use a date after today." in result.output

    def test_non_integer_priority_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "Run", "-p", "high"])
        assert result.exit_code == 2

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "create", "Run", "-p", "3"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "create"
        assert data["data"]["entry"] == {"text": "Run", "priority": 3, "deadline": None}

    def test_file_override(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "mine.csv"
        result = cli_runner.invoke(cli, ["--file", str(target), "create", "Run"])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "Run,1,-\n"
        assert not (tmp_path / "files").exists()
