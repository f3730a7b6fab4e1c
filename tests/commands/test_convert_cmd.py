"""Tests for the convert CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tsconv.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestConvertCommand:
    def test_timestamp_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "UTC", "--json", "convert", "1700000000"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "convert"
        assert data["data"]["kind"] == "timestamp"
        assert data["data"]["epoch_millis"] == 1700000000000
        assert data["data"]["canonical_string"] == "2023-11-14T22:13:20.000Z"

    def test_iso_date_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "2024-01-01T00:00:00Z"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["kind"] == "date"
        assert data["data"]["epoch_millis"] == 1704067200000

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "UTC", "convert", "1700000000"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "Date string" in result.stdout
        assert "Beijing Time" in result.stdout
        assert "2023-11-15 06:13:20" in result.stdout

    def test_multiword_input_is_joined(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "UTC", "--json", "convert", "Jan", "2,", "2024"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["input"] == "Jan 2, 2024"
        assert data["data"]["epoch_millis"] == 1704153600000

    def test_compact_date_respects_tz_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "+08:00", "--json", "convert", "20240101"])
        data = json.loads(result.stdout)
        assert data["data"]["canonical_string"] == "2024-01-01"
        assert data["data"]["epoch_millis"] == 1704038400000

    def test_field_prints_raw_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "1700000000", "--field", "iso"])
        assert result.exit_code == 0
        assert result.stdout == "2023-11-14T22:13:20.000Z\n"

    def test_field_seconds_from_millis(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "1700000000999", "-f", "seconds"])
        assert result.stdout == "1700000000\n"

    def test_quiet_prints_values(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "UTC", "-q", "convert", "1700000000"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "2023-11-14 22:13:20",
            "2023-11-14T22:13:20.000Z",
            "2023-11-15 06:13:20",
            "2023-11-14 22:13:20",
            "1700000000000",
            "1700000000",
        ]

    def test_invalid_input_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "not-a-date"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INVALID_INPUT"

    def test_invalid_input_with_field_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "abc", "--field", "iso"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    def test_missing_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "EMPTY_INPUT"

    def test_unknown_field_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "0", "--field", "nope"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "tsconv convert 20240101" in result.output

    def test_config_file_label(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "tsconv.toml").write_text('[display]\ntimezone = "UTC"\nlabel = "Ops Clock"\n')
        result = cli_runner.invoke(cli, ["--tz", "UTC", "convert", "0"])
        assert result.exit_code == 0
        assert "Ops Clock" in result.stdout

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text('[display]\ntimezone = "-05:00"\n')
        result = cli_runner.invoke(
            cli, ["-c", str(cfg), "convert", "1700000000", "--field", "zoned"]
        )
        assert result.stdout == "2023-11-14 17:13:20\n"
