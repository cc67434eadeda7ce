"""
Tests for the command line interface.
"""

from typer.testing import CliRunner

from periodscopes import __version__
from periodscopes.cli.app import app

runner = CliRunner()


def test_range_including_current(frozen_time):
    result = runner.invoke(app, ["range", "year", "2", "--include-current", "--tz", "Europe/Berlin"])

    assert result.exit_code == 0, result.output
    assert "2024-01-01 00:00:00" in result.output
    assert "2026-12-31 23:59:59" in result.output


def test_range_negative_periods(frozen_time):
    result = runner.invoke(app, ["range", "--tz", "Europe/Berlin", "--", "hour", "-1"])

    assert result.exit_code == 0, result.output
    assert "2024-11-27 13:00:00" in result.output
    assert "2024-11-27 13:59:59" in result.output


def test_range_invalid_unit(frozen_time):
    result = runner.invoke(app, ["range", "century", "1"])

    assert result.exit_code == 1
    assert "Invalid period unit" in result.output


def test_range_invalid_timezone(frozen_time):
    result = runner.invoke(app, ["range", "day", "0", "--tz", "Nowhere/Land"])

    assert result.exit_code == 1
    assert "Unknown timezone" in result.output


def test_shortcut(frozen_time):
    result = runner.invoke(app, ["shortcut", "tomorrow", "--tz", "Europe/Berlin"])

    assert result.exit_code == 0, result.output
    assert "2024-11-28 00:00:00" in result.output
    assert "2024-11-28 23:59:59" in result.output


def test_unknown_shortcut(frozen_time):
    result = runner.invoke(app, ["shortcut", "fortnight"])

    assert result.exit_code == 1
    assert "Unknown shortcut" in result.output


def test_shortcuts_table_uses_config_file(frozen_time, tmp_path):
    config_path = tmp_path / "periodscopes.yaml"
    config_path.write_text("timezone: Europe/Berlin\n", encoding="utf-8")

    result = runner.invoke(app, ["shortcuts", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "yesterday" in result.output
    assert "2024-11-26 00:00:00" in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["shortcuts", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
