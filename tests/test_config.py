"""
Tests for configuration loading and validation.
"""

import pendulum
import pytest
from pendulum import WeekDay
from pydantic import ValidationError

from periodscopes.config import AppConfig, load_config
from periodscopes.domain.exceptions import ConfigError


def test_defaults():
    config = AppConfig()

    assert config.timezone is None
    assert config.default_column == "created_at"
    assert config.get_week_start() is WeekDay.MONDAY


def test_load_from_yaml(tmp_path):
    config_path = tmp_path / "periodscopes.yaml"
    config_path.write_text(
        "timezone: Europe/Berlin\n"
        "default_column: occurred_at\n"
        "week_starts_at: Sunday\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.timezone == "Europe/Berlin"
    assert config.default_column == "occurred_at"
    assert config.get_week_start() is WeekDay.SUNDAY


def test_empty_yaml_uses_defaults(tmp_path):
    config_path = tmp_path / "periodscopes.yaml"
    config_path.write_text("", encoding="utf-8")

    assert AppConfig.load_from_yaml(config_path) == AppConfig()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        AppConfig.load_from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml_raises_config_error(tmp_path):
    config_path = tmp_path / "periodscopes.yaml"
    config_path.write_text("timezone: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        AppConfig.load_from_yaml(config_path)


def test_non_mapping_root_raises_config_error(tmp_path):
    config_path = tmp_path / "periodscopes.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping at the root level"):
        AppConfig.load_from_yaml(config_path)


@pytest.mark.parametrize(
    "settings, message",
    [
        ({"timezone": "Mars/Olympus_Mons"}, "Unknown timezone"),
        ({"default_column": "   "}, "default_column must not be empty"),
        ({"week_starts_at": "funday"}, "week_starts_at must be one of"),
    ],
)
def test_invalid_settings(settings, message):
    with pytest.raises(ValidationError, match=message):
        AppConfig(**settings)


def test_build_scopes_applies_settings():
    fixed = pendulum.datetime(2024, 11, 27, 14, 35, tz="Europe/Berlin")
    config = AppConfig(timezone="Europe/Berlin", default_column="occurred_at", week_starts_at="sunday")

    scopes = config.build_scopes(clock=lambda: fixed)
    this_week = scopes.range_for("week", 0, True)

    assert scopes.default_column == "occurred_at"
    assert this_week.start == pendulum.datetime(2024, 11, 24, tz="Europe/Berlin")
