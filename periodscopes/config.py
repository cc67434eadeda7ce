"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pendulum import WeekDay
from pydantic import BaseModel, field_validator

from .domain.exceptions import ConfigError
from .domain.period_calculator import PeriodRangeCalculator
from .services.period_scopes import DEFAULT_COLUMN, PeriodScopes

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "periodscopes.yaml"


class AppConfig(BaseModel):
    """Library configuration."""
    timezone: Optional[str] = None  # None = host local timezone
    default_column: str = DEFAULT_COLUMN
    week_starts_at: str = "monday"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        """Ensure the timezone is a known IANA name."""
        if value is None:
            return value
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @field_validator("default_column")
    @classmethod
    def validate_default_column(cls, value: str) -> str:
        """Ensure the default column is not blank."""
        value = value.strip()
        if not value:
            raise ValueError("default_column must not be empty")
        return value

    @field_validator("week_starts_at")
    @classmethod
    def validate_week_starts_at(cls, value: str) -> str:
        """Validate the first day of the week is a weekday name."""
        normalized = value.strip().lower()
        if normalized.upper() not in WeekDay.__members__:
            names = ", ".join(day.name.lower() for day in WeekDay)
            raise ValueError(f"week_starts_at must be one of {names}, got {value!r}")
        return normalized

    def get_week_start(self) -> WeekDay:
        """Get the first day of the week as a pendulum WeekDay."""
        return WeekDay[self.week_starts_at.upper()]

    def build_calculator(self, clock=None) -> PeriodRangeCalculator:
        """Create a calculator honouring the configured timezone and week start."""
        return PeriodRangeCalculator(
            clock=clock,
            timezone=self.timezone,
            week_starts_at=self.get_week_start(),
        )

    def build_scopes(self, clock=None) -> PeriodScopes:
        """Create query scopes with the configured default column."""
        return PeriodScopes(
            calculator=self.build_calculator(clock=clock),
            default_column=self.default_column,
        )

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If the file is not valid YAML or not a mapping
            ValueError: If a setting is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for periodscopes.yaml in current directory
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load an explicit config file, or the default one if it exists.

    Without an explicit path and without a default file, defaults are used.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    logger.debug("No config file found, using defaults")
    return AppConfig()
