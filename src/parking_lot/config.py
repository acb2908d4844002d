"""Configuration models and loading utilities."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, StrictInt, field_validator


class LotConfig(BaseModel):
    """Parking lot layout configuration."""

    capacity: StrictInt = 10  # Number of spots, ids 0..capacity-1

    @field_validator("capacity")
    @classmethod
    def check_capacity(cls, v: int) -> int:
        """Reject negative capacities."""
        if v < 0:
            raise ValueError("capacity must be non-negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the level name and make sure logging knows it."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    lot: LotConfig = LotConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid configuration file {config_path}: {e}") from e

    # An empty file means defaults
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid configuration file {config_path}: expected a mapping, "
            f"got {type(data).__name__}"
        )

    return AppConfig(**data)


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path("config/config.yaml")
