"""Run configuration with YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RunConfig(BaseModel):
    """All tuneable parameters for a packing run."""

    # Rotate every input box to tall orientation before packing
    normalize: bool = True
    # Check the finished layout (bounds, overlap, height ceiling)
    validate_layout: bool = True

    # Output
    render: bool = True
    verbose: bool = False
    log_level: str = "WARNING"
    results_dir: str | None = None

    # Base seed for the random built-in scenarios
    scenario_seed: int = Field(default=0, ge=0)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def load_config(yaml_path: str | Path) -> RunConfig:
    """Load a run configuration from a YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        RunConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty, not a mapping, or has invalid fields
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or not isinstance(data, dict):
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

    try:
        return RunConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: RunConfig, yaml_path: str | Path) -> None:
    """Save a run configuration to YAML for reproducibility."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False, indent=2)
