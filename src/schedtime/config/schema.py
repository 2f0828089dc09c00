"""Pydantic configuration schema for the calendar utilities.

YAML configs are deserialized into ``CalendarConfig`` and validated on load.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml import YAML

from ..utils.time_utils import resolve_timezone


class CalendarConfig(BaseModel):
    """Root calendar configuration."""

    timezone: Optional[str] = Field(
        None, description="Default timezone identifier (host local zone if unset)"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Logging level"
    )
    log_to_file: bool = Field(False, description="Write logs to file")
    log_dir: Path = Field(Path("logs"), description="Directory for log files")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the timezone identifier resolves."""
        if not v:
            return None
        resolve_timezone(v)
        return v


def load_config(path: Path | str) -> CalendarConfig:
    """Load and validate calendar configuration from YAML.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated CalendarConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    yaml = YAML(typ="safe")
    with path.open("r") as f:
        raw_config = yaml.load(f)

    try:
        config = CalendarConfig(**(raw_config or {}))
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}") from e

    return config
