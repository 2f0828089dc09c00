"""Configuration schema, loading and application."""

from datetime import tzinfo

from loguru import logger

from ..utils.logging import setup_logger
from ..utils.time_utils import set_default_timezone
from .schema import CalendarConfig, load_config


def configure(config: CalendarConfig) -> tzinfo:
    """Apply a configuration to the running process.

    Sets up logging and installs the configured default timezone.

    Args:
        config: Validated configuration.

    Returns:
        The default timezone now in effect.
    """
    setup_logger(
        log_level=config.log_level,
        log_to_file=config.log_to_file,
        log_dir=config.log_dir,
    )
    zone = set_default_timezone(config.timezone)
    logger.info(f"Calendar default timezone: {zone}")
    return zone


__all__ = ["CalendarConfig", "configure", "load_config"]
