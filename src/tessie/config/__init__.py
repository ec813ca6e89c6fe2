"""Runtime settings for Tessie."""

from tessie.config.models import LOG_FORMATS, LOG_LEVELS, LoggingConfig

__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LoggingConfig",
]
