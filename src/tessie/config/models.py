"""Logging settings.

Tessie reads no configuration file or environment variables; the CLI builds
a LoggingConfig straight from its --log-* options.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

# CRITICAL is not exposed via the CLI.
LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class LoggingConfig:
    """Where tessie's own log records go and what they look like."""

    level: str = "info"
    file: Path | None = None  # None logs to stderr
    format: str = "text"

    def __post_init__(self) -> None:
        if self.level.casefold() not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.level!r}, expected one of "
                f"{', '.join(LOG_LEVELS)}"
            )
        if self.format.casefold() not in LOG_FORMATS:
            raise ValueError(
                f"Unknown log format {self.format!r}, expected one of "
                f"{', '.join(LOG_FORMATS)}"
            )

    @property
    def level_number(self) -> int:
        return LOG_LEVELS[self.level.casefold()]

    @property
    def structured(self) -> bool:
        """True when records should be written as JSON lines."""
        return self.format.casefold() == "json"
