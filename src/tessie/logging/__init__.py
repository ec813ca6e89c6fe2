"""Logging for Tessie: plain text or JSON lines, to stderr or a rotating file."""

from tessie.logging.config import configure_logging
from tessie.logging.formatters import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
