"""Root logger setup for the tessie CLI.

Tessie logs through exactly one handler: the log file when one is given,
stderr otherwise. Stdout is never touched; it belongs to ffmpeg and to
--json results.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from tessie.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from tessie.config.models import LoggingConfig

# Rotate the log file at 10MB, keeping five old files
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def _open_log_file(path: Path) -> logging.Handler | None:
    """Open a rotating handler on ``path``, or warn on stderr and return None."""
    path = path.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Point the root logger at the handler ``config`` asks for.

    Any handlers already on the root logger are replaced, so calling this
    twice does not duplicate output.
    """
    handler = _open_log_file(config.file) if config.file else None
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT))

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(config.level_number)
