"""Captured subprocess runs for short tool probes.

The transcode itself is not run through here: it needs the terminal, see
tessie.executor.transcode.executor.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
from pathlib import Path

logger = logging.getLogger(__name__)


def run_command(args: list[str | Path], timeout: int) -> tuple[str, str, int]:
    """Run a command to completion with its output captured as text.

    Args:
        args: Executable followed by its arguments.
        timeout: Seconds before the child is killed.

    Returns:
        Tuple of (stdout, stderr, returncode).

    Raises:
        subprocess.TimeoutExpired: If the command outlived ``timeout``.
        OSError: If the command could not be launched.
    """
    argv = [str(arg) for arg in args]
    logger.debug("Probing: %s", " ".join(argv))

    completed = subprocess.run(  # nosec B603 - fixed tool path and flags
        argv,
        capture_output=True,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    logger.debug("%s exited with %d", Path(argv[0]).name, completed.returncode)
    return completed.stdout or "", completed.stderr or "", completed.returncode
