"""ffmpeg detection.

Finds ffmpeg on PATH and runs its version probe. Any failure to launch the
probe, or a non-zero exit from it, marks the tool as unusable.
"""

import logging
import re
import shutil
import subprocess  # nosec B404 - subprocess is required for tool detection
from pathlib import Path

from tessie.core.subprocess_utils import run_command
from tessie.exceptions import ToolUnavailableError
from tessie.tools.models import ToolInfo, ToolStatus

logger = logging.getLogger(__name__)

FFMPEG = "ffmpeg"

# Timeout for the version probe (seconds)
DETECTION_TIMEOUT = 10

# "ffmpeg version 6.1.1-3ubuntu5 Copyright (c) 2000-2023 ..."
_FFMPEG_VERSION_PATTERN = r"ffmpeg version (\S+)"


def _find_tool(name: str) -> Path | None:
    """Find a tool executable on PATH.

    Args:
        name: Tool name (e.g., "ffmpeg").

    Returns:
        Path to tool executable, or None if not found.
    """
    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)
    return None


def _run_probe(args: list[str]) -> tuple[str, str, int]:
    """Run a version probe, folding launch failures into a return code.

    Returns:
        Tuple of (stdout, stderr, returncode); returncode is -1 when the
        command could not be run to completion.
    """
    try:
        return run_command(args, timeout=DETECTION_TIMEOUT)
    except subprocess.TimeoutExpired:
        return "", "timeout", -1
    except FileNotFoundError:
        return "", "not found", -1
    except OSError as e:
        logger.warning("Command failed: %s - %s", " ".join(args), e)
        return "", str(e), -1


def detect_ffmpeg() -> ToolInfo:
    """Detect ffmpeg and its version.

    Returns:
        ToolInfo describing the detection result. Never raises.
    """
    info = ToolInfo(name=FFMPEG)

    path = _find_tool(FFMPEG)
    if not path:
        info.status = ToolStatus.MISSING
        info.status_message = f"{FFMPEG} not found in PATH"
        return info

    info.path = path

    stdout, stderr, rc = _run_probe([str(path), "-version"])
    if rc != 0:
        info.status = ToolStatus.ERROR
        detail = stderr.strip() or f"exit code {rc}"
        info.status_message = f"`{FFMPEG} -version` failed: {detail}"
        return info

    version_match = re.search(_FFMPEG_VERSION_PATTERN, stdout)
    if version_match:
        info.version = version_match.group(1)

    info.status = ToolStatus.AVAILABLE
    info.status_message = None
    return info


def require_ffmpeg() -> ToolInfo:
    """Detect ffmpeg, raising an error if it is not usable.

    Returns:
        ToolInfo for an available ffmpeg (path is set).

    Raises:
        ToolUnavailableError: If ffmpeg is missing or its probe failed.
    """
    info = detect_ffmpeg()
    if not info.is_available():
        raise ToolUnavailableError(
            FFMPEG, info.status_message or info.status.value
        )

    logger.debug(
        "Using %s %s at %s", FFMPEG, info.version or "(unknown version)", info.path
    )
    return info
