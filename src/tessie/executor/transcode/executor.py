"""Transcode executor: runs one ffmpeg transcode to completion.

The run is a straight line of fallible steps. Each step raises a
TessieError subclass on failure and nothing after it runs:

1. build the command from the request
2. refuse to overwrite an existing output file
3. run ffmpeg with inherited stdio and wait for it
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
import time
from pathlib import Path

from tessie.exceptions import (
    OutputExistsError,
    ToolUnavailableError,
    TranscodeFailedError,
)
from tessie.tools.detection import require_ffmpeg
from tessie.tools.models import ToolInfo

from .command import build_ffmpeg_command, format_command
from .types import TranscodeRequest, TranscodeResult

logger = logging.getLogger(__name__)


class TranscodeExecutor:
    """Runs ffmpeg for a TranscodeRequest.

    The executor is bound to a detected, available ffmpeg. Use create() to
    probe PATH and build one in a single step.
    """

    def __init__(self, tool: ToolInfo) -> None:
        """Initialize the executor.

        Args:
            tool: Detection result for ffmpeg.

        Raises:
            ToolUnavailableError: If the tool is not available.
        """
        if not tool.is_available() or tool.path is None:
            raise ToolUnavailableError(
                tool.name, tool.status_message or tool.status.value
            )
        self._tool = tool
        self._tool_path: Path = tool.path

    @classmethod
    def create(cls) -> TranscodeExecutor:
        """Probe for ffmpeg and return an executor bound to it.

        Raises:
            ToolUnavailableError: If ffmpeg is missing or its probe failed.
        """
        return cls(require_ffmpeg())

    @property
    def tool(self) -> ToolInfo:
        return self._tool

    @property
    def tool_path(self) -> Path:
        """Path to the ffmpeg executable."""
        return self._tool_path

    def build_command(self, request: TranscodeRequest) -> list[str]:
        return build_ffmpeg_command(self.tool_path, request)

    def check_output(self, request: TranscodeRequest) -> None:
        """Raise OutputExistsError if the output path is an existing file."""
        if request.output_path.is_file():
            raise OutputExistsError(request.output_path)

    def execute(
        self, request: TranscodeRequest, dry_run: bool = False
    ) -> TranscodeResult:
        """Transcode the request's input into its output path.

        ffmpeg inherits stdin, stdout, stderr and the working directory, so
        its own progress and diagnostics are shown live.

        Args:
            request: The transcode to run.
            dry_run: Build and log the command without running ffmpeg.

        Returns:
            TranscodeResult for the completed (or skipped) run.

        Raises:
            OutputExistsError: If the output file already exists.
            TranscodeFailedError: If ffmpeg cannot be launched or exits
                non-zero. Partial output written by ffmpeg is left in place.
        """
        cmd = self.build_command(request)
        self.check_output(request)

        if dry_run:
            logger.info("Dry run, not running: %s", format_command(cmd))
            return TranscodeResult(
                output_path=request.output_path, command=tuple(cmd)
            )

        logger.info("Running: %s", format_command(cmd))

        start_time = time.monotonic()
        try:
            completed = subprocess.run(cmd, check=False)  # nosec B603
        except OSError as e:
            raise TranscodeFailedError(request.input_path, None, str(e)) from e
        elapsed = time.monotonic() - start_time

        if completed.returncode != 0:
            logger.debug(
                "ffmpeg exited with %d after %.1fs", completed.returncode, elapsed
            )
            raise TranscodeFailedError(request.input_path, completed.returncode)

        logger.info("Wrote %s in %.1fs", request.output_path, elapsed)
        return TranscodeResult(
            output_path=request.output_path,
            command=tuple(cmd),
            returncode=completed.returncode,
            elapsed_seconds=elapsed,
        )
