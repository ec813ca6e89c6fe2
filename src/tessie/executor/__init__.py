"""Execution layer for Tessie.

- transcode: request types, ffmpeg command building and the executor
"""

from tessie.executor.transcode import (
    TranscodeExecutor,
    TranscodeRequest,
    TranscodeResult,
)

__all__ = [
    "TranscodeExecutor",
    "TranscodeRequest",
    "TranscodeResult",
]
