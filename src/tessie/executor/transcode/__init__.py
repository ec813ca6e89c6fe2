"""Transcoding with ffmpeg presets."""

from .command import (
    build_ffmpeg_args,
    build_ffmpeg_command,
    build_map_args,
    build_trim_args,
    format_command,
)
from .executor import TranscodeExecutor
from .types import TranscodeRequest, TranscodeResult

__all__ = [
    "TranscodeExecutor",
    "TranscodeRequest",
    "TranscodeResult",
    "build_ffmpeg_args",
    "build_ffmpeg_command",
    "build_map_args",
    "build_trim_args",
    "format_command",
]
