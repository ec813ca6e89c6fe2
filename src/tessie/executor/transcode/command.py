"""FFmpeg command building for transcoding.

ffmpeg is sensitive to argument position: trim and decode flags apply to the
next ``-i``, stream maps and encode flags apply to the next output. The
command is therefore always laid out as::

    ffmpeg [-ss S] [-to E] [-t D] <format input args> -i INPUT
           [-map M]... <format output args> OUTPUT
"""

from __future__ import annotations

import shlex
from pathlib import Path

from .types import TranscodeRequest


def build_trim_args(request: TranscodeRequest) -> list[str]:
    """Build the optional ``-ss``/``-to``/``-t`` flag pairs."""
    args: list[str] = []
    if request.start is not None:
        args.extend(["-ss", request.start])
    if request.end is not None:
        args.extend(["-to", request.end])
    if request.duration is not None:
        args.extend(["-t", request.duration])
    return args


def build_map_args(stream_maps: tuple[str, ...]) -> list[str]:
    """Build one ``-map <value>`` pair per stream selector, order preserved."""
    args: list[str] = []
    for stream_map in stream_maps:
        args.extend(["-map", stream_map])
    return args


def build_ffmpeg_args(request: TranscodeRequest) -> list[str]:
    """Build the ffmpeg arguments (without the executable) for a request.

    Args:
        request: The transcode request.

    Returns:
        List of arguments; the output path is always the last one.
    """
    args = build_trim_args(request)
    args.extend(request.format.input_args)
    args.extend(["-i", str(request.input_path)])
    args.extend(build_map_args(request.stream_maps))
    args.extend(request.format.output_args)
    args.append(str(request.output_path))
    return args


def build_ffmpeg_command(
    ffmpeg_path: Path | str, request: TranscodeRequest
) -> list[str]:
    """Build the full ffmpeg command line for a request."""
    return [str(ffmpeg_path), *build_ffmpeg_args(request)]


def format_command(cmd: list[str] | tuple[str, ...]) -> str:
    """Render a command as a shell-quoted string for display."""
    return shlex.join(cmd)
