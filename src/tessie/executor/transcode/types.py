"""Transcode request and result types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tessie.formats import Format


@dataclass(frozen=True)
class TranscodeRequest:
    """Everything needed to run one transcode.

    ``end`` and ``duration`` are independent; when both are set ffmpeg
    decides which one wins.
    """

    format: Format
    input_path: Path
    output_path: Path

    stream_maps: tuple[str, ...] = ()
    """Values for repeated ``-map`` flags, in order."""

    start: str | None = None
    """Trim start timestamp, passed to ``-ss`` verbatim."""

    end: str | None = None
    """Trim end timestamp, passed to ``-to`` verbatim."""

    duration: str | None = None
    """Trim duration, passed to ``-t`` verbatim."""

    @classmethod
    def for_input(
        cls,
        format: Format,
        input_path: Path,
        *,
        stream_maps: tuple[str, ...] | list[str] = (),
        start: str | None = None,
        end: str | None = None,
        duration: str | None = None,
    ) -> TranscodeRequest:
        """Build a request whose output path is derived from the format.

        Raises:
            OutputNameError: If the format cannot name an output for the input.
        """
        return cls(
            format=format,
            input_path=input_path,
            output_path=format.output_path(input_path),
            stream_maps=tuple(stream_maps),
            start=start,
            end=end,
            duration=duration,
        )


@dataclass(frozen=True)
class TranscodeResult:
    """Result of a completed transcode."""

    output_path: Path
    command: tuple[str, ...]
    returncode: int | None = None
    """ffmpeg exit status, None for a dry run."""

    elapsed_seconds: float = 0.0

    @property
    def dry_run(self) -> bool:
        return self.returncode is None
