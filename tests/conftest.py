"""Shared test fixtures for Tessie."""

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tessie.tools.models import ToolInfo, ToolStatus

FFMPEG_PATH = "/usr/bin/ffmpeg"

FFMPEG_VERSION_OUTPUT = """\
ffmpeg version 6.1.1-3ubuntu5 Copyright (c) 2000-2023 the FFmpeg developers
built with gcc 13 (Ubuntu 13.2.0-23ubuntu3)
configuration: --prefix=/usr --enable-gpl --enable-nvenc
"""


@pytest.fixture(autouse=True)
def reset_root_logger() -> Iterator[None]:
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def ffmpeg_tool() -> ToolInfo:
    """Return a ToolInfo for an available ffmpeg."""
    return ToolInfo(
        name="ffmpeg",
        path=Path(FFMPEG_PATH),
        version="6.1.1-3ubuntu5",
        status=ToolStatus.AVAILABLE,
    )


@pytest.fixture
def ffmpeg_on_path() -> Iterator[MagicMock]:
    """Pretend ffmpeg is on PATH and its version probe succeeds.

    Yields the mock standing in for the probe's run_command.
    """
    with (
        patch("tessie.tools.detection.shutil.which", return_value=FFMPEG_PATH),
        patch(
            "tessie.tools.detection.run_command",
            return_value=(FFMPEG_VERSION_OUTPUT, "", 0),
        ) as mock_probe,
    ):
        yield mock_probe


@pytest.fixture
def mock_ffmpeg_run() -> Iterator[MagicMock]:
    """Replace the transcode subprocess.run with a mock exiting 0."""
    with patch(
        "tessie.executor.transcode.executor.subprocess.run",
        return_value=MagicMock(returncode=0),
    ) as mock_run:
        yield mock_run


@pytest.fixture
def video_dir(tmp_path: Path) -> Path:
    """Create a directory holding a few (empty) source files."""
    video_dir = tmp_path / "videos"
    video_dir.mkdir()
    (video_dir / "movie.mov").touch()
    (video_dir / "video.mkv").touch()
    (video_dir / "clip.mp4").touch()
    (video_dir / "noext").touch()
    return video_dir
