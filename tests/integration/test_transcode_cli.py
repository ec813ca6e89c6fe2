"""Integration tests for the tessie command.

ffmpeg itself is mocked: detection is patched at the PATH lookup and
version probe, and the transcode at subprocess.run.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from tessie.cli import main
from tessie.formats import Format

WHICH = "tessie.tools.detection.shutil.which"
PROBE = "tessie.tools.detection.run_command"

# Silence info logging so output holds only the command result
QUIET = ["--log-level", "error"]

# =============================================================================
# Help and Basic Validation Tests
# =============================================================================


class TestCommandBasics:
    """Basic tests for help and argument validation."""

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Transcode videos using ffmpeg" in result.output
        for option in ("-f", "-s", "-e", "-d", "-m", "--dry-run", "--json"):
            assert option in result.output
        for name in Format.names():
            assert name in result.output

    def test_missing_input(self, ffmpeg_on_path, mock_ffmpeg_run) -> None:
        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == 2  # Click's error for missing argument
        assert "Missing argument" in result.output
        mock_ffmpeg_run.assert_not_called()


# =============================================================================
# Successful Runs
# =============================================================================


class TestTranscodeCommand:
    """End-to-end runs with mocked ffmpeg."""

    def test_default_format_is_youtube(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        """movie.mov with no -f becomes movie.mp4 using the full YouTube bundle."""
        runner = CliRunner()
        result = runner.invoke(main, [str(video_dir / "movie.mov")])

        assert result.exit_code == 0, result.output
        cmd = mock_ffmpeg_run.call_args.args[0]
        assert cmd == [
            "/usr/bin/ffmpeg",
            *Format.YOUTUBE.input_args,
            "-i",
            str(video_dir / "movie.mov"),
            *Format.YOUTUBE.output_args,
            str(video_dir / "movie.mp4"),
        ]

    def test_all_options(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "-f",
                "Copy",
                "-s",
                "00:00:10",
                "-e",
                "00:01:00",
                "-d",
                "20",
                "-m",
                "0:0",
                "-m",
                "0:1",
                str(video_dir / "video.mkv"),
            ],
        )

        assert result.exit_code == 0, result.output
        cmd = mock_ffmpeg_run.call_args.args[0]
        assert cmd[1:] == [
            "-ss", "00:00:10",
            "-to", "00:01:00",
            "-t", "20",
            "-i", str(video_dir / "video.mkv"),
            "-map", "0:0",
            "-map", "0:1",
            "-c:v", "copy",
            "-c:a", "copy",
            str(video_dir / "video.copy.mkv"),
        ]  # fmt: skip

    def test_gif_format(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["-f", "gif", str(video_dir / "clip.mp4")])

        assert result.exit_code == 0, result.output
        assert mock_ffmpeg_run.call_args.args[0][-1] == str(video_dir / "clip.gif")

    def test_json_output(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [*QUIET, "--json", "-f", "gif", str(video_dir / "clip.mp4")],
        )

        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        assert parsed["status"] == "completed"
        assert parsed["format"] == "gif"
        assert parsed["output"] == str(video_dir / "clip.gif")
        assert parsed["returncode"] == 0
        assert parsed["dry_run"] is False

    def test_dry_run_prints_command(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [*QUIET, "--dry-run", "-f", "copy", str(video_dir / "video.mkv")],
        )

        assert result.exit_code == 0, result.output
        mock_ffmpeg_run.assert_not_called()
        assert result.output.startswith("/usr/bin/ffmpeg -i ")
        assert "-c:v copy -c:a copy" in result.output


class TestLoggingOptions:
    """Tests for the --log-* options."""

    def test_log_file_takes_log_lines(
        self, video_dir: Path, tmp_path: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        log_file = tmp_path / "tessie.log"

        runner = CliRunner()
        result = runner.invoke(
            main, ["--log-file", str(log_file), str(video_dir / "movie.mov")]
        )

        assert result.exit_code == 0, result.output
        assert "Running: /usr/bin/ffmpeg" in log_file.read_text()
        assert "Running:" not in result.output

    def test_log_json(
        self, video_dir: Path, tmp_path: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        log_file = tmp_path / "tessie.log"

        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "--log-json",
                "--log-file",
                str(log_file),
                str(video_dir / "movie.mov"),
            ],
        )

        assert result.exit_code == 0, result.output
        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [entry["message"] for entry in entries]
        assert any(message.startswith("Running: ") for message in messages)
        assert all(entry["level"] == "INFO" for entry in entries)

    def test_invalid_log_level(self, video_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, ["--log-level", "critical", str(video_dir / "movie.mov")]
        )

        assert result.exit_code == 2


# =============================================================================
# Error Handling Tests
# =============================================================================


class TestTranscodeErrors:
    """Tests for fatal conditions and their exit codes."""

    def test_tool_missing(self, video_dir: Path, mock_ffmpeg_run) -> None:
        with patch(WHICH, return_value=None):
            runner = CliRunner()
            result = runner.invoke(main, [str(video_dir / "movie.mov")])

        assert result.exit_code == 30
        assert "ffmpeg is not usable" in result.output
        mock_ffmpeg_run.assert_not_called()

    def test_probe_failure_spawns_no_transcode(
        self, video_dir: Path, mock_ffmpeg_run
    ) -> None:
        with (
            patch(WHICH, return_value="/usr/bin/ffmpeg"),
            patch(PROBE, return_value=("", "", 1)),
        ):
            runner = CliRunner()
            result = runner.invoke(main, [str(video_dir / "movie.mov")])

        assert result.exit_code == 30
        mock_ffmpeg_run.assert_not_called()

    def test_tool_checked_before_format(self, video_dir: Path) -> None:
        """The probe runs first, so a bad format still reports the missing tool."""
        with patch(WHICH, return_value=None):
            runner = CliRunner()
            result = runner.invoke(main, ["-f", "webm", str(video_dir / "movie.mov")])

        assert result.exit_code == 30

    def test_unknown_format(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["-f", "webm", str(video_dir / "movie.mov")])

        assert result.exit_code == 10
        assert "Unknown format: 'webm'" in result.output
        mock_ffmpeg_run.assert_not_called()

    def test_copy_without_extension(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["-f", "copy", str(video_dir / "noext")])

        assert result.exit_code == 20
        assert "Expected a file extension" in result.output
        mock_ffmpeg_run.assert_not_called()

    def test_output_exists(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        (video_dir / "movie.mp4").write_bytes(b"keep me")

        runner = CliRunner()
        result = runner.invoke(main, [str(video_dir / "movie.mov")])

        assert result.exit_code == 22
        assert "Output already exists" in result.output
        assert (video_dir / "movie.mp4").read_bytes() == b"keep me"
        mock_ffmpeg_run.assert_not_called()

    def test_transcode_failure(self, video_dir: Path, ffmpeg_on_path) -> None:
        with patch(
            "tessie.executor.transcode.executor.subprocess.run",
            return_value=MagicMock(returncode=1),
        ):
            runner = CliRunner()
            result = runner.invoke(main, [str(video_dir / "movie.mov")])

        assert result.exit_code == 40
        assert "failed (exit code 1)" in result.output

    def test_json_error(
        self, video_dir: Path, ffmpeg_on_path, mock_ffmpeg_run
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [*QUIET, "--json", "-f", "webm", str(video_dir / "movie.mov")],
        )

        assert result.exit_code == 10
        parsed = json.loads(result.output)
        assert parsed["error"]["code"] == "UNKNOWN_FORMAT"
