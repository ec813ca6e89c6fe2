"""CLI module for Tessie."""

import logging
from pathlib import Path

import click

from tessie.cli.output import fail, print_result
from tessie.config import LoggingConfig
from tessie.exceptions import TessieError
from tessie.executor import TranscodeExecutor, TranscodeRequest
from tessie.formats import Format
from tessie.logging import configure_logging

logger = logging.getLogger(__name__)


def _format_help() -> str:
    formats = "; ".join(f"{fmt.value}: {fmt.description}" for fmt in Format)
    return (
        f"The format of the transcode, case-insensitive "
        f"(default: {Format.default().value}). Available formats: {formats}."
    )


def _configure_logging(
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the --log-* options.

    Args:
        log_level: Log level (debug, info, warning, error). Defaults to info.
        log_file: Write logs here instead of stderr.
        log_json: Use JSON log lines.
    """
    configure_logging(
        LoggingConfig(
            level=log_level or "info",
            file=log_file,
            format="json" if log_json else "text",
        )
    )


@click.command("tessie", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tessie")
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "format_name",
    default=None,
    metavar="FORMAT",
    help=_format_help(),
)
@click.option(
    "--start",
    "-s",
    default=None,
    help="At which timestamp we should transcode from.",
)
@click.option(
    "--end",
    "-e",
    default=None,
    help="At which timestamp the transcoding should end.",
)
@click.option(
    "--duration",
    "-d",
    default=None,
    help="How long the transcoding should be.",
)
@click.option(
    "--map",
    "-m",
    "stream_maps",
    multiple=True,
    help="Map tracks (0:0 is usually video, 0:1=first audio). Repeatable.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the ffmpeg command without running it.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output result as JSON.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
def main(
    input_path: Path,
    format_name: str | None,
    start: str | None,
    end: str | None,
    duration: str | None,
    stream_maps: tuple[str, ...],
    dry_run: bool,
    json_output: bool,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Transcode videos using ffmpeg into different formats.

    INPUT is the file to transcode. The output is written next to it with a
    name derived from the format, and is never overwritten.
    """
    _configure_logging(log_level, log_file, log_json)

    try:
        executor = TranscodeExecutor.create()
        request = TranscodeRequest.for_input(
            Format.parse(format_name),
            input_path,
            stream_maps=stream_maps,
            start=start,
            end=end,
            duration=duration,
        )
        result = executor.execute(request, dry_run=dry_run)
    except TessieError as e:
        logger.debug("Aborting: %s", e, exc_info=True)
        fail(e, json_output)

    print_result(request, result, json_output)
