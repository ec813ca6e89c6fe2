"""What the CLI prints.

Results go to stdout, errors to stderr. Both come out as JSON under --json.
"""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click

from tessie.cli.exit_codes import exit_code_for
from tessie.exceptions import TessieError
from tessie.executor import TranscodeRequest, TranscodeResult
from tessie.executor.transcode import format_command


def transcode_summary(
    request: TranscodeRequest, result: TranscodeResult
) -> dict[str, Any]:
    """Describe a transcode, run or dry, as a JSON-ready dict."""
    return {
        "status": "completed",
        "format": request.format.value,
        "input": str(request.input_path),
        "output": str(result.output_path),
        "command": list(result.command),
        "dry_run": result.dry_run,
        "returncode": result.returncode,
        "elapsed_seconds": round(result.elapsed_seconds, 3),
    }


def print_result(
    request: TranscodeRequest,
    result: TranscodeResult,
    json_output: bool = False,
) -> None:
    """Report a transcode on stdout.

    A real run prints nothing in text mode: ffmpeg already wrote its own
    progress to the terminal. A dry run prints the command it would have run.
    """
    if json_output:
        click.echo(json.dumps(transcode_summary(request, result), indent=2))
    elif result.dry_run:
        click.echo(format_command(result.command))


def fail(error: TessieError, json_output: bool = False) -> NoReturn:
    """Report ``error`` on stderr and exit with its exit code."""
    code = exit_code_for(error)
    if json_output:
        payload = {
            "status": "failed",
            "error": {"code": code.name, "message": str(error)},
        }
        click.echo(json.dumps(payload), err=True)
    else:
        click.echo(f"Error: {error}", err=True)

    sys.exit(int(code))
