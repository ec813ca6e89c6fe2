"""Centralized exit codes for the Tessie CLI.

Exit code ranges:
    0: Success
    1-9: General and usage errors
    10-19: Validation errors (options)
    20-29: Target/file errors
    30-39: Tool/dependency errors
    40-49: Operation errors
"""

from enum import IntEnum

from tessie.exceptions import (
    MissingExtensionError,
    OutputExistsError,
    OutputNameError,
    TessieError,
    ToolUnavailableError,
    TranscodeFailedError,
    UnknownFormatError,
)


class ExitCode(IntEnum):
    """Exit codes for the Tessie CLI."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    USAGE_ERROR = 2  # Raised by click itself, e.g. missing INPUT argument

    # Validation errors (10-19)
    UNKNOWN_FORMAT = 10

    # Target/file errors (20-29)
    MISSING_EXTENSION = 20
    INVALID_OUTPUT_NAME = 21
    OUTPUT_EXISTS = 22

    # Tool/dependency errors (30-39)
    TOOL_NOT_AVAILABLE = 30

    # Operation errors (40-49)
    TRANSCODE_FAILED = 40


# Most specific classes first; exit_code_for() takes the first match.
ERROR_EXIT_CODES: tuple[tuple[type[TessieError], ExitCode], ...] = (
    (ToolUnavailableError, ExitCode.TOOL_NOT_AVAILABLE),
    (UnknownFormatError, ExitCode.UNKNOWN_FORMAT),
    (MissingExtensionError, ExitCode.MISSING_EXTENSION),
    (OutputNameError, ExitCode.INVALID_OUTPUT_NAME),
    (OutputExistsError, ExitCode.OUTPUT_EXISTS),
    (TranscodeFailedError, ExitCode.TRANSCODE_FAILED),
)


def exit_code_for(error: TessieError) -> ExitCode:
    """Return the exit code for a Tessie error."""
    for error_type, code in ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.GENERAL_ERROR
