"""Custom exceptions for Tessie.

Every failure in a run is fatal. The CLI maps each exception type to an
exit code and prints its message on stderr.
"""

from pathlib import Path


class TessieError(Exception):
    """Base class for Tessie errors."""

    pass


class ToolUnavailableError(TessieError):
    """Raised when ffmpeg is missing or its version probe failed."""

    def __init__(self, tool_name: str, reason: str) -> None:
        """Initialize the error.

        Args:
            tool_name: Name of the external tool (e.g., "ffmpeg").
            reason: Why the tool is not usable.
        """
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"{tool_name} is not usable: {reason}")


class UnknownFormatError(TessieError):
    """Raised when a format selector does not name a known preset."""

    def __init__(self, token: str, available: tuple[str, ...] = ()) -> None:
        self.token = token
        self.available = available
        message = f"Unknown format: {token!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)


class OutputNameError(TessieError):
    """Raised when no output file name can be derived from the input."""

    def __init__(self, input_path: Path, reason: str) -> None:
        self.input_path = input_path
        self.reason = reason
        super().__init__(f"{reason}: {input_path}")


class MissingExtensionError(OutputNameError):
    """Raised when the copy preset is used on an input without an extension.

    The copy output name reuses the input extension, so there is nothing to
    build it from.
    """

    def __init__(self, input_path: Path) -> None:
        super().__init__(input_path, "Expected a file extension")


class OutputExistsError(TessieError):
    """Raised when the derived output path already names a regular file."""

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        super().__init__(f"Output already exists: {output_path}")


class TranscodeFailedError(TessieError):
    """Raised when ffmpeg could not be launched or exited with non-zero status."""

    def __init__(
        self,
        input_path: Path,
        returncode: int | None,
        reason: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            input_path: The file being transcoded.
            returncode: ffmpeg exit status, or None if it never started.
            reason: Launch failure description, if any.
        """
        self.input_path = input_path
        self.returncode = returncode
        self.reason = reason
        if returncode is None:
            message = f"Failed to run ffmpeg on {input_path}: {reason}"
        else:
            message = f"Transcode of {input_path} failed (exit code {returncode})"
        super().__init__(message)
