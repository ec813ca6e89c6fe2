"""Output format presets.

Each format bundles the ffmpeg flags that go before the input (decode side),
the flags that go after it (encode side), and the rule for naming the output
file next to the input.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from tessie.exceptions import (
    MissingExtensionError,
    OutputNameError,
    UnknownFormatError,
)

# Filter graph for the gif preset: drop to 12fps, scale to 280px wide keeping
# the aspect ratio, then build a palette from the clip and apply it.
GIF_FILTER_GRAPH = (
    "[0:v] fps=12,scale=280:-1,split [a][b];[a] palettegen [p];[b][p] paletteuse"
)


def split_extension(name: str) -> tuple[str, str | None]:
    """Split a file name at its last dot.

    A leading dot does not start an extension, so ".hidden" has none. A
    trailing dot gives an empty one: "file." splits into ("file", "").
    """
    if name == "..":
        return name, None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, None
    return stem, extension


class Format(Enum):
    """The format to transcode to."""

    YOUTUBE = "youtube"  # NVENC H.264 + AAC in mp4, tuned for upload
    GIF = "gif"  # Palette-optimized animated gif
    COPY = "copy"  # Stream copy, for trimming or remapping without re-encode

    @classmethod
    def default(cls) -> Format:
        """Return the format used when none is requested."""
        return cls.YOUTUBE

    @classmethod
    def parse(cls, token: str | None) -> Format:
        """Look up a format by name, ignoring case.

        Args:
            token: Format name such as "YouTube", "gif" or "Copy".
                None selects the default format.

        Returns:
            The matching Format.

        Raises:
            UnknownFormatError: If the token names no format.
        """
        if token is None:
            return cls.default()
        try:
            return cls(token.casefold())
        except ValueError:
            raise UnknownFormatError(token, cls.names()) from None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the accepted format names."""
        return tuple(member.value for member in cls)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def input_args(self) -> tuple[str, ...]:
        """Flags placed before ``-i <input>``."""
        return _INPUT_ARGS[self]

    @property
    def output_args(self) -> tuple[str, ...]:
        """Flags placed after the input and stream maps, before the output."""
        return _OUTPUT_ARGS[self]

    def output_path(self, input_path: Path) -> Path:
        """Derive the output file path from the input path.

        The output always lands next to the input:

        - youtube: ``movie.mov`` -> ``movie.mp4``
        - gif: ``clip.mp4`` -> ``clip.gif``
        - copy: ``video.mkv`` -> ``video.copy.mkv``

        A trailing dot counts as an empty extension: ``file.`` becomes
        ``file.mp4``, ``file.gif`` or ``file.copy.``.

        Args:
            input_path: Path of the file to transcode.

        Returns:
            Path of the file ffmpeg should write.

        Raises:
            MissingExtensionError: For COPY when the input has no extension.
            OutputNameError: If the input path has no file name at all.
        """
        if not input_path.name:
            raise OutputNameError(input_path, "Input path has no file name")

        stem, extension = split_extension(input_path.name)
        if self is Format.YOUTUBE:
            return input_path.with_name(f"{stem}.mp4")
        if self is Format.GIF:
            return input_path.with_name(f"{stem}.gif")

        if extension is None:
            raise MissingExtensionError(input_path)
        return input_path.with_name(f"{stem}.copy.{extension}")


_DESCRIPTIONS: dict[Format, str] = {
    Format.YOUTUBE: "YouTube-optimized mp4 (NVENC H.264, AAC)",
    Format.GIF: "High-quality animated gif",
    Format.COPY: "Copy streams without re-encoding",
}

_INPUT_ARGS: dict[Format, tuple[str, ...]] = {
    Format.YOUTUBE: ("-y", "-hwaccel", "cuvid", "-c:v", "h264_cuvid"),
    Format.GIF: (),
    Format.COPY: (),
}

_OUTPUT_ARGS: dict[Format, tuple[str, ...]] = {
    Format.YOUTUBE: (
        "-c:v", "h264_nvenc",
        "-coder", "1",
        "-preset", "llhq",
        "-rc:v", "vbr_minqp",
        "-qmin:v", "21",
        "-qmax:v", "23",
        "-b:v", "5000k",
        "-maxrate:v", "8000k",
        "-profile:v", "high",
        "-bf", "2",
        "-c:a", "aac",
        "-profile:a", "aac_low",
        "-b:a", "384k",
        "-f", "mp4",
    ),  # fmt: skip
    Format.GIF: ("-filter_complex", GIF_FILTER_GRAPH, "-f", "gif"),
    Format.COPY: ("-c:v", "copy", "-c:a", "copy"),
}
