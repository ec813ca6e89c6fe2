"""External tool detection.

Tessie depends on a single external tool, ffmpeg, located through PATH.
"""

from tessie.tools.detection import detect_ffmpeg, require_ffmpeg
from tessie.tools.models import ToolInfo, ToolStatus

__all__ = [
    "ToolInfo",
    "ToolStatus",
    "detect_ffmpeg",
    "require_ffmpeg",
]
