"""Data models for external tool detection."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ToolStatus(Enum):
    """Status of an external tool."""

    AVAILABLE = "available"  # Tool found and version probe succeeded
    MISSING = "missing"  # Tool not found in PATH
    ERROR = "error"  # Tool found but version probe failed


@dataclass
class ToolInfo:
    """Information about a detected external tool."""

    name: str
    path: Path | None = None
    version: str | None = None  # As reported, e.g. "6.1.1-3ubuntu5"
    status: ToolStatus = ToolStatus.MISSING
    status_message: str | None = None

    def is_available(self) -> bool:
        """Return True if the tool is available and usable."""
        return self.status == ToolStatus.AVAILABLE and self.path is not None
