"""Shared helpers with no dependencies on other Tessie modules."""

from tessie.core.subprocess_utils import run_command

__all__ = ["run_command"]
