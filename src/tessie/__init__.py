"""Tessie - transcode videos with ffmpeg into a few preset formats."""

__version__ = "0.1.0"
