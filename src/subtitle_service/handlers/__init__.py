"""Handler exports."""

from .subtitle_handler import SubtitleHandler

__all__ = ["SubtitleHandler"]
