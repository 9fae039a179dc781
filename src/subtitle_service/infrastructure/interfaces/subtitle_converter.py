"""Abstract interface for transcript to subtitle conversion."""

from abc import ABC, abstractmethod
from typing import Any


class SubtitleConverter(ABC):
    """Pure conversion of a transcript document into subtitle text."""

    content_type = "text/vtt"

    @abstractmethod
    def convert(self, document: dict[str, Any]) -> str:
        """Returns the subtitle text for a transcript document."""
