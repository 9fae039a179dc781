"""Abstract interface for downloading transcript documents."""

from abc import ABC, abstractmethod
from typing import Any


class TranscriptFetcher(ABC):
    """Downloads a transcript document from its published location."""

    @abstractmethod
    def fetch(self, url: str) -> dict[str, Any]:
        """
        Downloads and decodes a JSON transcript document.

        Raises:
            FetchError: On network failure, a non-success response, or a body
                that is not a JSON object.
        """
