"""httpx implementation of the TranscriptFetcher interface."""

from typing import Any

import httpx

from subtitle_service.exceptions import FetchError
from subtitle_service.logging import setup_logging

from .interfaces import TranscriptFetcher

logger = setup_logging()


class HttpxTranscriptFetcher(TranscriptFetcher):
    """Downloads transcript documents over HTTP."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def fetch(self, url: str) -> dict[str, Any]:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.exception(
                "Transcript download rejected",
                extra={"url": url, "status_code": e.response.status_code},
            )
            raise FetchError(url, e.response.status_code, e) from e
        except httpx.HTTPError as e:
            logger.exception("Transcript download failed", extra={"url": url})
            raise FetchError(url, cause=e) from e

        try:
            document = response.json()
        except ValueError as e:
            logger.exception("Transcript is not valid JSON", extra={"url": url})
            raise FetchError(url, response.status_code, e) from e

        if not isinstance(document, dict):
            raise FetchError(
                url, response.status_code, TypeError("transcript is not a JSON object")
            )

        logger.info(
            "Transcript downloaded",
            extra={"url": url, "size": len(response.content)},
        )
        return document
