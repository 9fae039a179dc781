"""Turns finished transcripts into published subtitle files."""

import io

from subtitle_service.config import StorageConfig
from subtitle_service.domain import (
    StagedCopy,
    SubtitleArtifact,
    public_url,
    subtitle_key,
)
from subtitle_service.exceptions import (
    CleanupWarning,
    ConversionError,
    PublishError,
    StorageUploadError,
)
from subtitle_service.infrastructure.interfaces import (
    StorageClient,
    SubtitleConverter,
    TranscriptFetcher,
)
from subtitle_service.logging import setup_logging

logger = setup_logging()


class SubtitlePublisher:
    """Fetches, converts, and uploads subtitles; removes staged copies."""

    def __init__(
        self,
        fetcher: TranscriptFetcher,
        converter: SubtitleConverter,
        storage: StorageClient,
        region: str,
        config: StorageConfig,
    ):
        self._fetcher = fetcher
        self._converter = converter
        self._storage = storage
        self._region = region
        self._config = config

    def publish(self, job_name: str, transcript_uri: str) -> SubtitleArtifact:
        """
        Publishes the subtitle track of a completed job.

        Args:
            job_name: Name of the completed transcription job.
            transcript_uri: Location of the job's transcript document.

        Returns:
            SubtitleArtifact with the public URL of the uploaded file.

        Raises:
            FetchError: If the transcript cannot be downloaded.
            ConversionError: If the transcript cannot be converted.
            PublishError: If the subtitle upload fails.
        """
        document = self._fetcher.fetch(transcript_uri)

        try:
            subtitle_text = self._converter.convert(document)
        except Exception as e:
            logger.exception("Subtitle conversion failed", extra={"job_name": job_name})
            raise ConversionError(job_name, e) from e

        key = subtitle_key(self._config.subtitle_prefix, job_name)
        payload = subtitle_text.encode("utf-8")
        try:
            self._storage.upload(
                bucket_name=self._config.bucket_name,
                object_name=key,
                data=io.BytesIO(payload),
                size=len(payload),
                content_type=self._converter.content_type,
            )
        except StorageUploadError as e:
            raise PublishError(key, e) from e

        artifact = SubtitleArtifact(
            bucket=self._config.bucket_name,
            key=key,
            url=public_url(self._config.bucket_name, self._region, key),
            content_type=self._converter.content_type,
        )
        logger.info(
            "Subtitle uploaded",
            extra={"job_name": job_name, "subtitle_url": artifact.url},
        )
        return artifact

    def cleanup(self, staged_copy: StagedCopy | None) -> CleanupWarning | None:
        """Deletes a staged copy, returning a warning instead of raising on failure."""
        if staged_copy is None:
            return None

        try:
            self._storage.delete(staged_copy.bucket, staged_copy.key)
        except Exception as e:
            warning = CleanupWarning(staged_copy.key, getattr(e, "cause", None) or e)
            logger.warning(
                "Failed to delete staged copy, leaving it behind",
                exc_info=e,
                extra={
                    "bucket_name": staged_copy.bucket,
                    "object_name": staged_copy.key,
                },
            )
            return warning

        logger.info("Staged copy removed", extra={"object_name": staged_copy.key})
        return None
