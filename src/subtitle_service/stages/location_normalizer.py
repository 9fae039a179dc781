"""Moves source videos into the transcription service's region."""

from subtitle_service.config import StorageConfig
from subtitle_service.domain import (
    MediaReference,
    NormalizedMedia,
    StagedCopy,
    parse_media_location,
    public_url,
    staging_key,
)
from subtitle_service.exceptions import (
    BucketLocationError,
    StagingError,
    StorageCopyError,
)
from subtitle_service.infrastructure.interfaces import BucketLocator, StorageClient
from subtitle_service.logging import setup_logging

logger = setup_logging()


class LocationNormalizer:
    """Stages videos that live outside the service region into the working bucket."""

    def __init__(
        self,
        storage: StorageClient,
        locator: BucketLocator,
        region: str,
        config: StorageConfig,
    ):
        self._storage = storage
        self._locator = locator
        self._region = region
        self._config = config

    def normalize(self, video_location: str) -> NormalizedMedia:
        """
        Returns media the transcription service can read.

        Args:
            video_location: S3 location of the source video.

        Returns:
            NormalizedMedia holding the caller's reference unchanged when it is
            already in the service region, otherwise a reference to a staged
            copy together with the copy's handle.

        Raises:
            InvalidReferenceError: If the location cannot be parsed.
            StagingError: If the region lookup or the copy fails.
        """
        reference = parse_media_location(video_location)
        source_region = self._source_region(reference)

        if source_region == self._region:
            logger.info(
                "Video already in service region",
                extra={"bucket_name": reference.bucket, "region": source_region},
            )
            return NormalizedMedia(reference=reference)

        logger.info(
            "Video is in a different region, staging a copy",
            extra={
                "bucket_name": reference.bucket,
                "source_region": source_region,
                "region": self._region,
            },
        )

        key = staging_key(self._config.staging_prefix, reference.base_name)
        try:
            self._storage.copy(
                reference.bucket, reference.key, self._config.bucket_name, key
            )
        except StorageCopyError as e:
            raise StagingError(video_location, "copy failed", e) from e

        staged = MediaReference(
            uri=public_url(self._config.bucket_name, self._region, key),
            bucket=self._config.bucket_name,
            key=key,
            region=self._region,
        )
        logger.info("Video staged", extra={"object_name": key})
        return NormalizedMedia(
            reference=staged,
            staged_copy=StagedCopy(
                bucket=self._config.bucket_name, key=key, source=reference
            ),
        )

    def _source_region(self, reference: MediaReference) -> str:
        if reference.region:
            return reference.region
        if reference.bucket == self._config.bucket_name:
            return self._region
        try:
            return self._locator.get_bucket_region(reference.bucket)
        except BucketLocationError as e:
            raise StagingError(reference.uri, "bucket region unknown", e) from e
