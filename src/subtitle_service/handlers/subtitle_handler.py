"""Handler for turning stored videos into subtitle tracks."""

from subtitle_service.domain import SubtitleResult
from subtitle_service.logging import setup_logging
from subtitle_service.stages import (
    JobPoller,
    JobSubmitter,
    LocationNormalizer,
    SubtitlePublisher,
)

logger = setup_logging()


class SubtitleHandler:
    """Orchestrates staging, transcription, publishing, and cleanup."""

    def __init__(
        self,
        normalizer: LocationNormalizer,
        submitter: JobSubmitter,
        poller: JobPoller,
        publisher: SubtitlePublisher,
    ):
        self._normalizer = normalizer
        self._submitter = submitter
        self._poller = poller
        self._publisher = publisher

    def process(self, video_location: str) -> SubtitleResult:
        """
        Transcribes a video and publishes its subtitle track.

        A staged copy created for the video is deleted once the pipeline has
        run, whatever its outcome. A failed delete is logged and reported on
        the result but never fails the invocation.

        Args:
            video_location: S3 location of the video.

        Returns:
            SubtitleResult with the public subtitle URL.

        Raises:
            InvalidReferenceError: If the location cannot be parsed.
            StagingError: If a cross-region video cannot be copied.
            SubmissionError: If the transcription job is rejected.
            TranscriptionJobError: If the job fails.
            FetchError: If the transcript cannot be downloaded.
            ConversionError: If the transcript cannot be converted.
            PublishError: If the subtitle upload fails.
        """
        logger.info("Processing video", extra={"video_location": video_location})

        media = self._normalizer.normalize(video_location)

        try:
            job_name = self._submitter.submit(media.reference)
            job = self._poller.wait_for_completion(job_name)
            artifact = self._publisher.publish(job_name, job.transcript_uri)
        finally:
            cleanup_warning = self._publisher.cleanup(media.staged_copy)

        result = SubtitleResult(
            subtitle_url=artifact.url,
            bucket_name=artifact.bucket,
            subtitle_key=artifact.key,
            job_name=job_name,
            staged_key=media.staged_copy.key if media.staged_copy else None,
            cleanup_warning=str(cleanup_warning) if cleanup_warning else None,
        )

        logger.info(
            "Video processed",
            extra={
                "video_location": video_location,
                "job_name": job_name,
                "subtitle_url": result.subtitle_url,
            },
        )
        return result
