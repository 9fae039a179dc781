"""Starts transcription jobs."""

from subtitle_service.config import TranscriptionConfig
from subtitle_service.domain import MediaReference, new_job_name
from subtitle_service.infrastructure.interfaces import TranscriptionService
from subtitle_service.logging import setup_logging

logger = setup_logging()


class JobSubmitter:
    """Submits one uniquely named transcription job per call."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        config: TranscriptionConfig,
        output_bucket: str,
    ):
        self._transcription_service = transcription_service
        self._config = config
        self._output_bucket = output_bucket

    def submit(self, media: MediaReference) -> str:
        """
        Starts a transcription job for the media and returns its name.

        Raises:
            SubmissionError: If the service rejects the job.
        """
        job_name = new_job_name(self._config.job_name_prefix)

        self._transcription_service.start_job(
            job_name=job_name,
            media_uri=media.uri,
            media_format=self._config.media_format,
            language_code=self._config.language_code,
            output_bucket=self._output_bucket,
        )

        logger.info(
            "Transcription job started",
            extra={"job_name": job_name, "media_uri": media.uri},
        )
        return job_name
