"""Abstract interface for transcription job operations."""

from abc import ABC, abstractmethod

from subtitle_service.domain import TranscriptionJob


class TranscriptionService(ABC):
    """Abstract base class for asynchronous speech-to-text job backends."""

    @abstractmethod
    def start_job(
        self,
        job_name: str,
        media_uri: str,
        media_format: str,
        language_code: str,
        output_bucket: str,
    ) -> None:
        """
        Starts a transcription job.

        Args:
            job_name: Unique name of the job.
            media_uri: Location of the media to transcribe.
            media_format: Container format of the media, e.g. "mp4".
            language_code: Spoken language, e.g. "en-US".
            output_bucket: Bucket that receives the transcript document.

        Raises:
            SubmissionError: If the job is rejected.
        """

    @abstractmethod
    def get_job(self, job_name: str) -> TranscriptionJob:
        """
        Returns the current state of a transcription job.

        Raises:
            JobStatusError: If the status cannot be queried.
        """
