"""Amazon Transcribe implementation of the TranscriptionService interface."""

from botocore.exceptions import BotoCoreError, ClientError

from subtitle_service.domain import TranscriptionJob
from subtitle_service.exceptions import JobStatusError, SubmissionError
from subtitle_service.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AwsTranscriber(TranscriptionService):
    """Runs transcription jobs on Amazon Transcribe through a boto3 client."""

    def __init__(self, client):
        self._client = client

    def start_job(
        self,
        job_name: str,
        media_uri: str,
        media_format: str,
        language_code: str,
        output_bucket: str,
    ) -> None:
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                LanguageCode=language_code,
                MediaFormat=media_format,
                Media={"MediaFileUri": media_uri},
                OutputBucketName=output_bucket,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "Transcription job rejected",
                extra={"job_name": job_name, "media_uri": media_uri},
            )
            raise SubmissionError(job_name, e) from e

    def get_job(self, job_name: str) -> TranscriptionJob:
        try:
            response = self._client.get_transcription_job(
                TranscriptionJobName=job_name
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Job status query failed", extra={"job_name": job_name})
            raise JobStatusError(job_name, e) from e

        job = response["TranscriptionJob"]
        return TranscriptionJob(
            name=job_name,
            status=job["TranscriptionJobStatus"],
            transcript_uri=job.get("Transcript", {}).get("TranscriptFileUri"),
            failure_reason=job.get("FailureReason"),
        )
