"""Waits for transcription jobs to reach a terminal status."""

import time
from collections.abc import Callable
from enum import Enum

from subtitle_service.domain import JobStatus, TranscriptionJob
from subtitle_service.exceptions import TranscriptionJobError
from subtitle_service.infrastructure.interfaces import TranscriptionService
from subtitle_service.logging import setup_logging

logger = setup_logging()


class PollState(str, Enum):
    SUBMITTED = "SUBMITTED"
    POLLING = "POLLING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


def next_state(status: str) -> PollState:
    """Maps an observed provider status onto the poller state."""
    if status == JobStatus.COMPLETED.value:
        return PollState.COMPLETED
    if status == JobStatus.FAILED.value:
        return PollState.FAILED
    return PollState.POLLING


class JobPoller:
    """
    Polls a job at a fixed interval until it completes or fails.

    There is no attempt limit: long-running jobs are normal. `wait` is the only
    suspension point and defaults to `time.sleep`, which blocks only the
    calling thread.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        interval_seconds: float = 5.0,
        wait: Callable[[float], None] = time.sleep,
    ):
        self._transcription_service = transcription_service
        self._interval_seconds = interval_seconds
        self._wait = wait

    def wait_for_completion(self, job_name: str) -> TranscriptionJob:
        """
        Blocks until the job reaches a terminal status.

        Returns:
            The completed job, carrying the transcript location.

        Raises:
            TranscriptionJobError: If the job fails or completes without a
                transcript location.
            JobStatusError: If a status query fails.
        """
        state = PollState.SUBMITTED
        attempt = 0

        while True:
            if state is not PollState.SUBMITTED:
                self._wait(self._interval_seconds)

            job = self._transcription_service.get_job(job_name)
            attempt += 1
            state = next_state(job.status)

            logger.info(
                "Job status",
                extra={"job_name": job_name, "status": job.status, "attempt": attempt},
            )

            if state is PollState.COMPLETED:
                if not job.transcript_uri:
                    raise TranscriptionJobError(
                        job_name, "completed without a transcript location"
                    )
                return job

            if state is PollState.FAILED:
                reason = job.failure_reason or "no failure reason given"
                logger.error(
                    "Transcription job failed",
                    extra={"job_name": job_name, "reason": reason},
                )
                raise TranscriptionJobError(job_name, reason)
