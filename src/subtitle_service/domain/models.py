"""Domain models for the subtitle service."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MediaReference(BaseModel, frozen=True):
    """
    Location of a video object in object storage.

    `uri` is the string handed to the transcription service. `region` is None
    when the location does not name one (e.g. `s3://bucket/key`).
    """

    uri: str
    bucket: str
    key: str
    region: str | None = None

    @property
    def base_name(self) -> str:
        """Final path segment of the key."""
        return self.key.rsplit("/", 1)[-1]


class StagedCopy(BaseModel, frozen=True):
    """Temporary copy of a video placed in the working bucket for one invocation."""

    bucket: str
    key: str
    source: MediaReference


class NormalizedMedia(BaseModel, frozen=True):
    """Media ready for transcription, plus the staged copy backing it, if any."""

    reference: MediaReference
    staged_copy: StagedCopy | None = None


class JobStatus(str, Enum):
    """Transcription job statuses the workflow reacts to."""

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class TranscriptionJob(BaseModel, frozen=True):
    """Snapshot of a transcription job as reported by the provider."""

    name: str
    status: str
    transcript_uri: str | None = None
    failure_reason: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.COMPLETED.value, JobStatus.FAILED.value)


class TranscriptAlternative(BaseModel):
    """One candidate rendering of a transcript item."""

    content: str
    confidence: float | None = None


class TranscriptItem(BaseModel):
    """A recognized word or punctuation mark."""

    type: Literal["pronunciation", "punctuation"]
    alternatives: list[TranscriptAlternative] = Field(min_length=1)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def content(self) -> str:
        return self.alternatives[0].content


class TranscriptResults(BaseModel):
    items: list[TranscriptItem] = []


class TranscriptDocument(BaseModel):
    """Amazon Transcribe output document."""

    model_config = ConfigDict(populate_by_name=True)

    job_name: str | None = Field(default=None, alias="jobName")
    status: str | None = None
    results: TranscriptResults


class SubtitleArtifact(BaseModel, frozen=True):
    """Uploaded subtitle file."""

    bucket: str
    key: str
    url: str
    content_type: str = "text/vtt"


class SubtitleResult(BaseModel, frozen=True):
    """Outcome of a successful subtitle workflow invocation."""

    subtitle_url: str
    bucket_name: str
    subtitle_key: str
    job_name: str
    staged_key: str | None = None
    cleanup_warning: str | None = None
