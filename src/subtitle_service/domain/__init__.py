"""Domain layer exports."""

from .locations import (
    new_job_name,
    parse_media_location,
    public_url,
    staging_key,
    subtitle_key,
)
from .models import (
    JobStatus,
    MediaReference,
    NormalizedMedia,
    StagedCopy,
    SubtitleArtifact,
    SubtitleResult,
    TranscriptDocument,
    TranscriptionJob,
    TranscriptItem,
)

__all__ = [
    "JobStatus",
    "MediaReference",
    "NormalizedMedia",
    "StagedCopy",
    "SubtitleArtifact",
    "SubtitleResult",
    "TranscriptDocument",
    "TranscriptionJob",
    "TranscriptItem",
    "new_job_name",
    "parse_media_location",
    "public_url",
    "staging_key",
    "subtitle_key",
]
