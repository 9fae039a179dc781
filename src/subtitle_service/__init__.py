from subtitle_service.exceptions import (
    CleanupWarning,
    ConversionError,
    FetchError,
    InvalidReferenceError,
    JobStatusError,
    PublishError,
    StagingError,
    SubmissionError,
    SubtitleWorkflowError,
    TranscriptionJobError,
)
from subtitle_service.main import transcribe_and_generate_subtitle

__all__ = [
    "transcribe_and_generate_subtitle",
    "SubtitleWorkflowError",
    "InvalidReferenceError",
    "StagingError",
    "SubmissionError",
    "TranscriptionJobError",
    "JobStatusError",
    "FetchError",
    "ConversionError",
    "PublishError",
    "CleanupWarning",
]
