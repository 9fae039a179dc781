"""Custom exceptions for the subtitle service."""


class SubtitleWorkflowError(Exception):
    """Base class for failures that abort a subtitle workflow invocation."""

    stage = "workflow"

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InvalidReferenceError(SubtitleWorkflowError):
    """Raised when a video location cannot be parsed into a bucket and key."""

    stage = "normalize"

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid media location '{location}': {reason}")


class StagingError(SubtitleWorkflowError):
    """Raised when a cross-region video cannot be staged into working storage."""

    stage = "normalize"

    def __init__(self, location: str, reason: str, cause: Exception | None = None):
        self.location = location
        self.reason = reason
        super().__init__(f"Failed to stage '{location}': {reason}", cause)


class SubmissionError(SubtitleWorkflowError):
    """Raised when the transcription service rejects a job."""

    stage = "submit"

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        super().__init__(f"Failed to start transcription job '{job_name}'", cause)


class TranscriptionJobError(SubtitleWorkflowError):
    """Raised when a transcription job ends in the failed state."""

    stage = "poll"

    def __init__(self, job_name: str, reason: str, cause: Exception | None = None):
        self.job_name = job_name
        self.reason = reason
        super().__init__(f"Transcription job '{job_name}' failed: {reason}", cause)


class JobStatusError(TranscriptionJobError):
    """Raised when the status of a transcription job cannot be queried."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        super().__init__(job_name, f"status query failed: {cause}", cause)


class FetchError(SubtitleWorkflowError):
    """Raised when the transcript document cannot be downloaded."""

    stage = "fetch"

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.url = url
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Failed to fetch transcript '{url}'{detail}", cause)


class ConversionError(SubtitleWorkflowError):
    """Raised when a transcript cannot be converted to subtitles."""

    stage = "convert"

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        super().__init__(
            f"Failed to convert transcript of job '{job_name}' to subtitles", cause
        )


class PublishError(SubtitleWorkflowError):
    """Raised when the subtitle file cannot be uploaded."""

    stage = "publish"

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to publish subtitle '{object_name}'", cause)


class CleanupWarning(Warning):
    """Reported, never raised, when a staged video copy cannot be deleted."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to delete staged copy '{object_name}': {cause}")


class StorageCopyError(Exception):
    """Raised when a server-side copy in storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to copy '{object_name}' in storage")


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageDeleteError(Exception):
    """Raised when deleting a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to delete '{object_name}' from storage")


class BucketLocationError(Exception):
    """Raised when the region of a bucket cannot be determined."""

    def __init__(self, bucket_name: str, cause: Exception | None = None):
        self.bucket_name = bucket_name
        self.cause = cause
        super().__init__(f"Failed to resolve region of bucket '{bucket_name}'")
