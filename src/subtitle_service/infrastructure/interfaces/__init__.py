"""Infrastructure interface exports."""

from .bucket_locator import BucketLocator
from .storage_client import StorageClient
from .subtitle_converter import SubtitleConverter
from .transcript_fetcher import TranscriptFetcher
from .transcription_service import TranscriptionService

__all__ = [
    "BucketLocator",
    "StorageClient",
    "SubtitleConverter",
    "TranscriptFetcher",
    "TranscriptionService",
]
