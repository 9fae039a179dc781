"""Infrastructure layer exports."""

from .aws_transcriber import AwsTranscriber
from .httpx_fetcher import HttpxTranscriptFetcher
from .minio_storage import MinioStorageClient
from .s3_bucket_locator import S3BucketLocator
from .transcribe_vtt_converter import TranscribeVttConverter

__all__ = [
    "AwsTranscriber",
    "HttpxTranscriptFetcher",
    "MinioStorageClient",
    "S3BucketLocator",
    "TranscribeVttConverter",
]
