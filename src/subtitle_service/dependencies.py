"""Dependency injection configuration for the subtitle service."""

from functools import lru_cache

import boto3
import httpx
from minio import Minio

from subtitle_service.config import AppConfig, load_config
from subtitle_service.handlers import SubtitleHandler
from subtitle_service.infrastructure import (
    AwsTranscriber,
    HttpxTranscriptFetcher,
    MinioStorageClient,
    S3BucketLocator,
    TranscribeVttConverter,
)
from subtitle_service.infrastructure.interfaces import (
    BucketLocator,
    StorageClient,
    SubtitleConverter,
    TranscriptFetcher,
    TranscriptionService,
)
from subtitle_service.stages import (
    JobPoller,
    JobSubmitter,
    LocationNormalizer,
    SubtitlePublisher,
)


def build_storage(config: AppConfig) -> StorageClient:
    """Returns a storage client for the working bucket's endpoint."""
    client = Minio(
        endpoint=config.storage.endpoint,
        access_key=config.aws.access_key_id or None,
        secret_key=config.aws.secret_access_key or None,
        session_token=config.aws.session_token,
        secure=config.storage.secure,
        region=config.aws.region,
    )
    return MinioStorageClient(client)


def build_transcription_service(config: AppConfig) -> TranscriptionService:
    """Returns an Amazon Transcribe client in the service region."""
    client = boto3.client(
        "transcribe",
        region_name=config.aws.region,
        aws_access_key_id=config.aws.access_key_id or None,
        aws_secret_access_key=config.aws.secret_access_key or None,
        aws_session_token=config.aws.session_token,
    )
    return AwsTranscriber(client)


def build_bucket_locator(config: AppConfig) -> BucketLocator:
    """Returns a bucket region lookup backed by an S3 API client."""
    client = boto3.client(
        "s3",
        region_name=config.aws.region,
        aws_access_key_id=config.aws.access_key_id or None,
        aws_secret_access_key=config.aws.secret_access_key or None,
        aws_session_token=config.aws.session_token,
    )
    return S3BucketLocator(client)


def build_http_client(config: AppConfig) -> httpx.Client:
    return httpx.Client(timeout=config.http.timeout_seconds)


def build_handler(
    config: AppConfig,
    storage: StorageClient | None = None,
    transcription_service: TranscriptionService | None = None,
    fetcher: TranscriptFetcher | None = None,
    locator: BucketLocator | None = None,
    converter: SubtitleConverter | None = None,
) -> SubtitleHandler:
    """
    Wires a SubtitleHandler from configuration.

    Any collaborator passed in is used as-is; the rest are built from `config`.
    """
    storage = storage or build_storage(config)
    transcription_service = transcription_service or build_transcription_service(
        config
    )
    fetcher = fetcher or HttpxTranscriptFetcher(build_http_client(config))
    locator = locator or build_bucket_locator(config)
    converter = converter or TranscribeVttConverter()

    region = config.aws.region
    return SubtitleHandler(
        normalizer=LocationNormalizer(storage, locator, region, config.storage),
        submitter=JobSubmitter(
            transcription_service, config.transcription, config.storage.bucket_name
        ),
        poller=JobPoller(
            transcription_service, config.transcription.poll_interval_seconds
        ),
        publisher=SubtitlePublisher(
            fetcher, converter, storage, region, config.storage
        ),
    )


@lru_cache(maxsize=1)
def get_handler() -> SubtitleHandler:
    """Returns the handler configured from the environment."""
    return build_handler(load_config())
