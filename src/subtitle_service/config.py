"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class AwsConfig(BaseModel, frozen=True):
    """AWS credentials and the region the transcription service runs in."""

    region: str = "us-west-1"
    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str | None = None


class StorageConfig(BaseModel, frozen=True):
    """Working bucket configuration."""

    bucket_name: str = "transcription-subtitles-files"
    endpoint: str = "s3.amazonaws.com"
    secure: bool = True
    staging_prefix: str = "transcribed-video"
    subtitle_prefix: str = "subtitles"


class TranscriptionConfig(BaseModel, frozen=True):
    """Transcription job configuration."""

    language_code: str = "en-US"
    media_format: str = "mp4"
    job_name_prefix: str = "transcription-job"
    poll_interval_seconds: float = 5.0


class HttpConfig(BaseModel, frozen=True):
    """HTTP client configuration for transcript downloads."""

    timeout_seconds: float = 30.0


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AwsConfig = AwsConfig()
    storage: StorageConfig = StorageConfig()
    transcription: TranscriptionConfig = TranscriptionConfig()
    http: HttpConfig = HttpConfig()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        aws=AwsConfig(
            region=os.getenv("AWS_REGION", "us-west-1"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID", ""),
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", ""),
            session_token=os.getenv("AWS_SESSION_TOKEN") or None,
        ),
        storage=StorageConfig(
            bucket_name=os.getenv("SUBTITLE_BUCKET", "transcription-subtitles-files"),
            endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
            secure=_env_flag("S3_SECURE", "true"),
            staging_prefix=os.getenv("STAGING_PREFIX", "transcribed-video"),
            subtitle_prefix=os.getenv("SUBTITLE_PREFIX", "subtitles"),
        ),
        transcription=TranscriptionConfig(
            language_code=os.getenv("TRANSCRIBE_LANGUAGE_CODE", "en-US"),
            media_format=os.getenv("TRANSCRIBE_MEDIA_FORMAT", "mp4"),
            job_name_prefix=os.getenv("TRANSCRIBE_JOB_PREFIX", "transcription-job"),
            poll_interval_seconds=float(
                os.getenv("TRANSCRIBE_POLL_INTERVAL_SECONDS", "5")
            ),
        ),
        http=HttpConfig(
            timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "30")),
        ),
    )
