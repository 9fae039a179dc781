"""
Test Configuration and Fixtures
"""
import pytest

from subtitle_service.config import AppConfig, AwsConfig, StorageConfig, TranscriptionConfig
from subtitle_service.domain import TranscriptionJob
from subtitle_service.exceptions import (
    BucketLocationError,
    FetchError,
    StorageCopyError,
    StorageDeleteError,
    StorageUploadError,
    SubmissionError,
)
from subtitle_service.handlers import SubtitleHandler
from subtitle_service.infrastructure import TranscribeVttConverter
from subtitle_service.infrastructure.interfaces import (
    BucketLocator,
    StorageClient,
    TranscriptFetcher,
    TranscriptionService,
)
from subtitle_service.stages import (
    JobPoller,
    JobSubmitter,
    LocationNormalizer,
    SubtitlePublisher,
)

REGION = "us-west-1"
BUCKET = "transcription-subtitles-files"

TRANSCRIPT = {
    "jobName": "job",
    "status": "COMPLETED",
    "results": {
        "transcripts": [{"transcript": "Hello world. Bye."}],
        "items": [
            {
                "type": "pronunciation",
                "start_time": "0.0",
                "end_time": "0.5",
                "alternatives": [{"confidence": "0.99", "content": "Hello"}],
            },
            {
                "type": "pronunciation",
                "start_time": "0.5",
                "end_time": "1.0",
                "alternatives": [{"confidence": "0.98", "content": "world"}],
            },
            {"type": "punctuation", "alternatives": [{"confidence": "0.0", "content": "."}]},
            {
                "type": "pronunciation",
                "start_time": "1.5",
                "end_time": "2.0",
                "alternatives": [{"confidence": "0.97", "content": "Bye"}],
            },
            {"type": "punctuation", "alternatives": [{"confidence": "0.0", "content": "."}]},
        ],
    },
}


class FakeStorage(StorageClient):
    """Records calls; fails the operations named in `fail`."""

    def __init__(self, fail=()):
        self.fail = set(fail)
        self.copies = []
        self.uploads = []
        self.deletes = []

    def copy(self, source_bucket, source_object, bucket_name, object_name):
        if "copy" in self.fail:
            raise StorageCopyError(object_name, RuntimeError("copy denied"))
        self.copies.append((source_bucket, source_object, bucket_name, object_name))

    def upload(self, bucket_name, object_name, data, size, content_type):
        if "upload" in self.fail:
            raise StorageUploadError(object_name, RuntimeError("upload denied"))
        self.uploads.append(
            {
                "bucket_name": bucket_name,
                "object_name": object_name,
                "body": data.read(),
                "size": size,
                "content_type": content_type,
            }
        )

    def delete(self, bucket_name, object_name):
        self.deletes.append((bucket_name, object_name))
        if "delete" in self.fail:
            raise StorageDeleteError(object_name, RuntimeError("delete denied"))


class UnwrappedDeleteStorage(FakeStorage):
    """Storage whose delete raises a raw client error instead of StorageDeleteError."""

    def delete(self, bucket_name, object_name):
        self.deletes.append((bucket_name, object_name))
        raise ConnectionResetError("connection reset by peer")


class FakeLocator(BucketLocator):
    def __init__(self, regions=None):
        self.regions = regions or {}
        self.lookups = []

    def get_bucket_region(self, bucket_name):
        self.lookups.append(bucket_name)
        if bucket_name not in self.regions:
            raise BucketLocationError(bucket_name, LookupError("no such bucket"))
        return self.regions[bucket_name]


class FakeTranscriptionService(TranscriptionService):
    """Replays `statuses` one per status query; the last one repeats."""

    def __init__(self, statuses=("COMPLETED",), failure_reason=None, reject=False):
        self.statuses = list(statuses)
        self.failure_reason = failure_reason
        self.reject = reject
        self.started = []
        self.queries = 0

    def start_job(self, job_name, media_uri, media_format, language_code, output_bucket):
        if self.reject:
            raise SubmissionError(job_name, RuntimeError("bad media"))
        self.started.append(
            {
                "job_name": job_name,
                "media_uri": media_uri,
                "media_format": media_format,
                "language_code": language_code,
                "output_bucket": output_bucket,
            }
        )

    def get_job(self, job_name):
        status = self.statuses[min(self.queries, len(self.statuses) - 1)]
        self.queries += 1
        return TranscriptionJob(
            name=job_name,
            status=status,
            transcript_uri=f"https://s3.{REGION}.amazonaws.com/{BUCKET}/{job_name}.json"
            if status == "COMPLETED"
            else None,
            failure_reason=self.failure_reason if status == "FAILED" else None,
        )


class FakeFetcher(TranscriptFetcher):
    def __init__(self, document=None, status_code=None):
        self.document = document if document is not None else TRANSCRIPT
        self.status_code = status_code
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.status_code is not None:
            raise FetchError(url, self.status_code)
        return self.document


class RecordingWait:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def config():
    return AppConfig(
        aws=AwsConfig(region=REGION),
        storage=StorageConfig(bucket_name=BUCKET),
        transcription=TranscriptionConfig(poll_interval_seconds=5.0),
    )


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def locator():
    return FakeLocator({"other-bucket": "us-east-1", "west-bucket": REGION})


@pytest.fixture
def transcription_service():
    return FakeTranscriptionService()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def wait():
    return RecordingWait()


@pytest.fixture
def make_handler(config, storage, locator, transcription_service, fetcher, wait):
    """Builds a handler over the fakes; keyword arguments replace single fakes."""

    def _make(**overrides):
        s = overrides.get("storage", storage)
        t = overrides.get("transcription_service", transcription_service)
        return SubtitleHandler(
            normalizer=LocationNormalizer(
                s, overrides.get("locator", locator), REGION, config.storage
            ),
            submitter=JobSubmitter(t, config.transcription, BUCKET),
            poller=JobPoller(t, 5.0, wait=overrides.get("wait", wait)),
            publisher=SubtitlePublisher(
                overrides.get("fetcher", fetcher),
                overrides.get("converter", TranscribeVttConverter()),
                s,
                REGION,
                config.storage,
            ),
        )

    return _make
