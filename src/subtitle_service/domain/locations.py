"""Parsing and construction of S3 object locations."""

import re
import uuid
from urllib.parse import quote, unquote, urlsplit

from subtitle_service.exceptions import InvalidReferenceError

from .models import MediaReference

_BUCKET = r"[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]"
_REGION = r"[a-z]{2}(?:-[a-z]+)+-\d+"
# s3, s3.<region>, s3-<region>, s3.dualstack.<region>, s3-external-1
_ENDPOINT = (
    rf"(?:(?P<external>s3-external-1)"
    rf"|s3(?:\.dualstack)?(?:[.-](?P<region>{_REGION}))?)"
)

_BUCKET_NAME = re.compile(rf"^{_BUCKET}$")
_PATH_STYLE_HOST = re.compile(rf"^{_ENDPOINT}\.amazonaws\.com$")
_VIRTUAL_HOST = re.compile(rf"^(?P<bucket>{_BUCKET})\.{_ENDPOINT}\.amazonaws\.com$")

_S3_SCHEME = "s3://"


def parse_media_location(location: str) -> MediaReference:
    """
    Parses an S3 video location into a MediaReference.

    Accepts `s3://bucket/key` (key taken verbatim, `?` and `#` included),
    virtual-hosted URLs (`https://bucket.s3.region.amazonaws.com/key`, with or
    without the region, including the legacy `s3-region`, dual-stack and
    `s3-external-1` forms) and path-style URLs
    (`https://s3.region.amazonaws.com/bucket/key`).

    Args:
        location: The location supplied by the caller.

    Returns:
        MediaReference with bucket, key, and region when the location names one.

    Raises:
        InvalidReferenceError: If the location is not a recognizable S3 object.
    """
    if not location or location != location.strip():
        raise InvalidReferenceError(location, "location is empty or padded")

    if location[: len(_S3_SCHEME)].lower() == _S3_SCHEME:
        bucket, _, key = location[len(_S3_SCHEME) :].partition("/")
        region = None
    else:
        try:
            parts = urlsplit(location)
            hostname = parts.hostname
        except ValueError as e:
            raise InvalidReferenceError(location, str(e)) from e

        if parts.scheme.lower() not in ("http", "https"):
            raise InvalidReferenceError(
                location, f"unsupported scheme '{parts.scheme}'"
            )
        bucket, key, region = _split_http_location(location, hostname, parts.path)

    if not _BUCKET_NAME.match(bucket):
        raise InvalidReferenceError(location, f"invalid bucket name '{bucket}'")
    if not key or key.endswith("/"):
        raise InvalidReferenceError(location, "missing object key")

    return MediaReference(uri=location, bucket=bucket, key=key, region=region)


def _split_http_location(
    location: str, hostname: str | None, path: str
) -> tuple[str, str, str | None]:
    if not hostname:
        raise InvalidReferenceError(location, "missing host")

    path_style = _PATH_STYLE_HOST.match(hostname)
    if path_style:
        bucket, _, key = path[1:].partition("/")
        return bucket, unquote(key), _endpoint_region(path_style)

    virtual = _VIRTUAL_HOST.match(hostname)
    if virtual:
        return virtual.group("bucket"), unquote(path[1:]), _endpoint_region(virtual)

    raise InvalidReferenceError(location, f"host '{hostname}' is not an S3 endpoint")


def _endpoint_region(match: re.Match) -> str | None:
    if match.group("external"):
        return "us-east-1"
    return match.group("region")


def public_url(bucket: str, region: str, key: str) -> str:
    """Returns the virtual-hosted HTTPS URL of an object."""
    return f"https://{bucket}.s3.{region}.amazonaws.com/{quote(key)}"


def staging_key(prefix: str, base_name: str) -> str:
    """Returns a collision-resistant key for a staged video copy."""
    return f"{prefix}/{uuid.uuid4()}-{base_name}"


def new_job_name(prefix: str) -> str:
    """Returns a transcription job name unique across invocations."""
    return f"{prefix}-{uuid.uuid4()}"


def subtitle_key(prefix: str, job_name: str) -> str:
    return f"{prefix}/{job_name}.vtt"
