"""Bucket region lookup through the S3 API."""

from botocore.exceptions import BotoCoreError, ClientError

from subtitle_service.exceptions import BucketLocationError
from subtitle_service.logging import setup_logging

from .interfaces import BucketLocator

logger = setup_logging()

# GetBucketLocation answers null for us-east-1 and "EU" for old eu-west-1 buckets
_LEGACY_CONSTRAINTS = {"EU": "eu-west-1"}


class S3BucketLocator(BucketLocator):
    """Resolves bucket regions with `GetBucketLocation` on a boto3 S3 client."""

    def __init__(self, client):
        self._client = client

    def get_bucket_region(self, bucket_name: str) -> str:
        try:
            response = self._client.get_bucket_location(Bucket=bucket_name)
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "Bucket region lookup failed", extra={"bucket_name": bucket_name}
            )
            raise BucketLocationError(bucket_name, e) from e

        constraint = response.get("LocationConstraint") or "us-east-1"
        region = _LEGACY_CONSTRAINTS.get(constraint, constraint)

        logger.info(
            "Bucket region resolved",
            extra={"bucket_name": bucket_name, "region": region},
        )
        return region
