"""Abstract interface for bucket region lookups."""

from abc import ABC, abstractmethod


class BucketLocator(ABC):
    """Resolves the region a bucket lives in."""

    @abstractmethod
    def get_bucket_region(self, bucket_name: str) -> str:
        """
        Returns the region of a bucket, e.g. "us-east-1".

        Raises:
            BucketLocationError: If the region cannot be determined.
        """
