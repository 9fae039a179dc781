"""Workflow stage exports."""

from .job_poller import JobPoller, PollState
from .job_submitter import JobSubmitter
from .location_normalizer import LocationNormalizer
from .subtitle_publisher import SubtitlePublisher

__all__ = [
    "JobPoller",
    "JobSubmitter",
    "LocationNormalizer",
    "PollState",
    "SubtitlePublisher",
]
