"""Data models for search references, pull request details, timeline events and durations (Pydantic)."""

from prstats.models.duration import AggregateResult, DurationRecord
from prstats.models.pull_request import PullRequestDetail
from prstats.models.reference import PullRequestReference, SearchPage
from prstats.models.timeline import READY_FOR_REVIEW, TimelineEvent

__all__ = [
    "READY_FOR_REVIEW",
    "AggregateResult",
    "DurationRecord",
    "PullRequestDetail",
    "PullRequestReference",
    "SearchPage",
    "TimelineEvent",
]
