"""Abstract base for code hosting adapters."""

from abc import ABC, abstractmethod
from typing import List

from prstats.errors import RemoteRequestFailed
from prstats.models import PullRequestDetail, SearchPage, TimelineEvent

__all__ = ["HostingAdapter", "RemoteRequestFailed"]


class HostingAdapter(ABC):
    """Read-only view of a hosting API used to collect pull request durations.

    Every call raises RemoteRequestFailed on failure.
    """

    @abstractmethod
    def search_issues(self, query: str, per_page: int = 100, page: int = 1) -> SearchPage:
        """Run an issue/PR search and return one page of pull request hits."""
        ...

    @abstractmethod
    def get_pull_request(self, url: str) -> PullRequestDetail:
        """Fetch pull request detail by its API URL."""
        ...

    @abstractmethod
    def list_timeline_events(self, owner: str, repo: str, number: int) -> List[TimelineEvent]:
        """Fetch the full, chronologically ordered timeline of a PR."""
        ...

    @abstractmethod
    def get_authenticated_user(self) -> str:
        """Return the login of the token owner."""
        ...
