"""Search hits pointing at pull requests."""

from typing import List

from pydantic import BaseModel


class PullRequestReference(BaseModel):
    """Pull request found by search: detail URL and author login."""

    url: str
    author: str
    number: int | None = None


class SearchPage(BaseModel):
    """One page of search results.

    raw_count is the number of items the API returned on the page, before
    hits that are not pull requests were dropped from items.
    """

    items: List[PullRequestReference] = []
    raw_count: int = 0
