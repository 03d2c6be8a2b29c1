"""Pull request discovery and duration aggregation."""

from prstats.services.aggregator import calculate_average_duration
from prstats.services.finder import (
    SEARCH_PAGE_SIZE,
    build_search_query,
    find_pull_requests,
    load_pull_requests,
)
from prstats.services.queryability import is_author_queryable
from prstats.services.ready_time import resolve_ready_time

__all__ = [
    "SEARCH_PAGE_SIZE",
    "build_search_query",
    "calculate_average_duration",
    "find_pull_requests",
    "is_author_queryable",
    "load_pull_requests",
    "resolve_ready_time",
]
