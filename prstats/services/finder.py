"""Find merged pull requests via the search API.

Author filtering has two paths. When every requested user is searchable the
query carries an author clause. When any user is not, the clause is dropped
and the full result set is filtered by login afterwards, so the result never
contains PRs by other authors either way.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Iterable, List, Sequence

from prstats.adapters.base import HostingAdapter
from prstats.dates import search_day
from prstats.models import PullRequestReference
from prstats.services.queryability import is_author_queryable

LOG = logging.getLogger("prstats.services.finder")

SEARCH_PAGE_SIZE = 100
MAX_QUERYABILITY_WORKERS = 8


def repo_scope(org: str, repo: str | None) -> str:
    """Return "owner/name" for repo (bare names belong to org)."""
    if not repo:
        return org
    return repo if "/" in repo else f"{org}/{repo}"


def author_clause(usernames: Sequence[str]) -> str:
    """OR-combined author qualifiers, parenthesized for more than one user."""
    clause = " OR ".join(f"author:{u}" for u in usernames)
    if len(usernames) > 1:
        return f"({clause})"
    return clause


def build_search_query(
    org: str,
    repo: str | None,
    since: datetime,
    until: datetime | None = None,
    authors: Sequence[str] | None = None,
) -> str:
    """Build the search query for merged PRs in [since, until] (days, inclusive)."""
    since_day = search_day(since)
    if until is not None:
        query = f"type:pr is:merged merged:{since_day}..{search_day(until)}"
    else:
        query = f"type:pr is:merged merged:>={since_day}"

    if repo:
        query += f" repo:{repo_scope(org, repo)}"
    else:
        query += f" org:{org}"

    if authors:
        query += f" {author_clause(authors)}"
    return query


def check_queryable_authors(adapter: HostingAdapter, usernames: Sequence[str]) -> List[bool]:
    """Check all usernames concurrently; results are in input order."""
    if not usernames:
        return []
    workers = min(len(usernames), MAX_QUERYABILITY_WORKERS)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda u: is_author_queryable(adapter, u), usernames))


def search_all_pages(adapter: HostingAdapter, query: str) -> List[PullRequestReference]:
    """Collect every page of a search; stop on an empty or short page.

    A page is short when the API returned fewer than SEARCH_PAGE_SIZE raw
    items, regardless of how many of them were pull requests.
    """
    items: List[PullRequestReference] = []
    page = 1
    while True:
        batch = adapter.search_issues(query, per_page=SEARCH_PAGE_SIZE, page=page)
        LOG.debug("Search page %s: %s item(s), %s pull request(s)", page, batch.raw_count, len(batch.items))
        if not batch.raw_count:
            break
        items.extend(batch.items)
        if batch.raw_count < SEARCH_PAGE_SIZE:
            break
        page += 1
    return items


def filter_by_authors(items: Iterable[PullRequestReference], usernames: Iterable[str]) -> List[PullRequestReference]:
    """Keep items whose author login matches one of usernames (case-insensitive)."""
    wanted = {u.lower() for u in usernames}
    return [item for item in items if item.author.lower() in wanted]


def find_pull_requests(
    adapter: HostingAdapter,
    usernames: Sequence[str],
    org: str,
    repo: str | None,
    since: datetime,
    until: datetime | None = None,
) -> List[PullRequestReference]:
    """Return merged PRs in scope, restricted to usernames when any are given."""
    usernames = list(usernames)
    queryable = check_queryable_authors(adapter, usernames)
    all_queryable = all(queryable)

    query = build_search_query(org, repo, since, until, authors=usernames if all_queryable else None)
    if not all_queryable:
        hidden = [u for u, ok in zip(usernames, queryable) if not ok]
        LOG.debug("Cannot search by author for %s; filtering results locally", ", ".join(hidden))
    LOG.debug("Search query: %s", query)

    items = search_all_pages(adapter, query)
    if not all_queryable:
        items = filter_by_authors(items, usernames)
    return items


def load_pull_requests(
    adapter: HostingAdapter,
    usernames: Sequence[str],
    org: str,
    repo: str | None,
    since: datetime,
    until: datetime | None = None,
    log_progress: bool = False,
) -> List[PullRequestReference]:
    """find_pull_requests with progress messages about scope and result count."""
    if log_progress:
        users = ", ".join(usernames) if usernames else "all authors"
        if repo:
            LOG.info("Fetching PR stats for users %s in repo %s...", users, repo_scope(org, repo))
        else:
            LOG.info("Fetching PR stats for users %s in organization %s...", users, org)

    items = find_pull_requests(adapter, usernames, org, repo, since, until)
    if log_progress:
        LOG.info("Found %s pull request(s).", len(items))
    return items
