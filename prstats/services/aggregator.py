"""Compute ready-for-review to merge durations and their total."""

import logging
from typing import Iterable

from prstats.adapters.base import HostingAdapter
from prstats.dates import to_iso
from prstats.models import AggregateResult, DurationRecord, PullRequestReference
from prstats.models.duration import format_hours
from prstats.services.ready_time import resolve_ready_time

LOG = logging.getLogger("prstats.services.aggregator")

SECONDS_PER_HOUR = 3600


def calculate_average_duration(
    adapter: HostingAdapter,
    references: Iterable[PullRequestReference],
    log_progress: bool = False,
) -> AggregateResult:
    """Process references one at a time and sum durations of merged PRs.

    Unmerged PRs are skipped. Durations are signed: a merge recorded before
    the resolved ready time yields a negative value, which is kept. Any API
    failure propagates and discards everything accumulated so far.
    """
    result = AggregateResult()

    for ref in references:
        pr = adapter.get_pull_request(ref.url)
        if pr.merged_at is None:
            LOG.debug("Skipping %s: not merged", ref.url)
            continue

        ready_at = resolve_ready_time(adapter, pr.owner, pr.repo, pr.number, pr.created_at)
        hours = (pr.merged_at - ready_at).total_seconds() / SECONDS_PER_HOUR

        result.records.append(
            DurationRecord(url=ref.url, ready_at=ready_at, merged_at=pr.merged_at, duration_hours=hours)
        )
        if hours < 0:
            LOG.warning(
                "PR #%s (%s/%s) merged before it was marked ready (%s hours)",
                pr.number,
                pr.owner,
                pr.repo,
                format_hours(hours),
            )
        if log_progress:
            LOG.info(
                "PR #%s (%s/%s): Ready at %s, Merged at %s -> Duration: %s hours",
                pr.number,
                pr.owner,
                pr.repo,
                to_iso(ready_at),
                to_iso(pr.merged_at),
                format_hours(hours),
            )

        result.total_duration_hours += hours
        result.count += 1

    return result
