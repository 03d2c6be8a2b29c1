"""Resolve when a pull request became ready for review."""

import logging
from datetime import datetime

from prstats.adapters.base import HostingAdapter
from prstats.models import READY_FOR_REVIEW

LOG = logging.getLogger("prstats.services.ready_time")


def resolve_ready_time(
    adapter: HostingAdapter,
    owner: str,
    repo: str,
    number: int,
    fallback: datetime,
) -> datetime:
    """Return the time of the first ready_for_review event, else fallback.

    A PR that was never a draft has no such event; fallback is its creation
    time. When a PR went draft -> ready several times, the first event in the
    (chronological) timeline wins.
    """
    for event in adapter.list_timeline_events(owner, repo, number):
        if event.event == READY_FOR_REVIEW and event.created_at is not None:
            return event.created_at
    LOG.debug("PR #%s (%s/%s): no %s event, using creation time", number, owner, repo, READY_FOR_REVIEW)
    return fallback
