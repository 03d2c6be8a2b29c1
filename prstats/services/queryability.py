"""Check whether a user can be searched with the author: qualifier.

Users with certain privacy settings make the search API reject any query
that names them with a 422 "cannot be searched" validation error.
"""

import logging

from prstats.adapters.base import HostingAdapter
from prstats.errors import QueryabilityCheckFailed, RemoteRequestFailed

LOG = logging.getLogger("prstats.services.queryability")

UNSEARCHABLE_STATUS = 422
UNSEARCHABLE_MARKER = "cannot be searched"


def is_unsearchable_error(error: RemoteRequestFailed) -> bool:
    """True if the error is the search API rejecting an author as unsearchable."""
    return error.status_code == UNSEARCHABLE_STATUS and UNSEARCHABLE_MARKER in error.message.lower()


def is_author_queryable(adapter: HostingAdapter, username: str) -> bool:
    """Run a one-result search for username.

    Returns:
        True if the search succeeds (even with no hits), False if the API
        rejects the author as unsearchable.

    Raises:
        QueryabilityCheckFailed: On any other failure; the original error is
            chained and kept as ``cause``.
    """
    try:
        adapter.search_issues(f"type:pr author:{username}", per_page=1)
    except RemoteRequestFailed as e:
        if is_unsearchable_error(e):
            LOG.debug("User %s cannot be searched by author", username)
            return False
        raise QueryabilityCheckFailed(username, e) from e
    except Exception as e:
        raise QueryabilityCheckFailed(username, e) from e
    return True
