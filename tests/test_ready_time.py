"""Tests for resolve_ready_time."""

from datetime import UTC, datetime
from unittest.mock import Mock

from prstats.models import TimelineEvent
from prstats.services.ready_time import resolve_ready_time

CREATED = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def _adapter(events: list[TimelineEvent]) -> Mock:
    adapter = Mock()
    adapter.list_timeline_events.return_value = events
    return adapter


def test_no_ready_event_returns_fallback() -> None:
    """A PR that was never a draft is ready at creation."""
    adapter = _adapter(
        [
            TimelineEvent(event="committed"),
            TimelineEvent(event="reviewed", created_at=datetime(2024, 1, 2, tzinfo=UTC)),
            TimelineEvent(event="merged", created_at=datetime(2024, 1, 3, tzinfo=UTC)),
        ]
    )

    assert resolve_ready_time(adapter, "acme", "web", 5, CREATED) == CREATED
    adapter.list_timeline_events.assert_called_once_with("acme", "web", 5)


def test_empty_timeline_returns_fallback() -> None:
    assert resolve_ready_time(_adapter([]), "acme", "web", 5, CREATED) == CREATED


def test_single_ready_event() -> None:
    ready = datetime(2024, 1, 2, 15, 30, tzinfo=UTC)
    adapter = _adapter(
        [
            TimelineEvent(event="converted_to_draft", created_at=datetime(2024, 1, 1, 10, tzinfo=UTC)),
            TimelineEvent(event="ready_for_review", created_at=ready),
            TimelineEvent(event="merged", created_at=datetime(2024, 1, 3, tzinfo=UTC)),
        ]
    )

    assert resolve_ready_time(adapter, "acme", "web", 5, CREATED) == ready


def test_toggled_draft_uses_first_ready_event() -> None:
    """draft -> ready -> draft -> ready: the first ready event wins."""
    first = datetime(2024, 1, 2, 8, 0, tzinfo=UTC)
    second = datetime(2024, 1, 4, 8, 0, tzinfo=UTC)
    adapter = _adapter(
        [
            TimelineEvent(event="ready_for_review", created_at=first),
            TimelineEvent(event="converted_to_draft", created_at=datetime(2024, 1, 3, tzinfo=UTC)),
            TimelineEvent(event="ready_for_review", created_at=second),
        ]
    )

    assert resolve_ready_time(adapter, "acme", "web", 5, CREATED) == first
