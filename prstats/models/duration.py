"""Per-PR duration records and the aggregate over them."""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from prstats.dates import to_iso


def format_hours(hours: float) -> str:
    """Two-decimal presentation of an hour value."""
    return f"{hours:.2f}"


class DurationRecord(BaseModel):
    """Ready-for-review to merge duration of one pull request.

    duration_hours keeps full precision; rounding happens in to_export only.
    """

    url: str
    ready_at: datetime
    merged_at: datetime
    duration_hours: float

    def to_export(self) -> Dict[str, str]:
        return {
            "url": self.url,
            "readyDate": to_iso(self.ready_at),
            "mergedDate": to_iso(self.merged_at),
            "durationHours": format_hours(self.duration_hours),
        }


class AggregateResult(BaseModel):
    """Sum and count of durations over all merged pull requests."""

    total_duration_hours: float = 0.0
    count: int = 0
    records: List[DurationRecord] = Field(default_factory=list)

    @property
    def average_duration_hours(self) -> float | None:
        """Mean duration, or None when no pull request was counted."""
        if self.count == 0:
            return None
        return self.total_duration_hours / self.count

    def to_export(self) -> Dict[str, Any]:
        average = self.average_duration_hours
        return {
            "totalDurationHours": self.total_duration_hours,
            "count": self.count,
            "averageDurationHours": format_hours(average) if average is not None else None,
            "pullRequests": [r.to_export() for r in self.records],
        }
