"""Issue/PR timeline event model."""

from datetime import datetime

from pydantic import BaseModel

READY_FOR_REVIEW = "ready_for_review"


class TimelineEvent(BaseModel):
    """One timeline entry. Some kinds (e.g. committed) carry no created_at."""

    event: str = ""
    created_at: datetime | None = None
