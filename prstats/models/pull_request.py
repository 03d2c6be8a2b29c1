"""Pull request detail model."""

from datetime import datetime

from pydantic import BaseModel


class PullRequestDetail(BaseModel):
    """Full pull request record as needed for duration calculation."""

    owner: str
    repo: str
    number: int
    created_at: datetime
    merged_at: datetime | None = None
    html_url: str | None = None

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None
