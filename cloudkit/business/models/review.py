"""Review summary data model."""

from pydantic import BaseModel, ConfigDict, Field


class ReviewSummary(BaseModel):
    """Review totals for one location."""

    location_name: str = Field(..., min_length=1)
    location_title: str | None = None
    total_review_count: int | None = Field(default=None, ge=0)
    average_rating: float | None = Field(default=None, ge=0, le=5)

    model_config = ConfigDict(frozen=True)
