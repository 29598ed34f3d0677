from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from studyhub.core.enums import ConfidenceBand


class ReviewRequest(BaseModel):
    confidence: int = Field(ge=1, le=5, strict=True)


class ReviewResponse(BaseModel):
    card_id: UUID
    confidence: int
    band: ConfidenceBand
    repetition_level: int
    interval_days: int
    last_reviewed: datetime
    next_review: datetime
