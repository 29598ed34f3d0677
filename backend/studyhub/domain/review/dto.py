from dataclasses import dataclass
from datetime import datetime

from studyhub.core.enums import ConfidenceBand


@dataclass(frozen=True)
class ReviewOutcome:
    repetition_level: int
    next_review: datetime
    interval_days: int
    band: ConfidenceBand


@dataclass(frozen=True)
class StudyStats:
    total_reviewed: int
    correct_count: int
    average_confidence: float
