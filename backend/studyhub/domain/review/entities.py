# backend/studyhub/domain/review/entities.py

from dataclasses import dataclass
from datetime import datetime

from .dto import ReviewOutcome
from .policy import ReviewPolicy


@dataclass
class CardState:
    """
    Чистое domain-состояние повторения карточки.
    Не знает про БД, ORM и SQLAlchemy.
    """

    repetition_level: int = 1
    confidence: int | None = None
    last_reviewed: datetime | None = None
    next_review: datetime | None = None

    def __post_init__(self):
        self._validate()

    # ---------
    # Invariants
    # ---------

    def _validate(self):
        if self.repetition_level < 1:
            raise ValueError("repetition_level cannot be less than 1")

        if self.confidence is not None and not 1 <= self.confidence <= 5:
            raise ValueError("confidence must be within [1, 5]")

        if (
            self.next_review is not None
            and self.last_reviewed is not None
            and self.next_review < self.last_reviewed
        ):
            raise ValueError("next_review cannot be earlier than last_reviewed")

    @property
    def is_new(self) -> bool:
        return self.last_reviewed is None

    # ----------------
    # Domain behaviour
    # ----------------

    def apply_review(
            self,
            *,
            confidence: int,
            reviewed_at: datetime,
            policy: ReviewPolicy | None = None,
    ) -> ReviewOutcome:
        outcome = (policy or ReviewPolicy()).compute_next_review(
            confidence=confidence,
            repetition_level=self.repetition_level,
            now=reviewed_at,
        )

        self.confidence = confidence
        self.repetition_level = outcome.repetition_level
        self.last_reviewed = reviewed_at
        self.next_review = outcome.next_review

        self._validate()
        return outcome
