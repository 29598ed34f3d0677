# backend/studyhub/domain/review/policy.py

from datetime import datetime, timedelta
from typing import Iterable, Protocol, TypeVar

from studyhub.core.enums import ConfidenceBand

from .dto import ReviewOutcome


class InvalidReviewInput(ValueError):
    pass


class Schedulable(Protocol):
    next_review: datetime | None
    last_reviewed: datetime | None


CardT = TypeVar("CardT", bound=Schedulable)


class ReviewPolicy:
    """
    Интервальное повторение по полосам уверенности.
    Чистая domain-логика: без БД, без часов, `now` всегда приходит снаружи.

        confidence < 3   -> 1 день,            уровень сбрасывается в 1
        confidence == 3  -> level * 2 дней,    уровень + 1
        confidence > 3   -> level * 3 дней,    уровень + 1

    Интервал не ограничен сверху.
    """

    MIN_CONFIDENCE = 1
    MAX_CONFIDENCE = 5
    CORRECTNESS_THRESHOLD = 3

    LOW_INTERVAL_DAYS = 1
    BAND_MULTIPLIERS = {
        ConfidenceBand.medium: 2,
        ConfidenceBand.high: 3,
    }

    def band_for(self, confidence: int) -> ConfidenceBand:
        _require_int("confidence", confidence, self.MIN_CONFIDENCE, self.MAX_CONFIDENCE)

        if confidence < self.CORRECTNESS_THRESHOLD:
            return ConfidenceBand.low
        if confidence == self.CORRECTNESS_THRESHOLD:
            return ConfidenceBand.medium
        return ConfidenceBand.high

    def compute_next_review(self, *, confidence: int, repetition_level: int, now: datetime) -> ReviewOutcome:
        band = self.band_for(confidence)
        _require_int("repetition_level", repetition_level, 1)

        if band == ConfidenceBand.low:
            interval_days = self.LOW_INTERVAL_DAYS
            new_level = 1
        else:
            # интервал считается от уровня ДО этого ответа
            interval_days = repetition_level * self.BAND_MULTIPLIERS[band]
            new_level = repetition_level + 1

        return ReviewOutcome(
            repetition_level=new_level,
            next_review=now + timedelta(days=interval_days),
            interval_days=interval_days,
            band=band,
        )

    def is_due(self, card: Schedulable, *, now: datetime) -> bool:
        if card.next_review is None:
            return True
        if card.next_review <= now:
            return True
        # битая карточка (next_review раньше last_reviewed) считается просроченной
        return not self.is_well_formed(card)

    def is_well_formed(self, card: Schedulable) -> bool:
        if card.next_review is None or card.last_reviewed is None:
            return True
        return card.next_review >= card.last_reviewed

    def due_cards(self, cards: Iterable[CardT], *, now: datetime) -> list[CardT]:
        never_reviewed: list[CardT] = []
        scheduled: list[CardT] = []

        for card in cards:
            if not self.is_due(card, now=now):
                continue
            if card.next_review is None:
                never_reviewed.append(card)
            else:
                scheduled.append(card)

        # sorted() стабилен, порядок входа сохраняется при равных датах
        return never_reviewed + sorted(scheduled, key=lambda c: c.next_review)

    def select_next_due_card(self, cards: Iterable[CardT], *, now: datetime) -> CardT | None:
        due = self.due_cards(cards, now=now)
        return due[0] if due else None


def _require_int(name: str, value, minimum: int, maximum: int | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidReviewInput(f"{name} must be an integer, got {value!r}")
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        raise InvalidReviewInput(f"{name} must be {bounds}, got {value}")
