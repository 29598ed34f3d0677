import logging
from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from studyhub.domain.review import CardState, ReviewOutcome, ReviewPolicy, StudyStats, summarize_reviews
from studyhub.models import Card, CardReviewHistory, Deck

logger = logging.getLogger(__name__)

policy = ReviewPolicy()


class ReviewService:
    @staticmethod
    def review(db: Session, *, card: Card, owner_id: UUID, confidence: int, now: datetime) -> ReviewOutcome:
        """
        Применяет оценку к карточке и пишет историю.
        Коммит делает вызывающий, все изменения уходят одной транзакцией.
        """
        next_review = card.next_review
        if next_review is not None and not policy.is_well_formed(card):
            # битая карточка уже отдана как просроченная, ответ её чинит
            logger.warning(
                "card %s: next_review %s precedes last_reviewed %s, rescheduling from now",
                card.id,
                next_review.isoformat(),
                card.last_reviewed.isoformat(),
            )
            next_review = None

        state = CardState(
            repetition_level=card.repetition_level,
            confidence=card.confidence,
            last_reviewed=card.last_reviewed,
            next_review=next_review,
        )
        previous_level = state.repetition_level

        outcome = state.apply_review(confidence=confidence, reviewed_at=now, policy=policy)

        # применяем результат к ORM-карточке
        card.confidence = state.confidence
        card.repetition_level = state.repetition_level
        card.last_reviewed = state.last_reviewed
        card.next_review = state.next_review
        card.deck.last_studied = now

        db.add(
            CardReviewHistory(
                card_id=card.id,
                deck_id=card.deck_id,
                owner_id=owner_id,
                confidence=confidence,
                previous_level=previous_level,
                new_level=outcome.repetition_level,
                interval_days=outcome.interval_days,
                reviewed_at=now,
            )
        )

        logger.info(
            "card %s reviewed: confidence=%s band=%s level %s->%s next_review=%s",
            card.id,
            confidence,
            outcome.band.value,
            previous_level,
            outcome.repetition_level,
            outcome.next_review.isoformat(),
        )
        return outcome

    @staticmethod
    def due_queue(deck: Deck, *, now: datetime) -> list[Card]:
        return policy.due_cards(deck.cards, now=now)

    @staticmethod
    def next_due(deck: Deck, *, now: datetime) -> Card | None:
        card = policy.select_next_due_card(deck.cards, now=now)
        if card is None:
            logger.debug("deck %s: nothing due at %s", deck.id, now.isoformat())
        return card

    @staticmethod
    def deck_stats(db: Session, deck: Deck) -> StudyStats:
        confidences: Sequence[int] = db.scalars(
            select(CardReviewHistory.confidence)
            .where(CardReviewHistory.deck_id == deck.id)
            .order_by(CardReviewHistory.reviewed_at.asc())
        ).all()
        return summarize_reviews(confidences)
