from datetime import datetime
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from studyhub.api.deps import get_now, get_owned_deck
from studyhub.auth.dependencies import get_current_user_id
from studyhub.db.session import get_db
from studyhub.models import Deck
from studyhub.schemas.cards import CardRead
from studyhub.schemas.decks import DeckCreate, DeckStats, DeckSummary, DeckWithCards
from studyhub.services.review_service import ReviewService

router = APIRouter(tags=["decks"])


@router.get("/", response_model=List[DeckSummary])
def list_user_decks(user_id: UUID = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """
    Все колоды пользователя (без карточек)
    """
    decks = (
        db.query(Deck)
        .filter(Deck.owner_id == user_id)
        .order_by(Deck.created_at.asc())
        .all()
    )
    return [DeckSummary.model_validate(d) for d in decks]


@router.post("/", response_model=DeckSummary, status_code=status.HTTP_201_CREATED)
def create_deck(
    payload: DeckCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=422, detail="Name is required")

    deck = Deck(owner_id=user_id, name=name, description=payload.description.strip())
    db.add(deck)
    db.commit()
    db.refresh(deck)

    return DeckSummary.model_validate(deck)


@router.get("/{deck_id}", response_model=DeckWithCards)
def get_deck(deck_id: UUID, user_id: UUID = Depends(get_current_user_id), db: Session = Depends(get_db)):
    deck = get_owned_deck(db, deck_id, user_id)
    return DeckWithCards.model_validate(deck)


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_deck(deck_id: UUID, user_id: UUID = Depends(get_current_user_id), db: Session = Depends(get_db)):
    deck = get_owned_deck(db, deck_id, user_id)
    db.delete(deck)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{deck_id}/next", response_model=CardRead | None)
def get_next_card(
    deck_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """
    Следующая карточка к показу; null, если ничего не просрочено
    """
    deck = get_owned_deck(db, deck_id, user_id)
    card = ReviewService.next_due(deck, now=now)
    if card is None:
        return None
    return CardRead.model_validate(card)


@router.get("/{deck_id}/due", response_model=List[CardRead])
def get_due_queue(
    deck_id: UUID,
    limit: int | None = None,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    deck = get_owned_deck(db, deck_id, user_id)
    queue = ReviewService.due_queue(deck, now=now)
    if limit is not None:
        queue = queue[: max(limit, 0)]
    return [CardRead.model_validate(c) for c in queue]


@router.get("/{deck_id}/stats", response_model=DeckStats)
def get_deck_stats(
    deck_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    deck = get_owned_deck(db, deck_id, user_id)
    stats = ReviewService.deck_stats(db, deck)

    return DeckStats(
        deck_id=deck.id,
        total_cards=len(deck.cards),
        due_now=len(ReviewService.due_queue(deck, now=now)),
        total_reviewed=stats.total_reviewed,
        correct_count=stats.correct_count,
        average_confidence=stats.average_confidence,
    )
