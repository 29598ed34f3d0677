# backend/studyhub/api/routes/cards.py
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from starlette import status

from studyhub.api.deps import get_now, get_owned_card, get_owned_deck
from studyhub.auth.dependencies import get_current_user_id
from studyhub.db.session import get_db
from studyhub.models import Card
from studyhub.schemas.card_review import ReviewRequest, ReviewResponse
from studyhub.schemas.cards import CardRead, CreateCardRequest, UpdateCardRequest
from studyhub.services.review_service import ReviewService

router = APIRouter()


def _clean_text(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise HTTPException(status_code=422, detail=f"{field} must be non-empty")
    return value


@router.post("/", response_model=CardRead, status_code=status.HTTP_201_CREATED)
def create_card(
    payload: CreateCardRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    deck = get_owned_deck(db, payload.deck_id, user_id)
    last_position = db.scalar(select(func.max(Card.position)).where(Card.deck_id == deck.id))

    # новая карточка: уровень 1, без истории, сразу к показу
    card = Card(
        deck_id=deck.id,
        front=_clean_text(payload.front, "front"),
        back=_clean_text(payload.back, "back"),
        topic=payload.topic.strip(),
        difficulty=payload.difficulty,
        tags=[t.strip() for t in payload.tags if t.strip()],
        repetition_level=1,
        position=0 if last_position is None else last_position + 1,
    )
    db.add(card)
    db.commit()
    db.refresh(card)

    return CardRead.model_validate(card)


@router.patch("/{card_id}", response_model=CardRead)
def update_card(
    card_id: UUID,
    payload: UpdateCardRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Правка содержимого карточки. Поля расписания тут не трогаются.
    """
    card = get_owned_card(db, card_id, user_id)

    if payload.front is not None:
        card.front = _clean_text(payload.front, "front")
    if payload.back is not None:
        card.back = _clean_text(payload.back, "back")
    if payload.topic is not None:
        card.topic = payload.topic.strip()
    if payload.difficulty is not None:
        card.difficulty = payload.difficulty
    if payload.tags is not None:
        card.tags = [t.strip() for t in payload.tags if t.strip()]

    db.commit()
    db.refresh(card)
    return CardRead.model_validate(card)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(
    card_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    card = get_owned_card(db, card_id, user_id)
    db.delete(card)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{card_id}/review", response_model=ReviewResponse)
def review_card(
    card_id: UUID,
    request: ReviewRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    card = get_owned_card(db, card_id, user_id)

    outcome = ReviewService.review(
        db,
        card=card,
        owner_id=user_id,
        confidence=request.confidence,
        now=now,
    )
    db.commit()

    return ReviewResponse(
        card_id=card.id,
        confidence=request.confidence,
        band=outcome.band,
        repetition_level=outcome.repetition_level,
        interval_days=outcome.interval_days,
        last_reviewed=now,
        next_review=outcome.next_review,
    )
