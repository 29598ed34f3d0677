from datetime import datetime, timezone
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.orm import Session

from studyhub.models import Card, Deck


def get_now() -> datetime:
    """Часы приложения. В тестах подменяется через dependency_overrides."""
    return datetime.now(timezone.utc)


def get_owned_deck(db: Session, deck_id: UUID, user_id: UUID) -> Deck:
    deck = db.get(Deck, deck_id)
    if not deck:
        raise HTTPException(status_code=404, detail="Deck not found")
    if deck.owner_id != user_id:
        raise HTTPException(status_code=403, detail="Deck not accessible")
    return deck


def get_owned_card(db: Session, card_id: UUID, user_id: UUID) -> Card:
    card = db.get(Card, card_id)
    if not card:
        raise HTTPException(status_code=404, detail="Card not found")
    get_owned_deck(db, card.deck_id, user_id)
    return card
