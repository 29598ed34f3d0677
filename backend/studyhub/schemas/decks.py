from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .cards import CardRead


class DeckCreate(BaseModel):
    name: str = Field(max_length=200)
    description: str = ""


class DeckSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    deck_id: UUID = Field(validation_alias=AliasChoices("id", "deck_id"))
    name: str
    description: str
    created_at: datetime
    last_studied: datetime | None = None


class DeckWithCards(DeckSummary):
    cards: List[CardRead]


class DeckStats(BaseModel):
    deck_id: UUID
    total_cards: int
    due_now: int
    total_reviewed: int
    correct_count: int
    average_confidence: float
