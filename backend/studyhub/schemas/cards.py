from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from studyhub.core.enums import CardDifficulty


class CardRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    card_id: UUID = Field(validation_alias=AliasChoices("id", "card_id"))
    deck_id: UUID
    front: str
    back: str
    topic: str
    difficulty: CardDifficulty
    tags: List[str]
    position: int

    repetition_level: int
    confidence: Optional[int]
    last_reviewed: Optional[datetime]
    next_review: Optional[datetime]


class CreateCardRequest(BaseModel):
    deck_id: UUID
    front: str
    back: str
    topic: str = Field(default="", max_length=200)
    difficulty: CardDifficulty = CardDifficulty.medium
    tags: List[str] = []


class UpdateCardRequest(BaseModel):
    front: str | None = None
    back: str | None = None
    topic: str | None = Field(default=None, max_length=200)
    difficulty: CardDifficulty | None = None
    tags: List[str] | None = None
