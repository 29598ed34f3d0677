import uuid
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, Integer, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyhub.core.enums import CardDifficulty
from studyhub.db.base import Base
from studyhub.db.types import UTCDateTime
from .deck import _utcnow


class Card(Base):
    __tablename__ = "cards"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    deck_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("decks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    topic: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    difficulty: Mapped[CardDifficulty] = mapped_column(
        Enum(CardDifficulty, name="card_difficulty"),
        default=CardDifficulty.medium,
        nullable=False,
    )
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    # пишется только операцией review
    repetition_level: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    confidence: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_reviewed: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    next_review: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True, index=True)

    # порядок добавления в колоду, created_at может совпасть
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=_utcnow, nullable=False)

    deck: Mapped["Deck"] = relationship("Deck", back_populates="cards")
    review_history: Mapped[list["CardReviewHistory"]] = relationship(
        "CardReviewHistory",
        back_populates="card",
        cascade="all, delete-orphan",
    )
