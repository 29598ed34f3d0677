import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyhub.db.base import Base
from studyhub.db.types import UTCDateTime
from .deck import _utcnow


class CardReviewHistory(Base):
    __tablename__ = "card_review_history"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    card_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("cards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # денормализовано, чтобы статистика колоды шла одним запросом
    deck_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    confidence: Mapped[int] = mapped_column(Integer, nullable=False)
    previous_level: Mapped[int] = mapped_column(Integer, nullable=False)
    new_level: Mapped[int] = mapped_column(Integer, nullable=False)
    interval_days: Mapped[int] = mapped_column(Integer, nullable=False)
    reviewed_at: Mapped[datetime] = mapped_column(UTCDateTime, default=_utcnow, nullable=False)

    card = relationship("Card", back_populates="review_history")
