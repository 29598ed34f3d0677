from .card import Card
from .card_review_history import CardReviewHistory
from .deck import Deck

__all__ = ["Card", "CardReviewHistory", "Deck"]
