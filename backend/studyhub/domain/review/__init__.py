from .dto import ReviewOutcome, StudyStats
from .entities import CardState
from .policy import InvalidReviewInput, ReviewPolicy
from .stats import summarize_reviews

__all__ = [
    "CardState",
    "InvalidReviewInput",
    "ReviewOutcome",
    "ReviewPolicy",
    "StudyStats",
    "summarize_reviews",
]
