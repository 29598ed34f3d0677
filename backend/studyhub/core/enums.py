import enum


class ConfidenceBand(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class CardDifficulty(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"
