from typing import Iterable

from .dto import StudyStats
from .policy import ReviewPolicy


def summarize_reviews(confidences: Iterable[int]) -> StudyStats:
    """Сводка по оценкам: сколько повторено, сколько верно (>= 3), средняя уверенность."""
    total = 0
    correct = 0
    average = 0.0

    for confidence in confidences:
        # скользящее среднее, как в счётчике сессии на фронте
        average = (average * total + confidence) / (total + 1)
        total += 1
        if confidence >= ReviewPolicy.CORRECTNESS_THRESHOLD:
            correct += 1

    return StudyStats(
        total_reviewed=total,
        correct_count=correct,
        average_confidence=round(average, 2),
    )
