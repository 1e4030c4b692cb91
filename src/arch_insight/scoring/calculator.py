"""Score calculation: rate -> 0-5 score, and the composite over four dimensions.

Pure functions with no I/O. An empty file set scores 5 everywhere: with
nothing to violate the project is treated as clean, not unknown.
"""

from collections.abc import Sequence

from .models import CompositeScore, DimensionResult, MaturityLevel
from .thresholds import (
    ABSTRACTION_RATE_THRESHOLDS,
    CYCLE_RATE_THRESHOLDS,
    ENCAPSULATION_PERCENT_THRESHOLDS,
    LAYERING_RATE_THRESHOLDS,
    MAX_SCORE,
    MIN_SCORE,
)


def _score_from_table(value: float, table: Sequence[tuple[float, int]]) -> int:
    for bound, score in table:
        if value < bound:
            return score
    return MIN_SCORE


def score_from_rate(count: int, total: int, table: Sequence[tuple[float, int]]) -> int:
    """Score ``count / total`` against a rate table.

    Zero findings, or zero files, is always the maximum score.
    """
    if total <= 0 or count == 0:
        return MAX_SCORE
    return _score_from_table(count / total, table)


def layering_score(violation_count: int, total_files: int) -> int:
    return score_from_rate(violation_count, total_files, LAYERING_RATE_THRESHOLDS)


def abstraction_score(issue_count: int, total_files: int) -> int:
    return score_from_rate(issue_count, total_files, ABSTRACTION_RATE_THRESHOLDS)


def cycle_score(cycle_count: int, total_files: int) -> int:
    return score_from_rate(cycle_count, total_files, CYCLE_RATE_THRESHOLDS)


def public_percentage(public_types: int, total_types: int) -> float:
    """Share of public types in percent, rounded to one decimal (0 when no types)."""
    if total_types <= 0:
        return 0.0
    return round(public_types / total_types * 100, 1)


def score_from_percentage(percentage: float, table: Sequence[tuple[float, int]]) -> int:
    """Score a percentage directly against a table (lower is better)."""
    return _score_from_table(percentage, table)


def encapsulation_score(percentage: float) -> int:
    return score_from_percentage(percentage, ENCAPSULATION_PERCENT_THRESHOLDS)


def level_for(score: float) -> MaturityLevel:
    return MaturityLevel.from_score(score)


def composite_score(dimensions: Sequence[DimensionResult]) -> CompositeScore:
    """Unweighted mean of the dimension scores."""
    if not dimensions:
        return CompositeScore(score=float(MAX_SCORE), level=level_for(MAX_SCORE))
    mean = sum(d.score for d in dimensions) / len(dimensions)
    return CompositeScore(score=mean, level=level_for(mean))
