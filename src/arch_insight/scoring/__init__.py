"""Scoring: fixed rate thresholds, per-dimension scores, composite score."""

from .calculator import (
    abstraction_score,
    composite_score,
    cycle_score,
    encapsulation_score,
    layering_score,
    level_for,
    public_percentage,
    score_from_percentage,
    score_from_rate,
)
from .models import (
    AbstractionResult,
    AnalysisResult,
    CompositeScore,
    CycleResult,
    Dimension,
    DimensionResult,
    EncapsulationResult,
    GraphSummary,
    LayeringResult,
    MaturityLevel,
)

__all__ = [
    "AbstractionResult",
    "AnalysisResult",
    "CompositeScore",
    "CycleResult",
    "Dimension",
    "DimensionResult",
    "EncapsulationResult",
    "GraphSummary",
    "LayeringResult",
    "MaturityLevel",
    "abstraction_score",
    "composite_score",
    "cycle_score",
    "encapsulation_score",
    "layering_score",
    "level_for",
    "public_percentage",
    "score_from_percentage",
    "score_from_rate",
]
