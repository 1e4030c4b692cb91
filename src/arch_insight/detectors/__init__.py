"""Rule engines for layering, encapsulation and abstraction.

Only the finding models are re-exported; import the detector modules
directly (``arch_insight.detectors.layering`` etc.).
"""

from .models import (
    AbstractionFinding,
    AbstractionIssue,
    CodeExample,
    Cycle,
    ExposureFinding,
    Finding,
    FindingKind,
    LayeringViolation,
    Severity,
    VisibilityStats,
)

__all__ = [
    "AbstractionFinding",
    "AbstractionIssue",
    "CodeExample",
    "Cycle",
    "ExposureFinding",
    "Finding",
    "FindingKind",
    "LayeringViolation",
    "Severity",
    "VisibilityStats",
]
