"""Result models: per-dimension results, composite score, full analysis result."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..detectors.models import CodeExample, Cycle, Finding, Severity, VisibilityStats
from ..scanning.models import ScanDiagnostic
from .thresholds import LEVEL_BANDS


class Dimension(Enum):
    LAYERING = "layering"
    ENCAPSULATION = "encapsulation"
    ABSTRACTION = "abstraction"
    CYCLES = "cycles"


class MaturityLevel(Enum):
    """Six-level label for a 0-5 score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    ACCEPTABLE = "Acceptable"
    NEEDS_IMPROVEMENT = "NeedsImprovement"
    POOR = "Poor"
    CRITICAL = "Critical"

    @classmethod
    def from_score(cls, score: float) -> MaturityLevel:
        for bound, label in LEVEL_BANDS:
            if score >= bound:
                return cls(label)
        return cls.CRITICAL


def severity_counts(findings: Iterable[Finding]) -> dict[str, int]:
    """Findings per severity, every severity present (worst first)."""
    counter = Counter(f.severity for f in findings)
    return {s.value: counter.get(s, 0) for s in Severity}


@dataclass(frozen=True)
class DimensionResult:
    """Score and evidence for one quality dimension.

    ``total`` is the denominator the dimension's rate is computed over
    (files for most dimensions, declared types for encapsulation).
    ``error`` is set when the dimension could not be computed.
    """

    dimension: Dimension
    score: int
    level: MaturityLevel
    total: int
    findings: tuple[Finding, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def counts(self) -> dict[str, int]:
        return {"findings": len(self.findings), **severity_counts(self.findings)}


@dataclass(frozen=True)
class LayeringResult(DimensionResult):
    violation_count: int = 0

    @property
    def counts(self) -> dict[str, int]:
        return {"violations": self.violation_count, **severity_counts(self.findings)}


@dataclass(frozen=True)
class EncapsulationResult(DimensionResult):
    stats: VisibilityStats = field(default_factory=VisibilityStats)
    public_percentage: float = 0.0

    @property
    def total_types(self) -> int:
        return self.stats.total_types

    @property
    def public_types(self) -> int:
        return self.stats.public_types

    @property
    def over_exposed_count(self) -> int:
        return len(self.findings)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "total_types": self.total_types,
            "public_types": self.public_types,
            "over_exposed": self.over_exposed_count,
        }


@dataclass(frozen=True)
class AbstractionResult(DimensionResult):
    files_with_issues: int = 0
    code_examples: tuple[CodeExample, ...] = ()

    @property
    def issue_count(self) -> int:
        return len(self.findings)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "issues": self.issue_count,
            "files_with_issues": self.files_with_issues,
            **severity_counts(self.findings),
        }


@dataclass(frozen=True)
class CycleResult(DimensionResult):
    files_in_cycles: tuple[str, ...] = ()
    file_cycle_ids: dict[str, tuple[int, ...]] = field(default_factory=dict)
    node_count: int = 0
    edge_count: int = 0

    @property
    def cycles(self) -> tuple[Cycle, ...]:
        return self.findings  # type: ignore[return-value]

    @property
    def cycle_count(self) -> int:
        return len(self.findings)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "cycles": self.cycle_count,
            "files_in_cycles": len(self.files_in_cycles),
            **severity_counts(self.findings),
        }


@dataclass(frozen=True)
class CompositeScore:
    """Unweighted mean of the four dimension scores.

    ``score`` is never rounded; use ``display`` for presentation.
    """

    score: float
    level: MaturityLevel

    @property
    def display(self) -> float:
        return round(self.score, 1)


@dataclass(frozen=True)
class GraphSummary:
    """Size of the dependency graph the cycles dimension ran on."""

    node_count: int = 0
    edge_count: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis run produces.

    A plain value with no formatting; see ``arch_insight.serialization``
    for a JSON-safe rendering.
    """

    root: str
    total_files: int
    layering: DimensionResult
    encapsulation: DimensionResult
    abstraction: DimensionResult
    cycles: DimensionResult
    composite: CompositeScore
    graph: GraphSummary = field(default_factory=GraphSummary)
    diagnostics: tuple[ScanDiagnostic, ...] = ()
    changed_files: tuple[str, ...] = ()

    @property
    def dimensions(self) -> tuple[DimensionResult, ...]:
        return (self.layering, self.encapsulation, self.abstraction, self.cycles)

    @property
    def score(self) -> float:
        return self.composite.score

    def all_findings(self) -> list[Finding]:
        """Every finding across dimensions, worst severity first (stable)."""
        findings = [f for d in self.dimensions for f in d.findings]
        return sorted(findings, key=lambda f: f.severity.rank)
