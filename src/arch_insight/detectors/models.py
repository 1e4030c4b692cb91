"""Finding models shared by every dimension.

All findings form one tagged family: each carries ``file``, ``severity``
and a class-level ``kind``, so aggregation and reporting can group them
without inspecting concrete types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ..scanning.models import Layer, TypeKind


class Severity(Enum):
    """Finding severity, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        """0 for CRITICAL up to 3 for LOW; sort ascending for worst-first."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}


class FindingKind(Enum):
    LAYERING = "layering"
    EXPOSURE = "exposure"
    ABSTRACTION = "abstraction"
    CYCLE = "cycle"


class AbstractionIssue(Enum):
    SQL_MIXING = "SQL_MIXING"
    EF_IN_DOMAIN = "EF_IN_DOMAIN"
    HTTP_MIXING = "HTTP_MIXING"
    FILE_IO_MIXING = "FILE_IO_MIXING"
    SERIALIZATION_IN_DOMAIN = "SERIALIZATION_IN_DOMAIN"
    EXCESSIVE_LOGGING = "EXCESSIVE_LOGGING"


@dataclass(frozen=True)
class Finding:
    """Common shape of every finding.

    ``file`` is the path relative to the scan root, except for cycles,
    where it is the graph identifier (basename) of the first member.
    """

    file: str
    severity: Severity

    kind: ClassVar[FindingKind]


@dataclass(frozen=True)
class LayeringViolation(Finding):
    """An import from a layer into a layer it must not depend on."""

    layer: Layer
    target_layer: Layer
    namespace: str

    kind: ClassVar[FindingKind] = FindingKind.LAYERING


@dataclass(frozen=True)
class ExposureFinding(Finding):
    """A public type that looks like an implementation detail."""

    type_kind: TypeKind
    type_name: str
    suggestion: str

    kind: ClassVar[FindingKind] = FindingKind.EXPOSURE


@dataclass(frozen=True)
class AbstractionFinding(Finding):
    """Business logic mixed with a low-level technical concern."""

    layer: Layer
    issue: AbstractionIssue
    description: str
    pattern: str

    kind: ClassVar[FindingKind] = FindingKind.ABSTRACTION


@dataclass(frozen=True)
class Cycle(Finding):
    """A strongly connected component of two or more files."""

    id: int
    members: tuple[str, ...]
    layers: tuple[Layer, ...]
    description: str

    kind: ClassVar[FindingKind] = FindingKind.CYCLE

    @property
    def length(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class VisibilityStats:
    """Public/internal declaration counts per type kind."""

    public_classes: int = 0
    internal_classes: int = 0
    public_interfaces: int = 0
    internal_interfaces: int = 0
    public_records: int = 0
    internal_records: int = 0

    @property
    def public_types(self) -> int:
        return self.public_classes + self.public_interfaces + self.public_records

    @property
    def total_types(self) -> int:
        return (
            self.public_types
            + self.internal_classes
            + self.internal_interfaces
            + self.internal_records
        )


@dataclass(frozen=True)
class CodeExample:
    """Leading lines of a file with abstraction issues, kept as evidence.

    ``file`` is relative to the scan root, ``path`` is absolute.
    """

    file: str
    path: str
    issues: tuple[AbstractionIssue, ...]
    snippet: str
