"""Type-visibility discipline.

Counts public and internal classes, interfaces and records, and flags
public types that do not look intentionally public. Public is expected
for presentation-side layers, for types named like controllers or data
contracts, and for anything under a Contracts/DTOs directory.
"""

from collections import Counter
from collections.abc import Sequence

from ..logging_config import get_logger
from ..scanning.layers import in_contract_directory
from ..scanning.models import SourceFile, TypeDeclaration, TypeKind, Visibility
from ..scoring.calculator import encapsulation_score, level_for, public_percentage
from ..scoring.models import Dimension, EncapsulationResult
from .models import ExposureFinding, Severity, VisibilityStats

logger = get_logger(__name__)

PUBLIC_NAME_SUFFIXES = ("Controller", "Dto", "Request", "Response", "Contract")


def is_intentionally_public(source: SourceFile, declaration: TypeDeclaration) -> bool:
    return (
        source.layer.is_outer
        or declaration.name.endswith(PUBLIC_NAME_SUFFIXES)
        or in_contract_directory(source.directories)
    )


def find_overexposed(source: SourceFile) -> list[ExposureFinding]:
    """Public types in ``source`` that match no exemption."""
    findings = []
    for declaration in source.declarations:
        if not declaration.is_public or is_intentionally_public(source, declaration):
            continue
        findings.append(
            ExposureFinding(
                file=source.relative_path,
                severity=Severity.LOW,
                type_kind=declaration.kind,
                type_name=declaration.name,
                suggestion=(
                    f"Consider making '{declaration.name}' internal - "
                    "it appears to be an implementation detail"
                ),
            )
        )
    return findings


def count_visibility(files: Sequence[SourceFile]) -> VisibilityStats:
    counter: Counter = Counter(
        (d.kind, d.visibility) for source in files for d in source.declarations
    )
    return VisibilityStats(
        public_classes=counter[(TypeKind.CLASS, Visibility.PUBLIC)],
        internal_classes=counter[(TypeKind.CLASS, Visibility.INTERNAL)],
        public_interfaces=counter[(TypeKind.INTERFACE, Visibility.PUBLIC)],
        internal_interfaces=counter[(TypeKind.INTERFACE, Visibility.INTERNAL)],
        public_records=counter[(TypeKind.RECORD, Visibility.PUBLIC)],
        internal_records=counter[(TypeKind.RECORD, Visibility.INTERNAL)],
    )


def analyze_encapsulation(files: Sequence[SourceFile]) -> EncapsulationResult:
    """Encapsulation dimension over a whole scan."""
    stats = count_visibility(files)
    percentage = public_percentage(stats.public_types, stats.total_types)
    findings = [f for source in files for f in find_overexposed(source)]

    score = encapsulation_score(percentage)
    logger.debug(
        f"Encapsulation: {stats.public_types}/{stats.total_types} public "
        f"({percentage}%) -> {score}"
    )
    return EncapsulationResult(
        dimension=Dimension.ENCAPSULATION,
        score=score,
        level=level_for(score),
        total=stats.total_types,
        findings=tuple(findings),
        stats=stats,
        public_percentage=percentage,
    )
