"""Layer-dependency rules.

A file in a known layer may not import a namespace that names a layer it
must not depend on (Domain depends on nothing, Application only on Domain,
Infrastructure on Domain and Application). Matching is by substring of the
imported namespace, so ``MyShop.Infrastructure.Persistence`` counts as an
Infrastructure reference.
"""

from collections.abc import Sequence

from ..logging_config import get_logger
from ..scanning.extractor import project_imports
from ..scanning.models import Layer, SourceFile
from ..scoring.calculator import layering_score, level_for
from ..scoring.models import Dimension, LayeringResult
from .models import LayeringViolation, Severity

logger = get_logger(__name__)

_SEVERITY_TABLE: dict[tuple[Layer, Layer], Severity] = {
    (Layer.DOMAIN, Layer.INFRASTRUCTURE): Severity.CRITICAL,
    (Layer.DOMAIN, Layer.APPLICATION): Severity.HIGH,
    (Layer.APPLICATION, Layer.INFRASTRUCTURE): Severity.MEDIUM,
}


def violation_severity(source: Layer, target: Layer) -> Severity:
    """Severity of ``source`` depending on ``target``; LOW unless tabled."""
    return _SEVERITY_TABLE.get((source, target), Severity.LOW)


def detect_layering_violations(
    source: SourceFile, platform_prefixes: Sequence[str]
) -> list[LayeringViolation]:
    """One violation per (import, forbidden layer) match in a single file."""
    forbidden = source.layer.forbidden_targets()
    if not forbidden:
        return []

    violations = []
    for namespace in project_imports(source.imports, platform_prefixes):
        for target in forbidden:
            if target.value in namespace:
                violations.append(
                    LayeringViolation(
                        file=source.relative_path,
                        severity=violation_severity(source.layer, target),
                        layer=source.layer,
                        target_layer=target,
                        namespace=namespace,
                    )
                )
    return violations


def analyze_layering(
    files: Sequence[SourceFile], platform_prefixes: Sequence[str]
) -> LayeringResult:
    """Layering dimension over a whole scan."""
    violations: list[LayeringViolation] = []
    for source in files:
        violations.extend(detect_layering_violations(source, platform_prefixes))

    score = layering_score(len(violations), len(files))
    logger.debug(f"Layering: {len(violations)} violations in {len(files)} files -> {score}")
    return LayeringResult(
        dimension=Dimension.LAYERING,
        score=score,
        level=level_for(score),
        total=len(files),
        findings=tuple(violations),
        violation_count=len(violations),
    )
