"""JSON-safe rendering of an AnalysisResult.

Enums become their values, tuples become lists and every finding carries
its ``kind`` so consumers can group without knowing the concrete types.
"""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from .detectors.models import Finding
from .scoring.models import AnalysisResult, DimensionResult


def to_plain(value: Any) -> Any:
    """Recursively convert dataclasses, enums and containers to plain data."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(to_plain(k)): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def finding_to_dict(finding: Finding) -> dict[str, Any]:
    data = {"kind": finding.kind.value}
    data.update(to_plain(finding))
    return data


def dimension_to_dict(result: DimensionResult) -> dict[str, Any]:
    data = to_plain(result)
    data["findings"] = [finding_to_dict(f) for f in result.findings]
    data["counts"] = result.counts
    return data


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    return {
        "root": result.root,
        "total_files": result.total_files,
        "composite": {
            "score": result.composite.score,
            "display": result.composite.display,
            "level": result.composite.level.value,
        },
        "dimensions": {d.dimension.value: dimension_to_dict(d) for d in result.dimensions},
        "graph": to_plain(result.graph),
        "diagnostics": to_plain(result.diagnostics),
        "changed_files": list(result.changed_files),
    }


def result_to_json(result: AnalysisResult, indent: int = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent)
