"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..detectors.models import Finding, FindingKind, Severity
from ..scoring.models import MaturityLevel

console = Console()

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}

LEVEL_COLORS = {
    MaturityLevel.EXCELLENT: "bold green",
    MaturityLevel.GOOD: "green",
    MaturityLevel.ACCEPTABLE: "yellow",
    MaturityLevel.NEEDS_IMPROVEMENT: "dark_orange",
    MaturityLevel.POOR: "red",
    MaturityLevel.CRITICAL: "bold red",
}

_FINDING_ONELINERS = {
    FindingKind.LAYERING: lambda f: (
        f"{f.layer.value} depends on {f.target_layer.value} via '{f.namespace}'"
    ),
    FindingKind.EXPOSURE: lambda f: f"public {f.type_kind.value} {f.type_name}",
    FindingKind.ABSTRACTION: lambda f: f"{f.description} ({f.pattern})",
    FindingKind.CYCLE: lambda f: f"{f.description}: {' -> '.join(f.members)}",
}


def describe_finding(finding: Finding) -> str:
    return _FINDING_ONELINERS[finding.kind](finding)


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
