"""Analysis orchestration.

``AnalysisEngine`` runs one scan and the four dimensions over it:

    scan -> {layering, encapsulation, abstraction, graph -> cycles} -> composite

Each dimension runs inside an isolation wrapper: an unexpected exception
in one dimension is logged, recorded as a diagnostic and turned into a
zero-score result, while the other dimensions still complete.

The engine keeps no module-level state. The change cache and the scan
registry are objects the caller creates and passes in.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import Callable, Optional, TypeVar, Union

from .cache import ChangeCache
from .config import DEFAULT_CONFIG, AnalysisConfig
from .detectors.abstraction import analyze_abstraction
from .detectors.encapsulation import analyze_encapsulation
from .detectors.layering import analyze_layering
from .exceptions import InvalidPathError, ScanInProgressError
from .graph.builder import build_dependency_graph
from .graph.cycles import analyze_cycles
from .graph.models import DependencyGraph
from .logging_config import get_logger
from .scanning.models import ScanDiagnostic
from .scanning.scanner import SourceScanner
from .scoring.calculator import composite_score
from .scoring.models import (
    AnalysisResult,
    Dimension,
    DimensionResult,
    GraphSummary,
    MaturityLevel,
)
from .scoring.thresholds import MIN_SCORE

logger = get_logger(__name__)

R = TypeVar("R", bound=DimensionResult)


class ScanRegistry:
    """Tracks roots with an analysis in flight.

    Thread-safe. A second concurrent analysis of the same resolved root is
    rejected; different roots may run at the same time.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._active: set[str] = set()

    @contextmanager
    def acquire(self, root: Path) -> Iterator[None]:
        """Hold ``root`` for the duration of the ``with`` block.

        Raises:
            ScanInProgressError: If ``root`` is already held
        """
        key = str(Path(root).resolve())
        with self._lock:
            if key in self._active:
                raise ScanInProgressError(Path(key))
            self._active.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(key)

    def is_active(self, root: Path) -> bool:
        with self._lock:
            return str(Path(root).resolve()) in self._active


def validate_root(root: Union[str, Path]) -> Path:
    """Resolve ``root`` and check it is a readable directory.

    Raises:
        InvalidPathError: If the path is missing, not a directory or unreadable
    """
    path = Path(root)
    if not path.exists():
        raise InvalidPathError(path, "Path does not exist")
    if not path.is_dir():
        raise InvalidPathError(path, "Not a directory")
    if not os.access(path, os.R_OK | os.X_OK):
        raise InvalidPathError(path, "Directory is not readable")
    return path.resolve()


def failed_result(dimension: Dimension, total: int, message: str) -> DimensionResult:
    """Placeholder for a dimension that could not be computed."""
    return DimensionResult(
        dimension=dimension,
        score=MIN_SCORE,
        level=MaturityLevel.CRITICAL,
        total=total,
        error=message,
    )


class AnalysisEngine:
    """Runs a full analysis of one directory.

    Attributes:
        config: Analysis configuration
        change_cache: Optional caller-owned change cache
        registry: Optional caller-owned registry guarding concurrent scans
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        change_cache: Optional[ChangeCache] = None,
        registry: Optional[ScanRegistry] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.change_cache = change_cache
        self.registry = registry

    def run(self, root: Union[str, Path]) -> AnalysisResult:
        """Analyze ``root``.

        Raises:
            InvalidPathError: If ``root`` is not a readable directory
            ScanInProgressError: If the registry already holds ``root``
        """
        path = validate_root(root)
        if self.registry is None:
            return self._run(path)
        with self.registry.acquire(path):
            return self._run(path)

    def _run(self, root: Path) -> AnalysisResult:
        logger.info(f"Analyzing {root}")
        outcome = SourceScanner(self.config, self.change_cache).scan(root)
        files = outcome.files
        diagnostics = list(outcome.diagnostics)
        prefixes = self.config.platform_prefixes

        def isolated(dimension: Dimension, total: int, compute: Callable[[], R]) -> DimensionResult:
            try:
                return compute()
            except Exception as e:
                logger.exception(f"{dimension.value} analysis failed")
                message = f"{e.__class__.__name__}: {e}"
                diagnostics.append(
                    ScanDiagnostic(str(root), f"{dimension.value} analysis failed: {message}")
                )
                return failed_result(dimension, total, message)

        layering = isolated(Dimension.LAYERING, len(files), lambda: analyze_layering(files, prefixes))
        encapsulation = isolated(Dimension.ENCAPSULATION, 0, lambda: analyze_encapsulation(files))
        abstraction = isolated(
            Dimension.ABSTRACTION,
            len(files),
            lambda: analyze_abstraction(
                files, self.config.max_code_examples, self.config.snippet_lines
            ),
        )

        graphs: list[DependencyGraph] = []

        def cycles_stage() -> DimensionResult:
            graph = build_dependency_graph(files, prefixes)
            graphs.append(graph)
            return analyze_cycles(graph, len(files))

        cycles = isolated(Dimension.CYCLES, len(files), cycles_stage)
        summary = (
            GraphSummary(graphs[0].node_count, graphs[0].edge_count) if graphs else GraphSummary()
        )

        dimensions = (layering, encapsulation, abstraction, cycles)
        composite = composite_score(dimensions)
        logger.info(
            "Analysis complete: "
            + ", ".join(f"{d.dimension.value}={d.score}" for d in dimensions)
            + f", composite={composite.display} ({composite.level.value})"
        )

        return AnalysisResult(
            root=str(root),
            total_files=len(files),
            layering=layering,
            encapsulation=encapsulation,
            abstraction=abstraction,
            cycles=cycles,
            composite=composite,
            graph=summary,
            diagnostics=tuple(diagnostics),
            changed_files=tuple(outcome.changed_files) if self.change_cache is not None else (),
        )

