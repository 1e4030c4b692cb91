"""Public API for arch-insight.

Example:
    >>> from arch_insight import analyze
    >>>
    >>> result = analyze("/path/to/solution")
    >>> result.composite.display, result.composite.level.value
    (4.25, 'Good')
    >>>
    >>> # With customization
    >>> result = analyze("/path/to/solution", workers=4, exclude_dirs=["bin", "obj", "tests"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .cache import ChangeCache
from .config import load_config
from .engine import AnalysisEngine, ScanRegistry
from .logging_config import get_logger
from .scoring.models import AnalysisResult

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    change_cache: Optional[ChangeCache] = None,
    registry: Optional[ScanRegistry] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze a C# source tree and return its architecture scores.

    Args:
        path: Root directory to analyze (default: current directory)
        config_file: Optional explicit config file path
        change_cache: Optional change cache; when given, unchanged files
            reuse their cached extraction and ``changed_files`` is filled
        registry: Optional registry rejecting concurrent scans of one root
        **overrides: Configuration overrides (e.g. workers=4)

    Returns:
        AnalysisResult with the four dimension results and the composite

    Raises:
        InvalidPathError: If ``path`` is not a readable directory
        InvalidConfigError: If configuration is invalid
        ScanInProgressError: If ``registry`` is already scanning ``path``
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    engine = AnalysisEngine(config=config, change_cache=change_cache, registry=registry)
    return engine.run(path)
