"""Exception hierarchy for arch-insight."""

from .analysis import (
    AnalysisError,
    CycleConsistencyError,
    FileAccessError,
    ScanInProgressError,
)
from .base import ArchInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ArchInsightError",
    "AnalysisError",
    "FileAccessError",
    "ScanInProgressError",
    "CycleConsistencyError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
