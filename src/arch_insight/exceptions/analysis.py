"""Analysis-related exceptions: file access, concurrent scans, graph consistency."""

from pathlib import Path

from .base import ArchInsightError


class AnalysisError(ArchInsightError):
    """Base class for analysis-related errors."""

    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ScanInProgressError(AnalysisError):
    """Raised when a scan is requested for a root that is already being scanned."""

    def __init__(self, root: Path):
        super().__init__(
            f"Analysis already in progress: {root}",
            details={"root": str(root)},
        )
        self.root = root


class CycleConsistencyError(AnalysisError):
    """Raised when cycle aggregation disagrees with the SCC decomposition."""

    def __init__(self, reason: str):
        super().__init__(f"Inconsistent cycle report: {reason}", details={"reason": reason})
        self.reason = reason
