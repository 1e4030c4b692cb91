"""
Arch Insight - architecture maturity analysis for C# code bases

Scores a source tree on four dimensions (layer dependencies, type
visibility, abstraction separation and circular dependencies) and
combines them into a single 0-5 maturity score.
"""

__version__ = "0.1.0"

from .api import analyze
from .cache import ChangeCache
from .config import AnalysisConfig, load_config
from .engine import AnalysisEngine, ScanRegistry
from .scoring.models import AnalysisResult, CompositeScore, Dimension, MaturityLevel

__all__ = [
    "analyze",  # Main entry point
    "AnalysisEngine",  # Advanced usage (explicit cache/registry wiring)
    "AnalysisConfig",
    "AnalysisResult",
    "ChangeCache",
    "CompositeScore",
    "Dimension",
    "MaturityLevel",
    "ScanRegistry",
    "load_config",
]
