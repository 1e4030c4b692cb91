"""File dependency graph and cycle detection."""

from .algorithms import tarjan_scc
from .builder import build_dependency_graph
from .cycles import analyze_cycles, cycle_severity, describe_cycle, detect_cycles
from .models import DependencyGraph

__all__ = [
    "DependencyGraph",
    "analyze_cycles",
    "build_dependency_graph",
    "cycle_severity",
    "describe_cycle",
    "detect_cycles",
    "tarjan_scc",
]
