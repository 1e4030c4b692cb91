"""Circular dependencies: SCCs of two or more files, with severity and scoring."""

from __future__ import annotations

from collections.abc import Sequence

from ..detectors.models import Cycle, Severity
from ..exceptions import CycleConsistencyError
from ..logging_config import get_logger
from ..scanning.models import Layer
from ..scoring.calculator import cycle_score, level_for
from ..scoring.models import CycleResult, Dimension
from .algorithms import tarjan_scc
from .models import DependencyGraph

logger = get_logger(__name__)


def cycle_severity(members: Sequence[str], layers: Sequence[Layer]) -> Severity:
    """CRITICAL when Domain is involved, otherwise by cycle length."""
    if Layer.DOMAIN in layers:
        return Severity.CRITICAL
    if len(members) <= 2:
        return Severity.HIGH
    if len(members) <= 4:
        return Severity.MEDIUM
    return Severity.LOW


def describe_cycle(members: Sequence[str], layers: Sequence[Layer]) -> str:
    if Layer.DOMAIN in layers:
        return "Domain layer involved in circular dependency"
    if len(members) == 2:
        return "Direct circular dependency between two files"
    layer_names = ", ".join(layer.value for layer in layers)
    return f"{len(members)}-way circular dependency across {layer_names}"


def _member_layers(graph: DependencyGraph, members: Sequence[str]) -> tuple[Layer, ...]:
    layers: list[Layer] = []
    for node in members:
        layer = graph.layer_of(node)
        if layer not in layers:
            layers.append(layer)
    return tuple(layers)


def detect_cycles(graph: DependencyGraph) -> list[Cycle]:
    """One ``Cycle`` per SCC with more than one member, numbered from 1."""
    cycles: list[Cycle] = []
    for component in tarjan_scc(graph.adjacency, graph.all_nodes):
        if len(component) < 2:
            continue
        members = tuple(component)
        layers = _member_layers(graph, members)
        cycles.append(
            Cycle(
                file=members[0],
                severity=cycle_severity(members, layers),
                id=len(cycles) + 1,
                members=members,
                layers=layers,
                description=describe_cycle(members, layers),
            )
        )
    return cycles


def _index_members(cycles: Sequence[Cycle]) -> tuple[tuple[str, ...], dict[str, tuple[int, ...]]]:
    files: list[str] = []
    ids: dict[str, list[int]] = {}
    for cycle in cycles:
        for member in cycle.members:
            if member not in ids:
                files.append(member)
                ids[member] = []
            ids[member].append(cycle.id)
    return tuple(files), {name: tuple(cycle_ids) for name, cycle_ids in ids.items()}


def check_consistency(cycles: Sequence[Cycle], file_cycle_ids: dict[str, tuple[int, ...]]) -> None:
    """SCCs partition the graph: every file sits in at most one cycle.

    Raises:
        CycleConsistencyError: If the cycles overlap
    """
    member_total = sum(cycle.length for cycle in cycles)
    if member_total != len(file_cycle_ids):
        raise CycleConsistencyError(
            f"{member_total} cycle memberships for {len(file_cycle_ids)} unique files"
        )
    shared = sorted(name for name, ids in file_cycle_ids.items() if len(ids) != 1)
    if shared:
        raise CycleConsistencyError(f"files in more than one cycle: {', '.join(shared)}")


def analyze_cycles(graph: DependencyGraph, total_files: int) -> CycleResult:
    """Cycles dimension over a built graph.

    ``total_files`` is the number of scanned files, which is the
    denominator of the cycle rate even when some files have no namespace.
    """
    cycles = detect_cycles(graph)
    files_in_cycles, file_cycle_ids = _index_members(cycles)
    check_consistency(cycles, file_cycle_ids)

    score = cycle_score(len(cycles), total_files)
    logger.debug(
        f"Cycles: {len(cycles)} cycles over {len(files_in_cycles)} files "
        f"({graph.node_count} nodes, {graph.edge_count} edges) -> {score}"
    )
    return CycleResult(
        dimension=Dimension.CYCLES,
        score=score,
        level=level_for(score),
        total=total_files,
        findings=tuple(cycles),
        files_in_cycles=files_in_cycles,
        file_cycle_ids=file_cycle_ids,
        node_count=graph.node_count,
        edge_count=graph.edge_count,
    )
