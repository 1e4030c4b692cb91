"""Dependency graph construction from namespace and using declarations."""

from collections.abc import Sequence

from ..logging_config import get_logger
from ..scanning.extractor import project_imports
from ..scanning.models import SourceFile
from .models import DependencyGraph

logger = get_logger(__name__)


def _index_namespaces(files: Sequence[SourceFile], graph: DependencyGraph) -> None:
    """Register every file that declares a namespace as a node and owner."""
    for source in files:
        if not source.namespace:
            continue
        node = source.name
        if node not in graph.node_layers:
            graph.all_nodes.append(node)
            graph.node_layers[node] = source.layer
            graph.adjacency[node] = []
            graph.reverse[node] = []
        owners = graph.namespace_owners.setdefault(source.namespace, [])
        if node not in owners:
            owners.append(node)


def _add_edge(graph: DependencyGraph, source: str, target: str) -> None:
    if source == target or target in graph.adjacency[source]:
        return
    graph.adjacency[source].append(target)
    graph.reverse[target].append(source)
    graph.edge_count += 1


def build_dependency_graph(
    files: Sequence[SourceFile], platform_prefixes: Sequence[str] = ("System", "Microsoft")
) -> DependencyGraph:
    """Build the graph in two passes.

    The namespace index is complete before any import is resolved, so an
    import may refer to a namespace declared by a file collected later.
    Imports of the file's own namespace and of platform namespaces never
    produce edges; files without a namespace are left out.
    """
    graph = DependencyGraph()
    _index_namespaces(files, graph)

    for source in files:
        if not source.namespace:
            continue
        node = source.name
        for namespace in project_imports(source.imports, platform_prefixes):
            if namespace == source.namespace:
                continue
            for owner in graph.namespace_owners.get(namespace, ()):
                _add_edge(graph, node, owner)

    logger.debug(
        f"Dependency graph: {graph.node_count} nodes, {graph.edge_count} edges, "
        f"{len(graph.namespace_owners)} namespaces"
    )
    return graph
