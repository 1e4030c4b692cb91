"""Data model for the file-level dependency graph.

Nodes are file basenames (``Order.cs``), not paths: two files with the same
name in different folders share one node. Edges are directed:
``adjacency[A]`` containing ``B`` means A imports a namespace that B
declares.
"""

from dataclasses import dataclass, field

from ..scanning.models import Layer


@dataclass
class DependencyGraph:
    """Namespace-resolved dependency graph.

    ``all_nodes`` keeps first-seen order so every traversal over it is
    deterministic. ``adjacency`` lists are ordered and duplicate-free.
    """

    adjacency: dict[str, list[str]] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)
    all_nodes: list[str] = field(default_factory=list)
    node_layers: dict[str, Layer] = field(default_factory=dict)
    namespace_owners: dict[str, list[str]] = field(default_factory=dict)
    edge_count: int = 0

    @property
    def node_count(self) -> int:
        return len(self.all_nodes)

    def layer_of(self, node: str) -> Layer:
        return self.node_layers.get(node, Layer.UNKNOWN)

    def has_edge(self, source: str, target: str) -> bool:
        return target in self.adjacency.get(source, ())
