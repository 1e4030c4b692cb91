"""Graph algorithms: strongly connected components."""

from collections.abc import Iterator, Sequence


def tarjan_scc(adjacency: dict[str, list[str]], all_nodes: Sequence[str]) -> list[list[str]]:
    """Strongly connected components of the graph restricted to ``all_nodes``.

    Iterative Tarjan, so deep dependency chains cannot hit the recursion
    limit. Roots are visited in ``all_nodes`` order and each component
    lists its members in discovery order, so equal inputs always give equal
    output. Neighbours outside ``all_nodes`` are ignored.
    """
    known = set(all_nodes)
    discovered: dict[str, int] = {}
    stack_slot: dict[str, int] = {}
    low: dict[str, int] = {}
    pending: list[str] = []
    pending_set: set[str] = set()
    components: list[list[str]] = []

    def successors(node: str) -> Iterator[str]:
        return iter([n for n in adjacency.get(node, ()) if n in known])

    def visit(node: str) -> tuple[str, Iterator[str]]:
        discovered[node] = low[node] = len(discovered)
        stack_slot[node] = len(pending)
        pending.append(node)
        pending_set.add(node)
        return node, successors(node)

    for root in all_nodes:
        if root in discovered:
            continue
        frames = [visit(root)]
        while frames:
            node, remaining = frames[-1]
            for succ in remaining:
                if succ not in discovered:
                    frames.append(visit(succ))
                    break
                if succ in pending_set:
                    low[node] = min(low[node], discovered[succ])
            else:
                # all successors done: close this frame
                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == discovered[node]:
                    cut = stack_slot[node]
                    component = pending[cut:]
                    del pending[cut:]
                    pending_set.difference_update(component)
                    components.append(component)

    return components
