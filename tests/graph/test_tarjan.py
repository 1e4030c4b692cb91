"""Tests for graph/algorithms.py - iterative Tarjan SCC."""

import time

from arch_insight.graph.algorithms import tarjan_scc


class TestTarjanSCC:
    def test_empty(self):
        assert tarjan_scc({}, []) == []

    def test_chain_has_only_singletons(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": ["d"], "d": []}
        sccs = tarjan_scc(adjacency, ["a", "b", "c", "d"])
        assert sorted(sccs) == [["a"], ["b"], ["c"], ["d"]]

    def test_two_cycle(self):
        sccs = tarjan_scc({"a": ["b"], "b": ["a"], "c": []}, ["a", "b", "c"])
        assert sccs == [["a", "b"], ["c"]]

    def test_three_cycle_in_discovery_order(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": ["a"]}
        assert tarjan_scc(adjacency, ["a", "b", "c"]) == [["a", "b", "c"]]

    def test_cycle_reached_through_tail(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": ["b"]}
        assert tarjan_scc(adjacency, ["a", "b", "c"]) == [["b", "c"], ["a"]]

    def test_two_separate_cycles(self):
        adjacency = {"a": ["b"], "b": ["a"], "c": ["d"], "d": ["c"], "x": ["a", "c"]}
        sccs = tarjan_scc(adjacency, ["x", "a", "b", "c", "d"])
        multi = [c for c in sccs if len(c) > 1]
        assert multi == [["a", "b"], ["c", "d"]]

    def test_every_node_in_exactly_one_component(self):
        adjacency = {"a": ["b", "c"], "b": ["a"], "c": ["d"], "d": ["c", "e"], "e": []}
        nodes = ["a", "b", "c", "d", "e"]
        members = [n for c in tarjan_scc(adjacency, nodes) for n in c]
        assert sorted(members) == nodes

    def test_unknown_neighbors_ignored(self):
        assert tarjan_scc({"a": ["ghost"]}, ["a"]) == [["a"]]

    def test_deterministic(self):
        adjacency = {"a": ["b", "c"], "b": ["c"], "c": ["a"], "d": ["a"]}
        nodes = ["d", "c", "b", "a"]
        assert tarjan_scc(adjacency, nodes) == tarjan_scc(adjacency, nodes)

    def test_deep_chain_no_recursion_limit(self):
        n = 5000
        nodes = [f"n{i}" for i in range(n)]
        adjacency = {nodes[i]: [nodes[i + 1]] for i in range(n - 1)}
        adjacency[nodes[-1]] = [nodes[0]]
        sccs = tarjan_scc(adjacency, nodes)
        assert len(sccs) == 1
        assert sccs[0] == nodes

    def test_long_acyclic_chain_scales_linearly(self):
        def best_time(n: int) -> float:
            nodes = [f"n{i}" for i in range(n)]
            adjacency = {nodes[i]: [nodes[i + 1]] for i in range(n - 1)}
            timings = []
            for _ in range(3):
                start = time.perf_counter()
                sccs = tarjan_scc(adjacency, nodes)
                timings.append(time.perf_counter() - start)
            assert len(sccs) == n
            return min(timings)

        small = best_time(20_000)
        large = best_time(80_000)
        # 4x the nodes: linear stays near 4x, quadratic lands near 16x
        assert large < small * 8
