"""Tests for graph/builder.py - namespace-resolved dependency graph."""

from arch_insight.graph.builder import build_dependency_graph
from arch_insight.scanning.models import Layer


class TestBuildDependencyGraph:
    def test_empty_input(self):
        graph = build_dependency_graph([])
        assert graph.edge_count == 0
        assert graph.all_nodes == []

    def test_resolved_import(self, make_source, csharp):
        files = [
            make_source("Application/PlaceOrder.cs", csharp("Shop.Application", usings=("Shop.Domain",))),
            make_source("Domain/Order.cs", csharp("Shop.Domain")),
        ]
        graph = build_dependency_graph(files)
        assert graph.all_nodes == ["PlaceOrder.cs", "Order.cs"]
        assert graph.adjacency["PlaceOrder.cs"] == ["Order.cs"]
        assert graph.reverse["Order.cs"] == ["PlaceOrder.cs"]
        assert graph.edge_count == 1

    def test_own_namespace_never_creates_edges(self, make_source, csharp):
        files = [
            make_source("Domain/Order.cs", csharp("Shop.Domain", usings=("Shop.Domain",))),
            make_source("Domain/Customer.cs", csharp("Shop.Domain", usings=("Shop.Domain",))),
        ]
        graph = build_dependency_graph(files)
        assert graph.edge_count == 0
        assert graph.namespace_owners["Shop.Domain"] == ["Order.cs", "Customer.cs"]

    def test_no_self_edge(self, make_source, csharp):
        # Same basename in two namespaces collapses into one node
        files = [
            make_source("Domain/Order.cs", csharp("Shop.Domain")),
            make_source("Application/Order.cs", csharp("Shop.Application", usings=("Shop.Domain",))),
        ]
        graph = build_dependency_graph(files)
        assert graph.all_nodes == ["Order.cs"]
        assert graph.adjacency["Order.cs"] == []
        assert graph.layer_of("Order.cs") == Layer.DOMAIN

    def test_edges_to_every_owner_deduplicated(self, make_source, csharp):
        files = [
            make_source("Web/Home.cs", csharp("Shop.Web", usings=("Shop.Domain", "Shop.Domain"))),
            make_source("Domain/Order.cs", csharp("Shop.Domain")),
            make_source("Domain/Customer.cs", csharp("Shop.Domain")),
        ]
        graph = build_dependency_graph(files)
        assert graph.adjacency["Home.cs"] == ["Order.cs", "Customer.cs"]
        assert graph.edge_count == 2

    def test_files_without_namespace_excluded(self, make_source, csharp):
        files = [
            make_source("Program.cs", csharp(usings=("Shop.Domain",))),
            make_source("Domain/Order.cs", csharp("Shop.Domain")),
        ]
        graph = build_dependency_graph(files)
        assert graph.all_nodes == ["Order.cs"]
        assert graph.edge_count == 0

    def test_unresolved_and_platform_imports_ignored(self, make_source, csharp):
        files = [
            make_source(
                "Domain/Order.cs",
                csharp("Shop.Domain", usings=("Shop.Missing", "System.Linq")),
            ),
            make_source("Lib/Linq.cs", csharp("System.Linq")),
        ]
        graph = build_dependency_graph(files)
        assert graph.edge_count == 0

    def test_layers_recorded(self, make_source, csharp):
        files = [
            make_source("Infrastructure/Store.cs", csharp("Shop.Infrastructure")),
            make_source("Misc/Util.cs", csharp("Shop.Misc")),
        ]
        graph = build_dependency_graph(files)
        assert graph.layer_of("Store.cs") == Layer.INFRASTRUCTURE
        assert graph.layer_of("Util.cs") == Layer.UNKNOWN
        assert graph.layer_of("Absent.cs") == Layer.UNKNOWN
