"""Tests for detectors/encapsulation.py - type visibility discipline."""

from arch_insight.detectors.encapsulation import (
    analyze_encapsulation,
    count_visibility,
    find_overexposed,
)
from arch_insight.detectors.models import FindingKind, Severity
from arch_insight.scanning.models import TypeKind


class TestFindOverexposed:
    def test_public_domain_class_flagged(self, make_source, csharp):
        source = make_source("Domain/Order.cs", csharp("Shop.Domain", body="public class Order { }"))
        (finding,) = find_overexposed(source)
        assert finding.kind == FindingKind.EXPOSURE
        assert finding.type_name == "Order"
        assert finding.type_kind == TypeKind.CLASS
        assert finding.severity == Severity.LOW
        assert "Order" in finding.suggestion

    def test_internal_types_not_flagged(self, make_source, csharp):
        source = make_source("Domain/Order.cs", csharp("Shop.Domain", body="internal class Order { }"))
        assert find_overexposed(source) == []

    def test_outer_layers_exempt(self, make_source, csharp):
        for path in ("Web/Home.cs", "API/Orders.cs", "Presentation/View.cs"):
            source = make_source(path, csharp("Shop.X", body="public class Thing { }"))
            assert find_overexposed(source) == []

    def test_contract_style_names_exempt(self, make_source, csharp):
        body = "\n".join(
            [
                "public class OrdersController { }",
                "public record OrderDto(int Id);",
                "public class PlaceOrderRequest { }",
                "public class PlaceOrderResponse { }",
                "public interface IBillingContract { }",
                "public class OrderMapper { }",
            ]
        )
        source = make_source("Application/Orders.cs", csharp("Shop.Application", body=body))
        assert [f.type_name for f in find_overexposed(source)] == ["OrderMapper"]

    def test_contract_directories_exempt(self, make_source, csharp):
        for path in ("Application/DTOs/Order.cs", "Domain/Contracts/IOrders.cs"):
            source = make_source(path, csharp("Shop.X", body="public class Anything { }"))
            assert find_overexposed(source) == []


class TestCountVisibility:
    def test_counts_per_kind(self, make_source, csharp):
        body = "\n".join(
            [
                "public class A { }",
                "internal class B { }",
                "class C { }",
                "public interface ID { }",
                "internal record E(int X);",
            ]
        )
        stats = count_visibility([make_source("Domain/All.cs", csharp("Shop.Domain", body=body))])
        assert stats.public_classes == 1
        assert stats.internal_classes == 2
        assert stats.public_interfaces == 1
        assert stats.internal_interfaces == 0
        assert stats.public_records == 0
        assert stats.internal_records == 1
        assert stats.public_types == 2
        assert stats.total_types == 5


class TestAnalyzeEncapsulation:
    def _files(self, make_source, csharp, public, internal):
        body = "\n".join(
            [f"public class P{i} {{ }}" for i in range(public)]
            + [f"internal class I{i} {{ }}" for i in range(internal)]
        )
        return [make_source("Domain/Types.cs", csharp("Shop.Domain", body=body))]

    def test_all_internal(self, make_source, csharp):
        result = analyze_encapsulation(self._files(make_source, csharp, 0, 4))
        assert result.public_percentage == 0.0
        assert result.score == 5
        assert result.findings == ()

    def test_all_public(self, make_source, csharp):
        result = analyze_encapsulation(self._files(make_source, csharp, 4, 0))
        assert result.public_percentage == 100.0
        assert result.score == 0
        assert result.over_exposed_count == 4

    def test_no_types(self, make_source, csharp):
        result = analyze_encapsulation([make_source("Domain/Empty.cs", csharp("Shop.Domain"))])
        assert result.public_percentage == 0.0
        assert result.total_types == 0
        assert result.score == 5

    def test_percentage_rounded(self, make_source, csharp):
        result = analyze_encapsulation(self._files(make_source, csharp, 1, 2))
        assert result.public_percentage == 33.3
        assert result.score == 3

    def test_boundary_is_exclusive(self, make_source, csharp):
        result = analyze_encapsulation(self._files(make_source, csharp, 1, 4))
        assert result.public_percentage == 20.0
        assert result.score == 4

    def test_exempt_public_types_still_count_toward_percentage(self, make_source, csharp):
        files = [
            make_source("Web/Home.cs", csharp("Shop.Web", body="public class Home { }")),
            make_source("Domain/Order.cs", csharp("Shop.Domain", body="internal class Order { }")),
        ]
        result = analyze_encapsulation(files)
        assert result.public_percentage == 50.0
        assert result.findings == ()
        assert result.total == 2
