"""Shared test fixtures for arch-insight tests."""

from pathlib import Path
from typing import Callable, Optional

import pytest

from arch_insight.cache import compute_content_hash
from arch_insight.scanning.extractor import extract
from arch_insight.scanning.layers import classify_path
from arch_insight.scanning.models import SourceFile
from arch_insight.scanning.normalizer import clean_code


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def _csharp(
    namespace: Optional[str] = None,
    usings: tuple[str, ...] = (),
    body: str = "",
) -> str:
    lines = [f"using {u};" for u in usings]
    if namespace:
        lines.append(f"namespace {namespace};")
    lines.append("")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture
def csharp() -> Callable[..., str]:
    """Build a small C# file: using directives, file-scoped namespace, body."""
    return _csharp


@pytest.fixture
def make_source() -> Callable[..., SourceFile]:
    """Build an in-memory SourceFile the way the scanner would."""

    def _make(relative_path: str, text: str) -> SourceFile:
        normalized = clean_code(text)
        return SourceFile(
            path=f"/src/{relative_path}",
            relative_path=relative_path,
            layer=classify_path(relative_path),
            raw_text=text,
            normalized_text=normalized,
            syntax=extract(normalized),
            content_hash=compute_content_hash(text),
        )

    return _make


@pytest.fixture
def write_tree(tmp_path) -> Callable[[dict[str, str]], Path]:
    """Write ``{relative path: content}`` under a fresh root and return it."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "solution"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def clean_solution(csharp) -> dict[str, str]:
    """Layered solution with no violations, no cycles, internal types only."""
    return {
        "Domain/Order.cs": csharp(
            "Shop.Domain",
            body="internal class Order { public decimal Total { get; set; } }",
        ),
        "Application/OrderService.cs": csharp(
            "Shop.Application",
            usings=("System", "Shop.Domain"),
            body="internal class OrderService { }",
        ),
        "Infrastructure/OrderStore.cs": csharp(
            "Shop.Infrastructure",
            usings=("Shop.Domain", "Shop.Application"),
            body="internal class OrderStore { }",
        ),
    }
