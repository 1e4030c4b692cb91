"""Tests for cache.py - content-hash change cache."""

import pytest

from arch_insight.cache import ChangeCache, compute_content_hash
from arch_insight.scanning.models import FileSyntax, TypeDeclaration, TypeKind, Visibility


@pytest.fixture
def cache(tmp_path):
    with ChangeCache(str(tmp_path / "cache")) as c:
        yield c


class TestContentHash:
    def test_sha256_hex(self):
        digest = compute_content_hash("namespace A;")
        assert len(digest) == 64
        assert digest == compute_content_hash("namespace A;")
        assert digest != compute_content_hash("namespace B;")


class TestHasChanged:
    def test_new_then_unchanged_then_changed(self, cache):
        assert cache.has_changed("/src/A.cs", "v1")
        assert not cache.has_changed("/src/A.cs", "v1")
        assert cache.has_changed("/src/A.cs", "v2")
        assert cache.get_hash("/src/A.cs") == compute_content_hash("v2")

    def test_unknown_path_has_no_hash(self, cache):
        assert cache.get_hash("/src/Missing.cs") is None

    def test_changed_files(self, cache, tmp_path):
        a = tmp_path / "A.cs"
        b = tmp_path / "B.cs"
        a.write_text("a")
        b.write_text("b")
        assert cache.changed_files([a, b]) == [a, b]
        b.write_text("b2")
        assert cache.changed_files([a, b]) == [b]

    def test_missing_file_reported_as_changed(self, cache, tmp_path):
        ghost = tmp_path / "Ghost.cs"
        assert cache.changed_files([ghost]) == [ghost]

    def test_persists_across_instances(self, tmp_path):
        directory = str(tmp_path / "persist")
        with ChangeCache(directory) as first:
            first.has_changed("/src/A.cs", "v1")
        with ChangeCache(directory) as second:
            assert not second.has_changed("/src/A.cs", "v1")


class TestForget:
    def test_forget_prefix(self, cache):
        cache.has_changed("/repo/one/A.cs", "a")
        cache.has_changed("/repo/one/B.cs", "b")
        cache.has_changed("/repo/two/C.cs", "c")
        assert cache.forget("/repo/one/") == 2
        assert cache.get_hash("/repo/one/A.cs") is None
        assert cache.get_hash("/repo/two/C.cs") is not None


class TestSyntaxMemo:
    def test_round_trip(self, cache):
        syntax = FileSyntax(
            namespace="Shop.Domain",
            imports=("Shop.Shared",),
            declarations=(TypeDeclaration(TypeKind.CLASS, "Order", Visibility.PUBLIC),),
        )
        cache.set_syntax("abc", syntax)
        assert cache.get_syntax("abc") == syntax
        assert cache.get_syntax("def") is None


class TestMaintenance:
    def test_stats(self, cache):
        cache.has_changed("/src/A.cs", "a")
        cache.set_syntax(compute_content_hash("a"), FileSyntax())
        stats = cache.stats()
        assert stats["enabled"] is True
        assert stats["files"] == 1
        assert stats["syntax_entries"] == 1

    def test_clear(self, cache):
        cache.has_changed("/src/A.cs", "a")
        cache.clear()
        assert cache.get_hash("/src/A.cs") is None
        assert cache.stats()["files"] == 0


class TestDisabledCache:
    def test_everything_is_a_miss(self, tmp_path):
        cache = ChangeCache(str(tmp_path / "off"), enabled=False)
        assert cache.has_changed("/src/A.cs", "a")
        assert cache.has_changed("/src/A.cs", "a")
        assert cache.get_hash("/src/A.cs") is None
        cache.set_syntax("h", FileSyntax())
        assert cache.get_syntax("h") is None
        assert cache.forget("/") == 0
        assert cache.stats() == {"enabled": False}
        cache.clear()
        cache.close()
        assert not (tmp_path / "off").exists()
