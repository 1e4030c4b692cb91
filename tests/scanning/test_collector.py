"""Tests for scanning/collector.py - source file discovery."""

from arch_insight.scanning.collector import collect_source_files


class TestCollectSourceFiles:
    def test_collects_only_source_extension(self, write_tree):
        root = write_tree({"Domain/Order.cs": "", "README.md": "", "Domain/notes.txt": ""})
        assert [p.name for p in collect_source_files(root)] == ["Order.cs"]

    def test_build_directories_pruned(self, write_tree):
        root = write_tree(
            {
                "Domain/Order.cs": "",
                "Domain/bin/Debug/Generated.cs": "",
                "obj/AssemblyInfo.cs": "",
                "web/node_modules/pkg/x.cs": "",
            }
        )
        assert [p.name for p in collect_source_files(root)] == ["Order.cs"]

    def test_sorted_and_absolute(self, write_tree):
        root = write_tree({"b/B.cs": "", "a/A.cs": "", "a/C.cs": ""})
        paths = collect_source_files(root)
        assert paths == sorted(paths)
        assert all(p.is_absolute() for p in paths)
        assert [p.name for p in paths] == ["A.cs", "C.cs", "B.cs"]

    def test_custom_extensions_and_excludes(self, write_tree):
        root = write_tree({"src/a.cs": "", "src/b.csx": "", "gen/c.cs": ""})
        paths = collect_source_files(root, extensions=[".csx"], exclude_dirs=["gen"])
        assert [p.name for p in paths] == ["b.csx"]

    def test_empty_directory(self, tmp_path):
        assert collect_source_files(tmp_path) == []
