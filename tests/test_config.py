"""Tests for config.py - defaults, validation and layered loading."""

import os

import pytest

from arch_insight.config import DEFAULT_CONFIG, AnalysisConfig, env_settings, load_config
from arch_insight.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """No user or project config files, no ARCH_INSIGHT_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("ARCH_INSIGHT_"):
            monkeypatch.delenv(name)
    return home


class TestDefaults:
    def test_values(self):
        config = AnalysisConfig()
        assert config.source_extensions == [".cs"]
        assert config.exclude_dirs == ["bin", "obj", "node_modules"]
        assert config.platform_prefixes == ["System", "Microsoft"]
        assert config.max_code_examples == 5
        assert config.snippet_lines == 30
        assert config.workers is None
        assert config.verbosity == "normal"

    def test_max_file_size_bytes(self):
        assert AnalysisConfig(max_file_size_mb=1.0).max_file_size_bytes == 1024 * 1024

    def test_load_without_sources_matches_default(self):
        assert load_config() == DEFAULT_CONFIG


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"source_extensions": []},
            {"source_extensions": ["cs"]},
            {"max_file_size_mb": 0},
            {"workers": 0},
            {"max_code_examples": -1},
            {"snippet_lines": 0},
            {"verbosity": "loud"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.workers = 3


class TestLoadConfig:
    def test_overrides(self):
        config = load_config(workers=4, snippet_lines=10)
        assert config.workers == 4
        assert config.snippet_lines == 10

    def test_none_overrides_ignored(self):
        assert load_config(workers=None).workers is None

    def test_verbose_and_quiet_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_project_file(self, tmp_path):
        (tmp_path / "arch-insight.toml").write_text('exclude_dirs = ["bin", "obj", "tests"]\n')
        assert load_config().exclude_dirs == ["bin", "obj", "tests"]

    def test_global_file_below_project_file(self, tmp_path, isolated_environment):
        (isolated_environment / ".arch-insight.toml").write_text("workers = 2\nsnippet_lines = 5\n")
        (tmp_path / "arch-insight.toml").write_text("workers = 3\n")
        config = load_config()
        assert config.workers == 3
        assert config.snippet_lines == 5

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('platform_prefixes = ["System", "Microsoft", "Newtonsoft"]\n')
        assert load_config(config_file=path).platform_prefixes == [
            "System",
            "Microsoft",
            "Newtonsoft",
        ]

    def test_env_beats_files_and_overrides_beat_env(self, tmp_path, monkeypatch):
        (tmp_path / "arch-insight.toml").write_text("workers = 2\n")
        monkeypatch.setenv("ARCH_INSIGHT_WORKERS", "5")
        monkeypatch.setenv("ARCH_INSIGHT_CACHE_ENABLED", "false")
        config = load_config()
        assert config.workers == 5
        assert config.cache_enabled is False
        assert load_config(workers=7).workers == 7

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("ARCH_INSIGHT_CACHE_ENABLED", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("workers = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unknown.toml"
        path.write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)


class TestEnvSettings:
    def test_parses_scalars(self):
        found = env_settings(
            {
                "ARCH_INSIGHT_MAX_FILE_SIZE_MB": "2.5",
                "ARCH_INSIGHT_CACHE_ENABLED": "off",
                "ARCH_INSIGHT_VERBOSITY": " quiet ",
                "UNRELATED": "x",
            }
        )
        assert found == {"max_file_size_mb": 2.5, "cache_enabled": False, "verbosity": "quiet"}

    def test_list_fields_are_toml_only(self):
        assert env_settings({"ARCH_INSIGHT_EXCLUDE_DIRS": "bin"}) == {}

    def test_bad_int_names_the_variable(self):
        with pytest.raises(InvalidConfigError) as excinfo:
            env_settings({"ARCH_INSIGHT_WORKERS": "many"})
        assert excinfo.value.key == "ARCH_INSIGHT_WORKERS"

    def test_quiet_flag_wins_over_verbose(self):
        assert load_config(verbose=True, quiet=True).verbosity == "quiet"
