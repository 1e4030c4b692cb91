"""Configuration loading and management for arch-insight.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.arch-insight.toml)
    3. Project config (./arch-insight.toml)
    4. Explicit config file
    5. Environment variables (ARCH_INSIGHT_* prefix)
    6. Overrides (passed as kwargs)

Only file discovery and runtime behaviour are configurable. Severity tables
and scoring thresholds are fixed (see ``arch_insight.scoring.thresholds``).

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Literal, Optional

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "ARCH_INSIGHT_"
CONFIG_FILE_NAME = "arch-insight.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        File discovery:
            source_extensions: File suffixes collected as source files
            exclude_dirs: Directory names whose whole subtree is skipped
            max_file_size_mb: Files larger than this are skipped with a diagnostic

        Extraction:
            platform_prefixes: Imported namespaces starting with one of these
                are framework references and never produce findings or edges

        Performance:
            workers: Parallel file readers (None = auto-detect, capped at 8)

        Change cache:
            cache_enabled: Allow the CLI to use the on-disk change cache
            cache_dir: Directory for the change cache

        Abstraction evidence:
            max_code_examples: Files kept as code examples
            snippet_lines: Lines of normalized text kept per example

        Output control:
            verbosity: Logging verbosity level
    """

    source_extensions: list[str] = field(default_factory=lambda: [".cs"])
    exclude_dirs: list[str] = field(default_factory=lambda: ["bin", "obj", "node_modules"])
    max_file_size_mb: float = 10.0

    platform_prefixes: list[str] = field(default_factory=lambda: ["System", "Microsoft"])

    workers: Optional[int] = None

    cache_enabled: bool = True
    cache_dir: str = ".arch-insight-cache"

    max_code_examples: int = 5
    snippet_lines: int = 30

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.source_extensions:
            raise InvalidConfigError("source_extensions", self.source_extensions, "must not be empty")
        for ext in self.source_extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("source_extensions", ext, "extensions must start with '.'")

        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")

        if self.max_code_examples < 0:
            raise InvalidConfigError(
                "max_code_examples", self.max_code_examples, "must be non-negative"
            )
        if self.snippet_lines < 1:
            raise InvalidConfigError("snippet_lines", self.snippet_lines, "must be at least 1")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


DEFAULT_CONFIG = AnalysisConfig()


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(f"expected true/false, got '{raw}'")

# Scalar fields settable as ARCH_INSIGHT_<FIELD>; list fields are TOML-only.
ENV_PARSERS: dict[str, Callable[[str], Any]] = {
    "max_file_size_mb": float,
    "workers": int,
    "cache_enabled": _parse_bool,
    "cache_dir": str,
    "max_code_examples": int,
    "snippet_lines": int,
    "verbosity": str.strip,
}


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Build an ``AnalysisConfig`` from every configuration source.

    Later sources win: global TOML, project TOML, ``config_file``,
    ``ARCH_INSIGHT_*`` variables, then ``overrides``. Overrides set to
    ``None`` are ignored, and the CLI's ``verbose``/``quiet`` flags are
    folded into ``verbosity``.

    Raises:
        ConfigurationError: If a config file is missing, unreadable or
            names an unknown setting
        InvalidConfigError: If a value fails validation
    """
    layers: list[dict] = [
        _read_if_present(Path.home() / f".{CONFIG_FILE_NAME}", "global config"),
        _read_if_present(Path.cwd() / CONFIG_FILE_NAME, "project config"),
    ]
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        layers.append(_read_toml(config_file, "config file"))
    layers.append(env_settings())
    layers.append(_cli_settings(overrides))

    settings: dict[str, Any] = {}
    for layer in layers:
        settings.update(layer)

    unknown = sorted(set(settings) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            f"Invalid configuration: unknown setting(s) {', '.join(unknown)}",
            details={"unknown": ", ".join(unknown)},
        )
    try:
        return AnalysisConfig(**settings)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def env_settings(environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Settings taken from ``ARCH_INSIGHT_*`` variables.

    Raises:
        InvalidConfigError: If a variable cannot be parsed
    """
    environ = os.environ if environ is None else environ
    found: dict[str, Any] = {}
    for name, parse in ENV_PARSERS.items():
        key = ENV_PREFIX + name.upper()
        raw = environ.get(key)
        if raw is None:
            continue
        try:
            found[name] = parse(raw)
        except ValueError as e:
            raise InvalidConfigError(key, raw, str(e))
    return found


def _cli_settings(overrides: dict[str, Any]) -> dict[str, Any]:
    flags = {"verbose": overrides.pop("verbose", False), "quiet": overrides.pop("quiet", False)}
    settings = {k: v for k, v in overrides.items() if v is not None}
    if flags["quiet"]:
        settings["verbosity"] = "quiet"
    elif flags["verbose"]:
        settings["verbosity"] = "verbose"
    return settings


def _read_if_present(path: Path, label: str) -> dict:
    return _read_toml(path, label) if path.is_file() else {}


def _read_toml(path: Path, label: str) -> dict:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}", details={"path": str(path)})
