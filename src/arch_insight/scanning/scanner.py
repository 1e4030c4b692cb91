"""SourceScanner: turns a directory into a list of SourceFile objects.

Per-file work (read, hash, normalize, classify, extract) depends only on
that file, so reads run on a bounded thread pool for larger trees. Results
are sorted by path afterwards; completion order never leaks into output.

A file that cannot be read is skipped and recorded as a ScanDiagnostic;
it never aborts the scan.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import TYPE_CHECKING, Optional

from ..cache import compute_content_hash
from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .collector import collect_source_files
from .extractor import extract
from .layers import classify_path
from .models import ScanDiagnostic, SourceFile
from .normalizer import clean_code

if TYPE_CHECKING:
    from ..cache import ChangeCache

logger = get_logger(__name__)

# Default worker count: CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files the pool costs more than it saves
_PARALLEL_THRESHOLD = 10


@dataclass
class ScanOutcome:
    """Everything the scan stage hands to the detectors."""

    files: list[SourceFile] = field(default_factory=list)
    diagnostics: list[ScanDiagnostic] = field(default_factory=list)
    changed_files: list[str] = field(default_factory=list)


class SourceScanner:
    """Loads and pre-processes every source file under a root.

    Attributes:
        config: Analysis configuration
        change_cache: Optional content-hash memo owned by the caller
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        change_cache: Optional[ChangeCache] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.change_cache = change_cache
        self._max_workers = self.config.workers or _DEFAULT_WORKERS
        self._lock = Lock()

    def scan(self, root: Path) -> ScanOutcome:
        """Collect and load all source files under ``root``."""
        # collected paths are absolute, so relative paths need an absolute root
        root = Path(root).resolve()
        paths = collect_source_files(
            root,
            extensions=self.config.source_extensions,
            exclude_dirs=self.config.exclude_dirs,
        )
        outcome = ScanOutcome()

        if len(paths) < _PARALLEL_THRESHOLD or self._max_workers == 1:
            for path in paths:
                self._load_into(path, root, outcome)
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = [executor.submit(self._load_into, p, root, outcome) for p in paths]
                for future in as_completed(futures):
                    future.result()

        outcome.files.sort(key=lambda f: f.path)
        outcome.diagnostics.sort(key=lambda d: d.path)
        outcome.changed_files.sort()

        logger.info(
            f"Scan complete: {len(outcome.files)} files loaded, "
            f"{len(outcome.diagnostics)} skipped"
        )
        return outcome

    def _load_into(self, path: Path, root: Path, outcome: ScanOutcome) -> None:
        try:
            source, changed = self.load_file(path, root)
        except FileAccessError as e:
            logger.warning(f"Skipping {path}: {e.reason}")
            with self._lock:
                outcome.diagnostics.append(ScanDiagnostic(str(path), e.reason))
            return

        with self._lock:
            outcome.files.append(source)
            if changed:
                outcome.changed_files.append(source.path)

    def load_file(self, path: Path, root: Path) -> tuple[SourceFile, bool]:
        """Read and pre-process one file.

        Returns:
            The SourceFile and whether its content changed since the last
            cached scan (always True without a cache)

        Raises:
            FileAccessError: If the file cannot be read
        """
        try:
            size = path.stat().st_size
        except OSError as e:
            raise FileAccessError(path, f"Cannot stat file: {e}")
        if size > self.config.max_file_size_bytes:
            raise FileAccessError(path, f"File too large ({size} bytes)")

        try:
            raw = path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            raise FileAccessError(path, f"Cannot read file: {e}")

        content_hash = compute_content_hash(raw)
        normalized = clean_code(raw)
        relative = path.relative_to(root).as_posix()

        changed = True
        syntax = None
        if self.change_cache is not None:
            changed = self.change_cache.has_changed(str(path), raw)
            syntax = self.change_cache.get_syntax(content_hash)
        if syntax is None:
            syntax = extract(normalized)
            if self.change_cache is not None:
                self.change_cache.set_syntax(content_hash, syntax)

        source = SourceFile(
            path=str(path),
            relative_path=relative,
            layer=classify_path(relative),
            raw_text=raw,
            normalized_text=normalized,
            syntax=syntax,
            content_hash=content_hash,
        )
        logger.debug(f"Loaded {relative} ({source.layer.value}, namespace={source.namespace})")
        return source, changed
