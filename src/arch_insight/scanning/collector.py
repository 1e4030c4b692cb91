"""Source file discovery.

Walks the scan root depth-first, pruning build/output/dependency
directories by name, and returns matching files in sorted order so every
later stage sees the same sequence on every run.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXCLUDE_DIRS = ("bin", "obj", "node_modules")
DEFAULT_EXTENSIONS = (".cs",)


def collect_source_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[Path]:
    """Recursively collect source files under ``root``.

    Args:
        root: Directory to walk
        extensions: Accepted file suffixes (case-sensitive, e.g. ``.cs``)
        exclude_dirs: Directory names whose subtrees are skipped entirely

    Returns:
        Absolute paths, sorted
    """
    ext_set = tuple(extensions)
    excluded = set(exclude_dirs)
    results: list[Path] = []

    def _on_error(err: OSError) -> None:
        # Unreadable subdirectories are skipped, the walk continues
        logger.warning(f"Cannot read directory {err.filename}: {err.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in filenames:
            if filename.endswith(ext_set):
                results.append(Path(dirpath, filename).absolute())

    results.sort()
    logger.debug(f"Collected {len(results)} source files under {root}")
    return results
