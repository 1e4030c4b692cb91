"""
Change cache for arch-insight.

Uses diskcache for SQLite-based persistent storage. Two kinds of entries
are kept:

- ``hash:<absolute path>`` -> content hash seen on the previous scan
- ``syntax:<content hash>`` -> extracted FileSyntax for that content

Staleness is decided by hash mismatch only, never by modification time.
Deleting the cache directory is always safe and forces a full re-scan.
"""

import hashlib
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar

from diskcache import Cache

from .logging_config import get_logger
from .scanning.models import FileSyntax

logger = get_logger(__name__)

_HASH_PREFIX = "hash:"
_SYNTAX_PREFIX = "syntax:"

T = TypeVar("T")


def compute_content_hash(content: str) -> str:
    """SHA-256 of file content."""
    return hashlib.sha256(content.encode("utf-8", errors="replace")).hexdigest()


class ChangeCache:
    """
    Content-hash memo keyed by absolute file path.

    The cache is owned by the caller and passed into a scan; the engine
    keeps no cache state of its own. Cache I/O failures are logged and
    treated as misses so they never break an analysis.

    Args:
        cache_dir: Directory holding the diskcache database
        enabled: When False every lookup misses and nothing is written
    """

    def __init__(self, cache_dir: str = ".arch-insight-cache", enabled: bool = True):
        self.enabled = enabled
        self.cache: Optional[Cache] = Cache(cache_dir) if enabled else None
        logger.debug(f"Change cache at {cache_dir}" if enabled else "Change cache disabled")

    def _guarded(self, action: str, operation: Callable[[Cache], T], fallback: T) -> T:
        """Run ``operation`` against the store, degrading to ``fallback``."""
        if self.cache is None:
            return fallback
        try:
            return operation(self.cache)
        except Exception as e:
            logger.warning(f"Change cache {action} failed: {e}")
            return fallback

    # ── Path -> hash ───────────────────────────────────────────

    def get_hash(self, filepath: str) -> Optional[str]:
        """Hash recorded for ``filepath`` on the previous scan."""
        return self._guarded("read", lambda c: c.get(_HASH_PREFIX + filepath), None)

    def has_changed(self, filepath: str, content: str) -> bool:
        """
        Check whether ``content`` differs from what was recorded for ``filepath``.

        Records the new hash as a side effect, so a second call with the
        same content returns False. Always True when the cache is disabled.
        """
        if self.cache is None:
            return True
        current = compute_content_hash(content)
        if self.get_hash(filepath) == current:
            return False
        self._guarded("write", lambda c: c.set(_HASH_PREFIX + filepath, current), False)
        return True

    def changed_files(self, filepaths: Iterable[Path]) -> list[Path]:
        """Filter ``filepaths`` down to files whose content changed.

        Unreadable files are reported as changed.
        """
        changed = []
        for path in filepaths:
            try:
                content = path.read_text(encoding="utf-8-sig", errors="replace")
            except OSError:
                changed.append(path)
                continue
            if self.has_changed(str(path), content):
                changed.append(path)
        return changed

    def forget(self, prefix: str) -> int:
        """Drop recorded hashes for every path starting with ``prefix``.

        Returns:
            Number of entries removed
        """
        wanted = _HASH_PREFIX + prefix

        def drop(c: Cache) -> int:
            stale = [k for k in list(c) if isinstance(k, str) and k.startswith(wanted)]
            return sum(1 for key in stale if c.delete(key))

        removed = self._guarded("forget", drop, 0)
        logger.debug(f"Forgot {removed} cached hashes under {prefix}")
        return removed

    # ── Content hash -> extracted syntax ───────────────────────

    def get_syntax(self, content_hash: str) -> Optional[FileSyntax]:
        value = self._guarded("read", lambda c: c.get(_SYNTAX_PREFIX + content_hash), None)
        return value if isinstance(value, FileSyntax) else None

    def set_syntax(self, content_hash: str, syntax: FileSyntax) -> None:
        self._guarded("write", lambda c: c.set(_SYNTAX_PREFIX + content_hash, syntax), False)

    # ── Maintenance ────────────────────────────────────────────

    def clear(self) -> None:
        """Remove every hash and syntax entry."""
        removed = self._guarded("clear", lambda c: c.clear(), None)
        if removed is not None:
            logger.info(f"Change cache cleared ({removed} entries)")

    def stats(self) -> dict[str, Any]:
        """Entry counts and on-disk volume, or ``{"enabled": False}``."""
        if self.cache is None:
            return {"enabled": False}

        def collect(c: Cache) -> dict[str, Any]:
            keys = [k for k in c if isinstance(k, str)]
            return {
                "enabled": True,
                "directory": c.directory,
                "files": sum(1 for k in keys if k.startswith(_HASH_PREFIX)),
                "syntax_entries": sum(1 for k in keys if k.startswith(_SYNTAX_PREFIX)),
                "volume": c.volume(),
            }

        return self._guarded("stats", collect, {"enabled": True, "error": "unavailable"})

    def close(self) -> None:
        if self.cache is not None:
            self.cache.close()

    def __enter__(self) -> "ChangeCache":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
