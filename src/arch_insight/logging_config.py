"""
Logging setup for arch-insight.

All modules log under the ``arch_insight`` namespace. Terminal output goes
through a rich handler on stderr, so ``--format json`` output on stdout is
never interleaved with log lines.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "arch_insight"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def verbosity_for(verbose: bool = False, quiet: bool = False) -> str:
    """Collapse the two CLI flags into a verbosity name; quiet wins."""
    if quiet:
        return "quiet"
    return "verbose" if verbose else "normal"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    verbosity: Optional[str] = None,
) -> logging.Logger:
    """
    Install the rich handler (and optionally a plain file handler).

    Args:
        verbose: DEBUG output, with source paths and locals in tracebacks
        quiet: Errors only
        log_file: Optional file that receives every record at the same level
        verbosity: Explicit verbosity name, overriding the two flags
            (used when the level comes from configuration)

    Returns:
        The ``arch_insight`` package logger
    """
    name = verbosity or verbosity_for(verbose, quiet)
    level = VERBOSITY_LEVELS.get(name, logging.WARNING)
    debug = level <= logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            markup=False,
            show_path=debug,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # force=True: repeated CLI invocations in one process replace old handlers
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, always under the ``arch_insight`` namespace.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; other names are prefixed.
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
