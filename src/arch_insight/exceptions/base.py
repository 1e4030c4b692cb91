"""Base exception for arch-insight."""

from typing import Dict, Optional


class ArchInsightError(Exception):
    """Root of every error arch-insight raises on purpose.

    ``details`` carries structured context (paths, keys, reasons) that the
    CLI prints after the message and callers may inspect.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})" if extra else self.message
