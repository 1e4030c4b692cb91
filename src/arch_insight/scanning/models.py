"""Per-file data produced by the scanning stage.

Files are classified into architectural layers by directory name, their
comments are stripped, and namespace, imports and type declarations are
pulled out of the normalized text. Everything here is immutable and lives
for the duration of one scan.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Layer(Enum):
    """Architectural zone a file belongs to, assigned by path convention."""

    DOMAIN = "Domain"
    APPLICATION = "Application"
    INFRASTRUCTURE = "Infrastructure"
    PRESENTATION = "Presentation"
    API = "API"
    WEB = "Web"
    UNKNOWN = "Unknown"

    def forbidden_targets(self) -> tuple[Layer, ...]:
        """Layers this layer must not depend on, in rule order."""
        return _FORBIDDEN_TARGETS.get(self, ())

    @property
    def is_known(self) -> bool:
        return self is not Layer.UNKNOWN

    @property
    def is_outer(self) -> bool:
        """Presentation-side layers, allowed to depend on anything."""
        return self in (Layer.PRESENTATION, Layer.API, Layer.WEB)


_FORBIDDEN_TARGETS: dict[Layer, tuple[Layer, ...]] = {
    Layer.DOMAIN: (
        Layer.APPLICATION,
        Layer.INFRASTRUCTURE,
        Layer.PRESENTATION,
        Layer.API,
        Layer.WEB,
    ),
    Layer.APPLICATION: (Layer.INFRASTRUCTURE, Layer.PRESENTATION, Layer.API, Layer.WEB),
    Layer.INFRASTRUCTURE: (Layer.PRESENTATION, Layer.API, Layer.WEB),
}


class TypeKind(Enum):
    CLASS = "class"
    INTERFACE = "interface"
    RECORD = "record"


class Visibility(Enum):
    PUBLIC = "public"
    INTERNAL = "internal"


@dataclass(frozen=True)
class TypeDeclaration:
    """A class, interface or record declared in a file."""

    kind: TypeKind
    name: str
    visibility: Visibility = Visibility.INTERNAL

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


@dataclass(frozen=True)
class FileSyntax:
    """Structural facts extracted from one file's normalized text.

    This is the whole surface the detectors and the graph builder see, so a
    real parser can replace the regex extractor without touching them.
    """

    namespace: Optional[str] = None
    imports: tuple[str, ...] = ()
    declarations: tuple[TypeDeclaration, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """A scanned source file.

    Attributes:
        path: Absolute path on disk
        relative_path: POSIX path relative to the scan root
        layer: Layer inferred from directory names
        raw_text: File content as read
        normalized_text: Content with comments removed
        syntax: Namespace, imports and type declarations
        content_hash: SHA-256 of raw_text
    """

    path: str
    relative_path: str
    layer: Layer
    raw_text: str
    normalized_text: str
    syntax: FileSyntax
    content_hash: str

    @property
    def name(self) -> str:
        """Basename, the file's identifier in the dependency graph."""
        return self.relative_path.rsplit("/", 1)[-1]

    @property
    def namespace(self) -> Optional[str]:
        return self.syntax.namespace

    @property
    def imports(self) -> tuple[str, ...]:
        return self.syntax.imports

    @property
    def declarations(self) -> tuple[TypeDeclaration, ...]:
        return self.syntax.declarations

    @property
    def directories(self) -> tuple[str, ...]:
        """Directory segments between the scan root and the file."""
        return tuple(self.relative_path.split("/")[:-1])


@dataclass(frozen=True)
class ScanDiagnostic:
    """A file that was skipped during the scan, with the reason."""

    path: str
    reason: str
