"""Scanning: file discovery, comment stripping, layer classification, extraction.

``SourceScanner`` lives in ``arch_insight.scanning.scanner`` and is not
re-exported here, because it depends on the change cache, which itself
imports the models below.
"""

from .collector import collect_source_files
from .extractor import extract
from .layers import classify_layer, classify_path
from .models import (
    FileSyntax,
    Layer,
    ScanDiagnostic,
    SourceFile,
    TypeDeclaration,
    TypeKind,
    Visibility,
)
from .normalizer import clean_code

__all__ = [
    "FileSyntax",
    "Layer",
    "ScanDiagnostic",
    "SourceFile",
    "TypeDeclaration",
    "TypeKind",
    "Visibility",
    "classify_layer",
    "classify_path",
    "clean_code",
    "collect_source_files",
    "extract",
]
