"""Regex extraction of namespaces, using directives and type declarations.

Operates on normalized text (see ``normalizer.clean_code``). This is a
heuristic, not a C# front end: the patterns accept false positives and
negatives in exchange for needing no parser.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Optional

from .models import FileSyntax, TypeDeclaration, TypeKind, Visibility

NAMESPACE_PATTERN = re.compile(r"\bnamespace\s+([\w.]+)")

# Plain and global using directives; aliases and `using static` are skipped
USING_PATTERN = re.compile(r"\busing\s+([\w.]+)\s*;")

_ATTRIBUTES = r"(?:\[[^\]\n]*\][ \t]*)*"
_ACCESS = r"(?:public|internal|protected|private|file)"

# A declaration starts a line, or follows `{`, `}` or `;` on the same line
# when it carries an explicit access modifier.
DECLARATION_PATTERN = re.compile(
    rf"(?:^[ \t]*{_ATTRIBUTES}|[{{}};][ \t]*{_ATTRIBUTES}(?={_ACCESS}[ \t]))"
    rf"(?:({_ACCESS})[ \t]+)?"
    r"(?:(?:static|sealed|abstract|partial|readonly|unsafe|new)[ \t]+)*"
    r"(class|interface|record)(?:[ \t]+(?:class|struct))?[ \t]+(\w+)",
    re.MULTILINE,
)

_VISIBILITY = {
    None: Visibility.INTERNAL,
    "internal": Visibility.INTERNAL,
    "public": Visibility.PUBLIC,
}


def extract_namespace(text: str) -> Optional[str]:
    """Return the first declared namespace, or None."""
    match = NAMESPACE_PATTERN.search(text)
    return match.group(1) if match else None


def extract_usings(text: str) -> list[str]:
    """Return imported namespaces in source order, duplicates kept."""
    return [m.group(1) for m in USING_PATTERN.finditer(text)]


def extract_declarations(text: str) -> list[TypeDeclaration]:
    """Return class/interface/record declarations with their visibility.

    Declarations without an access modifier default to internal. Private,
    protected and file-local nested types are not part of the visible
    surface and are ignored.
    """
    declarations = []
    for match in DECLARATION_PATTERN.finditer(text):
        modifier, kind, name = match.groups()
        visibility = _VISIBILITY.get(modifier)
        if visibility is None:
            continue
        declarations.append(TypeDeclaration(TypeKind(kind), name, visibility))
    return declarations


def extract(text: str) -> FileSyntax:
    """Extract everything the analysis needs from normalized text."""
    return FileSyntax(
        namespace=extract_namespace(text),
        imports=tuple(extract_usings(text)),
        declarations=tuple(extract_declarations(text)),
    )


def is_platform_namespace(namespace: str, prefixes: Sequence[str]) -> bool:
    return any(namespace.startswith(prefix) for prefix in prefixes)


def project_imports(imports: Iterable[str], prefixes: Sequence[str]) -> list[str]:
    """Drop framework namespaces (System.*, Microsoft.*, ...) from imports."""
    return [ns for ns in imports if not is_platform_namespace(ns, prefixes)]
