"""Layer classification from directory names.

A file belongs to a layer when one of the directories between the scan
root and the file is named exactly after it. When several layer names
appear in the path, the innermost layer in dependency order wins
(Domain before Application before Infrastructure, then the outer layers).
"""

from collections.abc import Iterable

from .models import Layer

# Precedence order used when a path names more than one layer
LAYER_PRECEDENCE = (
    Layer.DOMAIN,
    Layer.APPLICATION,
    Layer.INFRASTRUCTURE,
    Layer.PRESENTATION,
    Layer.API,
    Layer.WEB,
)

# Directories whose public types are contracts by convention
CONTRACT_DIRECTORIES = frozenset({"Contracts", "DTOs"})


def classify_layer(directories: Iterable[str]) -> Layer:
    """Map the directory segments of a relative path to a Layer."""
    segments = set(directories)
    for layer in LAYER_PRECEDENCE:
        if layer.value in segments:
            return layer
    return Layer.UNKNOWN


def classify_path(relative_path: str) -> Layer:
    """Classify a POSIX path relative to the scan root."""
    normalized = relative_path.replace("\\", "/")
    return classify_layer(normalized.split("/")[:-1])


def in_contract_directory(directories: Iterable[str]) -> bool:
    return any(d in CONTRACT_DIRECTORIES for d in directories)
