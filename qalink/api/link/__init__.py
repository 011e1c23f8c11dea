"""Link domain: scan free-form text for question/answer references."""

from .extract_references import extract_references
from .Reference import Reference
from .ReferenceKind import ReferenceKind
from .ScannerConfig import ScannerConfig

__all__ = [
    "Reference",
    "ReferenceKind",
    "ScannerConfig",
    "extract_references",
]
