"""Extract question/answer references from free-form text."""

import heapq
from collections.abc import Iterator

from ._Candidate import Candidate
from ._resolve_candidate import _resolve_candidate
from ._scan_hashes import _scan_hashes
from ._scan_paths import _scan_paths
from .Reference import Reference
from .ScannerConfig import ScannerConfig

_DEFAULT_CONFIG = ScannerConfig()


def extract_references(text: str, config: ScannerConfig | None = None) -> list[Reference]:
    """Find every path-style and hash-style reference in ``text``.

    Each occurrence is reported separately, ordered by start offset. A path
    whose first id is invalid yields nothing; a path whose second id is not a
    valid answer still yields the question.

    Args:
        text: Arbitrary user text
        config: Optional scanner options (defaults to ``questions/`` and ``#``)

    Returns:
        List of references, empty when none qualify

    Raises:
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string (found: {type(text).__name__})")
    config = config or _DEFAULT_CONFIG

    passes: list[Iterator[Candidate]] = []
    if config.scan_paths:
        passes.append(_scan_paths(text, config.path_segment))
    if config.scan_hashes:
        passes.append(_scan_hashes(text, config.hash_marker))

    references = []
    for candidate in heapq.merge(*passes, key=lambda c: c.offset):
        reference = _resolve_candidate(candidate)
        if reference is not None:
            references.append(reference)
    return references
