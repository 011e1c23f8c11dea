from collections.abc import Iterator

from ._Candidate import Candidate
from ._patterns import hash_pattern
from .ReferenceKind import ReferenceKind


def _scan_hashes(text: str, hash_marker: str) -> Iterator[Candidate]:
    """Yield hash-style candidates in order of their start offset."""
    for match in hash_pattern(hash_marker).finditer(text):
        yield Candidate(
            offset=match.start(),
            kind=ReferenceKind.FROM_HASH,
            first=match.group("first"),
        )
