from collections.abc import Iterator

from ._Candidate import Candidate
from ._patterns import path_pattern
from .ReferenceKind import ReferenceKind


def _scan_paths(text: str, path_segment: str) -> Iterator[Candidate]:
    """Yield path-style candidates in order of their start offset."""
    for match in path_pattern(path_segment).finditer(text):
        yield Candidate(
            offset=match.start(),
            kind=ReferenceKind.FROM_PATH,
            first=match.group("first"),
            second=match.group("second") or "",
        )
