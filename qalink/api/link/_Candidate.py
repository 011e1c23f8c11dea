"""Candidate match produced by a lexical pass, before validation."""

from dataclasses import dataclass

from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class Candidate:
    offset: int
    kind: ReferenceKind
    first: str
    second: str = ""
