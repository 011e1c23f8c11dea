"""ReferenceKind enum: which surface syntax produced a reference."""

from enum import Enum


class ReferenceKind(str, Enum):
    FROM_PATH = "url"
    FROM_HASH = "id"
