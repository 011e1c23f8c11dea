"""Classify a candidate string as question, answer or invalid."""

from .decode_identifier import decode_identifier
from .IdKind import IdKind
from .ObjectType import ObjectType


def classify_identifier(candidate: str) -> IdKind:
    identifier = decode_identifier(candidate)
    if identifier is None:
        return IdKind.INVALID
    if identifier.object_type is ObjectType.QUESTION:
        return IdKind.QUESTION
    return IdKind.ANSWER
