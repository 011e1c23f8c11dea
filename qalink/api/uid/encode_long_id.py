"""Encode an object type and sequence as a long-form id."""

from ...constants import MAX_SEQUENCE, SEQUENCE_WIDTH
from .ObjectType import ObjectType


def encode_long_id(object_type: ObjectType, sequence: int) -> str:
    """Build the 17-digit long-form id.

    Args:
        object_type: Object type whose tag leads the id
        sequence: Internal sequence value, 0 <= sequence < 10**13

    Returns:
        Long-form id such as ``"10010000000000060"``

    Raises:
        TypeError: If object_type is not an ObjectType or sequence is not an int
        ValueError: If sequence is out of range
    """
    if not isinstance(object_type, ObjectType):
        raise TypeError(f"object_type must be an ObjectType (found: {type(object_type).__name__})")
    if isinstance(sequence, bool) or not isinstance(sequence, int):
        raise TypeError(f"sequence must be an int (found: {type(sequence).__name__})")
    if not 0 <= sequence < MAX_SEQUENCE:
        raise ValueError(f"sequence out of range (found: {sequence}, expected: 0 <= sequence < {MAX_SEQUENCE})")
    return f"{object_type.tag}{sequence:0{SEQUENCE_WIDTH}d}"
