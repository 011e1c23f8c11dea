"""Encode an object type and sequence as a short-form (SEO) id."""

from ...constants import SHORT_ID_ALPHABET
from ._short_check_char import _short_check_char
from .encode_long_id import encode_long_id
from .ObjectType import ObjectType


def _to_base36(value: int) -> str:
    base = len(SHORT_ID_ALPHABET)
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(SHORT_ID_ALPHABET[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def encode_short_id(object_type: ObjectType, sequence: int) -> str:
    """Build the short-form id: check char, type char, base-36 sequence.

    Args:
        object_type: Object type encoded in the second character
        sequence: Internal sequence value, 0 <= sequence < 10**13

    Returns:
        Short-form id such as ``"D1I2"``

    Raises:
        TypeError: If object_type is not an ObjectType or sequence is not an int
        ValueError: If sequence is out of range
    """
    long_id = encode_long_id(object_type, sequence)
    return _short_check_char(long_id) + object_type.short_char + _to_base36(sequence)
