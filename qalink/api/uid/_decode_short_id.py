from ...constants import MAX_SEQUENCE, SHORT_ID_ALPHABET, SHORT_ID_MAX_LENGTH, SHORT_ID_MIN_LENGTH
from ._short_check_char import _short_check_char
from .encode_long_id import encode_long_id
from .Identifier import Identifier
from .ObjectType import ObjectType

_INDEX = {ch: i for i, ch in enumerate(SHORT_ID_ALPHABET)}


def _decode_short_id(candidate: str) -> Identifier | None:
    if not SHORT_ID_MIN_LENGTH <= len(candidate) <= SHORT_ID_MAX_LENGTH:
        return None
    if any(ch not in _INDEX for ch in candidate):
        return None

    check, type_char, payload = candidate[0], candidate[1], candidate[2:]

    object_type = ObjectType.from_code(_INDEX[type_char])
    if object_type is None:
        return None

    # Canonical base 36 only, so each id has exactly one short spelling
    if len(payload) > 1 and payload[0] == "0":
        return None

    sequence = 0
    for ch in payload:
        sequence = sequence * len(SHORT_ID_ALPHABET) + _INDEX[ch]
    if sequence >= MAX_SEQUENCE:
        return None

    long_id = encode_long_id(object_type, sequence)
    if _short_check_char(long_id) != check:
        return None

    return Identifier(
        object_type=object_type,
        sequence=sequence,
        canonical_form=long_id,
        surface=candidate,
    )
