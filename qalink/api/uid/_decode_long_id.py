import re

from ...constants import LONG_ID_PREFIX, SEQUENCE_WIDTH
from .Identifier import Identifier
from .ObjectType import ObjectType

# [0-9] rather than \d: \d also matches non-ASCII digits
LONG_ID_PATTERN = re.compile(rf"{LONG_ID_PREFIX}(?P<code>[0-9]{{3}})(?P<sequence>[0-9]{{{SEQUENCE_WIDTH}}})")


def _decode_long_id(candidate: str) -> Identifier | None:
    match = LONG_ID_PATTERN.fullmatch(candidate)
    if match is None:
        return None

    object_type = ObjectType.from_code(int(match.group("code")))
    if object_type is None:
        return None

    return Identifier(
        object_type=object_type,
        sequence=int(match.group("sequence")),
        canonical_form=candidate,
        surface=candidate,
    )
