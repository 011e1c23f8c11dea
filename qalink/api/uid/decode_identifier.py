"""Decode a candidate string into an Identifier."""

from ...constants import LONG_ID_WIDTH
from ...utils.get_logger import get_logger
from ._decode_long_id import _decode_long_id
from ._decode_short_id import _decode_short_id
from .Identifier import Identifier

_DIGITS = frozenset("0123456789")

logger = get_logger("uid.decode_identifier")


def decode_identifier(candidate: str) -> Identifier | None:
    """Decode ``candidate`` as a long-form or short-form identifier.

    All-digit candidates are decoded as long form only; anything else as
    short form only. Never raises for a string input.

    Args:
        candidate: Candidate identifier text

    Returns:
        The decoded Identifier, or None if the candidate is not a valid identifier
    """
    if not isinstance(candidate, str) or not candidate:
        return None

    if all(ch in _DIGITS for ch in candidate):
        if len(candidate) != LONG_ID_WIDTH:
            logger.debug("Rejected numeric candidate of width %d", len(candidate))
            return None
        return _decode_long_id(candidate)

    return _decode_short_id(candidate)
