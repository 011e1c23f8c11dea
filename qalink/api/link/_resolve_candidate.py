from ...utils.get_logger import get_logger
from ..uid.decode_identifier import decode_identifier
from ..uid.ObjectType import ObjectType
from ._Candidate import Candidate
from .Reference import Reference
from .ReferenceKind import ReferenceKind

logger = get_logger("link.resolve_candidate")


def _resolve_candidate(candidate: Candidate) -> Reference | None:
    """Turn a candidate into a Reference, or None when its first token is invalid."""
    first = decode_identifier(candidate.first)
    if first is None:
        logger.debug(
            "Discarded %s candidate at %d: invalid id %r", candidate.kind.value, candidate.offset, candidate.first
        )
        return None

    if first.object_type is ObjectType.ANSWER:
        return Reference(kind=candidate.kind, answer_id=candidate.first, offset=candidate.offset)

    answer_id = ""
    if candidate.kind is ReferenceKind.FROM_PATH and candidate.second:
        second = decode_identifier(candidate.second)
        if second is not None and second.object_type is ObjectType.ANSWER:
            answer_id = candidate.second
        else:
            # Partial acceptance: keep the question, drop the unusable answer token
            logger.debug("Ignored answer token %r at %d", candidate.second, candidate.offset)

    return Reference(kind=candidate.kind, question_id=candidate.first, answer_id=answer_id, offset=candidate.offset)
