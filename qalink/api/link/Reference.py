"""Reference dataclass (one per textual occurrence)."""

from dataclasses import dataclass, field
from typing import Any

from ..uid.decode_identifier import decode_identifier
from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class Reference:
    """A question/answer reference found in free-form text.

    Ids are the tokens as written; an absent id is ``""``.
    """

    kind: ReferenceKind
    question_id: str = ""
    answer_id: str = ""
    offset: int = field(default=0, compare=False)  # start of the match in the scanned text

    def __post_init__(self):
        if not self.question_id and not self.answer_id:
            raise ValueError("Reference requires a question_id or an answer_id")

    @property
    def canonical_question_id(self) -> str:
        """Long-form question id, or "" when absent."""
        return _canonical(self.question_id)

    @property
    def canonical_answer_id(self) -> str:
        """Long-form answer id, or "" when absent."""
        return _canonical(self.answer_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "question_id": self.question_id,
            "answer_id": self.answer_id,
            "offset": self.offset,
        }


def _canonical(token: str) -> str:
    if not token:
        return ""
    identifier = decode_identifier(token)
    return identifier.canonical_form if identifier is not None else ""
