"""Decoded identifier value object."""

from dataclasses import dataclass

from .ObjectType import ObjectType


@dataclass(frozen=True)
class Identifier:
    """A validated identifier.

    ``canonical_form`` is the long-form id regardless of which encoding
    ``surface`` used.
    """

    object_type: ObjectType
    sequence: int
    canonical_form: str
    surface: str

    @property
    def is_short(self) -> bool:
        """Return True if the identifier was written in short form."""
        return self.surface != self.canonical_form

    @property
    def is_question(self) -> bool:
        return self.object_type is ObjectType.QUESTION

    @property
    def is_answer(self) -> bool:
        return self.object_type is ObjectType.ANSWER

    def __str__(self) -> str:
        return self.canonical_form
