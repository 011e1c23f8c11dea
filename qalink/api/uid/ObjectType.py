"""Object type tag carried by both identifier encodings."""

from enum import Enum

from ...constants import LONG_ID_PREFIX, SHORT_ID_ALPHABET


class ObjectType(Enum):
    """Closed set of object types an identifier may denote.

    The value is the type code embedded in both encodings.
    """

    QUESTION = 1
    ANSWER = 2

    @property
    def code(self) -> int:
        return self.value

    @property
    def tag(self) -> str:
        """Four-digit long-form tag, e.g. ``"1001"``."""
        return f"{LONG_ID_PREFIX}{self.value:03d}"

    @property
    def short_char(self) -> str:
        """Short-form type character, e.g. ``"1"``."""
        return SHORT_ID_ALPHABET[self.value]

    @classmethod
    def from_code(cls, code: int) -> "ObjectType | None":
        """Return the object type for ``code`` or None when the code is not recognised."""
        for object_type in cls:
            if object_type.code == code:
                return object_type
        return None
