"""Classification of a candidate identifier string."""

from enum import Enum


class IdKind(str, Enum):
    QUESTION = "question"
    ANSWER = "answer"
    INVALID = "invalid"
