"""Identifier codec domain: long-form and short-form ids, no storage lookups."""

from .classify_identifier import classify_identifier
from .decode_identifier import decode_identifier
from .encode_long_id import encode_long_id
from .encode_short_id import encode_short_id
from .Identifier import Identifier
from .IdKind import IdKind
from .ObjectType import ObjectType

__all__ = [
    "IdKind",
    "Identifier",
    "ObjectType",
    "classify_identifier",
    "decode_identifier",
    "encode_long_id",
    "encode_short_id",
]
