"""qalink - question/answer cross-reference extraction.

Recognises long-form and short-form question/answer ids and finds
references to them in free-form text, without any storage lookups.
"""

import logging

from .api.link import Reference, ReferenceKind, ScannerConfig, extract_references
from .api.uid import (
    Identifier,
    IdKind,
    ObjectType,
    classify_identifier,
    decode_identifier,
    encode_long_id,
    encode_short_id,
)

logging.getLogger("qalink").addHandler(logging.NullHandler())

__all__ = [
    "IdKind",
    "Identifier",
    "ObjectType",
    "Reference",
    "ReferenceKind",
    "ScannerConfig",
    "classify_identifier",
    "decode_identifier",
    "encode_long_id",
    "encode_short_id",
    "extract_references",
]
