"""Compiled lexical patterns, cached per scanner configuration."""

import re
from functools import lru_cache

from ...constants import SHORT_ID_ALPHABET

# One id token: digits for the long form, plus the short-form alphabet
TOKEN = f"[{re.escape(SHORT_ID_ALPHABET)}]+"


@lru_cache(maxsize=32)
def path_pattern(path_segment: str) -> re.Pattern:
    """``<segment>/<token>`` optionally followed by ``/<token>``, host agnostic."""
    return re.compile(rf"{re.escape(path_segment)}/(?P<first>{TOKEN})(?:/(?P<second>{TOKEN}))?")


@lru_cache(maxsize=32)
def hash_pattern(hash_marker: str) -> re.Pattern:
    return re.compile(rf"{re.escape(hash_marker)}(?P<first>{TOKEN})")
