from ...constants import SHORT_ID_CHECK_ALPHABET, SHORT_ID_CHECK_OFFSET


def _short_check_char(long_id: str) -> str:
    """Check letter of a short id, derived from the digit sum of its long form."""
    total = sum(ord(ch) - ord("0") for ch in long_id) + SHORT_ID_CHECK_OFFSET
    return SHORT_ID_CHECK_ALPHABET[total % len(SHORT_ID_CHECK_ALPHABET)]
