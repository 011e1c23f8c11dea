"""Shared constants for qalink identifier encodings and reference patterns."""

LONG_ID_WIDTH = 17  # "1" + 3-digit type code + 13-digit sequence

LONG_ID_PREFIX = "1"  # leading digit of every long-form tag ("1001", "1002")

SEQUENCE_WIDTH = 13

MAX_SEQUENCE = 10**SEQUENCE_WIDTH  # exclusive upper bound

# Short-form alphabet: case-sensitive, upper case only
SHORT_ID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Check character is always a letter, so a short id is never all digits
SHORT_ID_CHECK_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

SHORT_ID_CHECK_OFFSET = 16

SHORT_ID_MIN_LENGTH = 3  # check + type + one payload char

SHORT_ID_MAX_LENGTH = 11  # check + type + base36(MAX_SEQUENCE - 1)

DEFAULT_PATH_SEGMENT = "questions"

DEFAULT_HASH_MARKER = "#"
