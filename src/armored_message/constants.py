"""
Constants for armored message decoding

Grammar literals shared by every stage, plus the fixed shape of the
outer armor envelope written by existing signers.
"""

# ===========================
# Section Separators
# ===========================

# "-----BEGIN SIGNED CONTRACT-----" / "-----END SIGNED CONTRACT-----"
SECTION_BEGIN = "-----BEGIN"
SECTION_END = "-----END"
SECTION_END_OF_LINE = "-----"

# Header lines are "Key: Value" with exactly one splitter
HEADER_SPLITTER = ": "

# Signature-internal headers are recognized by any colon
SIGNATURE_HEADER_MARKER = ":"

# Trim set for line comparisons (spaces and tabs only, never newlines)
LINE_TRIM_CHARS = " \t"


# ===========================
# Envelope Shape
# ===========================

# begin separator, two metadata lines (Version/Comment), one blank line
ENVELOPE_HEADER_LINES = 4

# trailing blank line, end separator
ENVELOPE_FOOTER_LINES = 2

MIN_ENVELOPE_LINES = ENVELOPE_HEADER_LINES + ENVELOPE_FOOTER_LINES

# 16 MiB, a single signed message is far below this
DEFAULT_MAX_INFLATED_BYTES = 16 * 1024 * 1024


def trim(line: str) -> str:
    """Trim spaces and tabs from both ends of a line."""
    return line.strip(LINE_TRIM_CHARS)
