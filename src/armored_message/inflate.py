"""
Stage 3: inflation.

Decompresses the zlib-framed body and splits the plaintext into lines.
"""

import logging
import zlib
from typing import List

from .constants import DEFAULT_MAX_INFLATED_BYTES
from .exceptions import DecompressionError

logger = logging.getLogger(__name__)


def inflate(data: bytes, max_bytes: int = DEFAULT_MAX_INFLATED_BYTES) -> bytes:
    """
    Decompress a complete zlib stream.

    Raises:
        DecompressionError: If the header is invalid, the stream is corrupt or
            truncated, or the output exceeds max_bytes
    """
    inflater = zlib.decompressobj()
    try:
        out = inflater.decompress(data, max_bytes + 1)
    except zlib.error as exc:
        raise DecompressionError(f"Decompression failed ({exc})") from exc

    if len(out) > max_bytes:
        raise DecompressionError(f"Inflated body exceeds {max_bytes} bytes")
    if not inflater.eof:
        raise DecompressionError("Compressed stream is truncated")

    logger.debug("Inflated %d bytes from %d bytes", len(out), len(data))
    return out


def inflate_lines(
    data: bytes,
    encoding: str = "utf-8",
    max_bytes: int = DEFAULT_MAX_INFLATED_BYTES,
) -> List[str]:
    """
    Decompress and split the plaintext on '\\n'.

    No other newline normalization is applied, so a trailing newline yields a
    trailing empty line.
    """
    raw = inflate(data, max_bytes=max_bytes)
    try:
        text = raw.decode(encoding)
    except LookupError as exc:
        raise DecompressionError(f"Unknown text encoding {encoding!r}") from exc
    except UnicodeDecodeError as exc:
        raise DecompressionError(f"Inflated body is not valid {encoding} ({exc})") from exc
    return text.split("\n")
