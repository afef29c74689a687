"""
Stage 2: transport decoding.

Joins the envelope body lines and decodes them as padded standard base64.
"""

import base64
import binascii
import logging
from typing import Sequence

from .exceptions import DecodeError

logger = logging.getLogger(__name__)


def decode_body(lines: Sequence[str]) -> bytes:
    """
    Decode base64 body lines into raw bytes.

    Lines are concatenated without separators; surrounding whitespace on each
    line (including a stray carriage return) is dropped first.

    Raises:
        DecodeError: On bad characters or incorrect padding
    """
    encoded = "".join(line.strip() for line in lines)
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Envelope body is not valid base64 ({exc})") from exc

    logger.debug("Decoded %d base64 chars into %d bytes", len(encoded), len(data))
    return data
