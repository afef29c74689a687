"""Exceptions raised by the armored message decoding pipeline."""

from typing import Optional


class ArmorError(ValueError):
    """
    Base exception for every decoding failure.

    Attributes:
        stage: Pipeline stage that rejected the input
        line: Offending line, when the failure is tied to one
    """

    stage = "message"

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


# ===========================
# Envelope / Transport
# ===========================

class EnvelopeTooShortError(ArmorError):
    """Document has fewer lines than the minimum envelope."""
    stage = "envelope"


class MalformedEnvelopeError(ArmorError):
    """Armor separators could not be located while scanning the envelope."""
    stage = "envelope"


class DecodeError(ArmorError):
    """Envelope body is not valid padded base64."""
    stage = "transport"


class DecompressionError(ArmorError):
    """Decoded body is not a complete zlib stream, or inflates to bad text."""
    stage = "inflate"


# ===========================
# Section Grammar
# ===========================

class MalformedHeaderError(ArmorError):
    """Opening section separator is missing or malformed."""
    stage = "type"


class InvalidHeaderError(ArmorError):
    """A header block line is not of the form 'Key: Value'."""
    stage = "headers"


class InvalidTransactionHeaderError(ArmorError):
    """Header block ran to end of input without a terminating blank line."""
    stage = "headers"


class MalformedPayloadError(ArmorError):
    """Payload block is too short or never reaches a section separator."""
    stage = "payload"


class ExpectedSignatureListError(ArmorError):
    """Content after the payload does not open a signature section."""
    stage = "signatures"
