"""Armored message decoding

Pipeline Flow:
    1. Strip   → EnvelopeStripper → base64 body lines
    2. Decode  → decode_body → raw bytes
    3. Inflate → inflate_lines → plaintext lines
    4. Parse   → SectionParser → Message

Quick Start:
    >>> from armored_message import decode_message_from_path
    >>> message = decode_message_from_path("fixtures/contract")
    >>> print(message.type, message.payload)
    >>> print(f"Signatures: {len(message)}")
"""

from .envelope import EnvelopeStripper, strip_envelope
from .transport import decode_body
from .inflate import inflate, inflate_lines
from .sections import SectionParser, parse_sections
from .pipeline import MessagePipeline, decode_message, decode_message_from_path
from .models import Message, SectionSeparator, SeparatorKind
from .exceptions import (
    ArmorError,
    EnvelopeTooShortError,
    MalformedEnvelopeError,
    DecodeError,
    DecompressionError,
    MalformedHeaderError,
    InvalidHeaderError,
    InvalidTransactionHeaderError,
    MalformedPayloadError,
    ExpectedSignatureListError,
)

__version__ = "0.1.0"

__all__ = [
    # Stages
    'EnvelopeStripper',
    'strip_envelope',
    'decode_body',
    'inflate',
    'inflate_lines',
    'SectionParser',
    'parse_sections',
    # Pipeline
    'MessagePipeline',
    'decode_message',
    'decode_message_from_path',
    # Models
    'Message',
    'SectionSeparator',
    'SeparatorKind',
    # Errors
    'ArmorError',
    'EnvelopeTooShortError',
    'MalformedEnvelopeError',
    'DecodeError',
    'DecompressionError',
    'MalformedHeaderError',
    'InvalidHeaderError',
    'InvalidTransactionHeaderError',
    'MalformedPayloadError',
    'ExpectedSignatureListError',
]
