"""
Decoding Pipeline for Armored Messages

Orchestrates the complete decoding flow:
1. Strip   - Remove the armor envelope, exposing the base64 body
2. Decode  - Base64-decode the body into raw bytes
3. Inflate - zlib-decompress the bytes into plaintext lines
4. Parse   - Walk the section grammar into a Message

Each stage's output is the next stage's only input. The first failing stage
raises and no Message is produced.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .config import DecoderConfig, settings
from .envelope import EnvelopeStripper
from .exceptions import ArmorError, DecodeError
from .inflate import inflate_lines
from .models import Message
from .sections import SectionParser
from .transport import decode_body

logger = logging.getLogger(__name__)


class MessagePipeline:
    """
    Complete decoding pipeline for armored messages

    Flow: Strip → Decode → Inflate → Parse

    Holds no per-document state, so one pipeline can decode any number of
    documents, concurrently if the caller wishes.

    Example:
        >>> pipeline = MessagePipeline()
        >>> message = pipeline.decode(lines)
        >>> print(f"{message.type}: {len(message.signatures)} signature(s)")
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize the decoding pipeline

        Args:
            config: Decoder configuration. Uses global settings if not provided.
        """
        self.config = config or settings.decoder

        self.stripper = EnvelopeStripper(
            mode=self.config.envelope_mode,
            header_lines=self.config.header_lines,
            footer_lines=self.config.footer_lines,
            min_lines=self.config.min_envelope_lines,
        )
        self.parser = SectionParser()

    def decode(self, lines: Sequence[str]) -> Message:
        """
        Decode one armored document

        Args:
            lines: Lines of the armored document, without line terminators

        Returns:
            Fully populated Message

        Raises:
            ArmorError: Subclass identifying the failing stage
        """
        try:
            logger.debug("Step 1/4: Stripping envelope (%s mode)...", self.config.envelope_mode)
            body = self.stripper.strip(lines)

            logger.debug("Step 2/4: Decoding %d body line(s)...", len(body))
            data = decode_body(body)

            logger.debug("Step 3/4: Inflating %d bytes...", len(data))
            plaintext = inflate_lines(
                data,
                encoding=self.config.text_encoding,
                max_bytes=self.config.max_inflated_bytes,
            )

            logger.debug("Step 4/4: Parsing %d plaintext line(s)...", len(plaintext))
            message = self.parser.parse(plaintext)
        except ArmorError as exc:
            logger.warning("Decoding failed at %s stage: %s", exc.stage, exc)
            raise

        logger.info(
            "Decoded '%s' message: %d payload chars, %d signature(s)",
            message.type,
            len(message.payload),
            len(message.signatures),
        )
        return message

    def decode_text(self, text: str) -> Message:
        """
        Decode an armored document held as a single string

        Lines are split on \\n only; a trailing \\r is dropped from each line
        and a final newline does not produce an empty last line.
        """
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return self.decode([line.removesuffix("\r") for line in lines])

    def decode_file(self, file_path: Union[str, Path]) -> Message:
        """
        Read an armored document from disk and decode it

        Raises:
            FileNotFoundError: If the path is not an existing regular file
            DecodeError: If the file is not valid UTF-8
            ArmorError: Subclass identifying the failing stage
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Armored document not found: {file_path}")

        logger.info("Decoding armored document: %s", file_path.name)
        try:
            text = file_path.read_text(encoding='utf-8')
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Armored document is not valid utf-8 ({exc})") from exc
        return self.decode_text(text)


def decode_message(lines: Sequence[str], config: Optional[DecoderConfig] = None) -> Message:
    """
    Convenience function to decode one armored document

    Example:
        >>> message = decode_message(lines)
        >>> message.type
        'SIGNED CONTRACT'
    """
    return MessagePipeline(config).decode(lines)


def decode_message_from_path(
    file_path: Union[str, Path],
    config: Optional[DecoderConfig] = None,
) -> Message:
    """Convenience function to decode an armored document stored on disk."""
    return MessagePipeline(config).decode_file(file_path)
