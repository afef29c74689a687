"""
Stage 4: section grammar parsing.

Walks the inflated plaintext lines through four states:

    Type -> Headers -> Payload -> Signatures

Plaintext shape:

    -----BEGIN SIGNED CONTRACT-----      <- Type
    Version: 1                           <- Headers (until a blank line)

    something sane                       <- Payload
    -----BEGIN SIGNATURE-----            <- Signatures (zero or more)
    Version: 1
    c29tZXRoaW5n
    -----END SIGNATURE-----
    -----END SIGNED CONTRACT-----

Each stage consumes a prefix of the lines and hands the remainder to the next
one. Parsing never backtracks, and the first failing stage raises.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .constants import HEADER_SPLITTER, SIGNATURE_HEADER_MARKER, trim
from .exceptions import (
    ExpectedSignatureListError,
    InvalidHeaderError,
    InvalidTransactionHeaderError,
    MalformedHeaderError,
    MalformedPayloadError,
)
from .models import Message, SectionSeparator, is_begin_separator

logger = logging.getLogger(__name__)


class SectionParser:
    """
    Parse inflated plaintext lines into a Message.

    Stateless: one instance can parse any number of documents, from any
    number of threads.

    Example:
        >>> parser = SectionParser()
        >>> message = parser.parse(plaintext.split("\\n"))
        >>> print(message.type, len(message.signatures))
    """

    def parse(self, lines: Sequence[str]) -> Message:
        """
        Run all four stages and build the Message.

        Args:
            lines: Plaintext lines of the inflated body

        Returns:
            Fully populated Message

        Raises:
            MalformedHeaderError: Opening separator missing or malformed
            InvalidHeaderError: Header line not of the form 'Key: Value'
            InvalidTransactionHeaderError: Header block never terminated
            MalformedPayloadError: Payload too short or never terminated
            ExpectedSignatureListError: Payload followed by a non-signature
        """
        rest, message_type = self.get_type(lines)

        # headers are only parsed to find where the payload starts
        rest, headers = self.get_headers(rest)
        logger.debug("Section '%s' has %d header(s)", message_type, len(headers))

        # payload content is kept opaque, nested sections are not parsed
        rest, payload = self.get_payload(rest)

        signatures: List[str] = []
        if rest:
            signatures = self.get_signatures(rest)

        return Message(
            type=message_type,
            payload="\n".join(payload),
            signatures=tuple(signatures),
        )

    # ------------------------------------------------------------------
    # Stage 1: Type
    # ------------------------------------------------------------------

    def get_type(self, lines: Sequence[str]) -> Tuple[List[str], str]:
        """Read the opening BEGIN separator and return its label."""
        rest = _trim_leading_blank_lines(lines)
        if len(rest) < 2:
            raise MalformedHeaderError(
                f"Malformed document, {len(rest)} line(s) after leading blanks"
            )

        separator = SectionSeparator.parse(rest[0])
        if separator is None or not separator.is_begin:
            raise MalformedHeaderError("Header is malformed", rest[0])
        if not separator.label:
            raise MalformedHeaderError("Header has an empty section label", rest[0])

        return rest[1:], separator.label

    # ------------------------------------------------------------------
    # Stage 2: Headers
    # ------------------------------------------------------------------

    def get_headers(self, lines: Sequence[str]) -> Tuple[List[str], Dict[str, str]]:
        """
        Read 'Key: Value' lines up to the first blank line.

        The blank line is left at the head of the returned remainder. For
        duplicate keys the last value wins.
        """
        headers: Dict[str, str] = {}
        for idx, line in enumerate(lines):
            line = trim(line)
            if line == "":
                return list(lines[idx:]), headers

            parts = line.split(HEADER_SPLITTER)
            if len(parts) != 2:
                raise InvalidHeaderError("Invalid header kv-pair", line)
            key, value = parts
            headers[key] = value

        raise InvalidTransactionHeaderError(
            "Invalid transaction header, no blank line ends the header block"
        )

    # ------------------------------------------------------------------
    # Stage 3: Payload
    # ------------------------------------------------------------------

    def get_payload(self, lines: Sequence[str]) -> Tuple[List[str], List[str]]:
        """
        Accumulate payload lines up to the next section separator.

        An END separator closes the document and leaves no remainder. A BEGIN
        separator opens the signature list and is left at the head of the
        remainder.
        """
        if len(lines) < 2:
            raise MalformedPayloadError(
                "Expected at least one payload line and an end separator"
            )

        start = 0
        # blank line that closed the header block
        if trim(lines[0]) == "":
            start = 1

        payload: List[str] = []
        for idx in range(start, len(lines)):
            line = trim(lines[idx])
            separator = SectionSeparator.parse(line)
            if separator is not None and separator.is_end:
                return [], payload
            if separator is not None and separator.is_begin:
                return list(lines[idx:]), payload
            payload.append(line)

        raise MalformedPayloadError(
            f"Malformed payload, no section separator after {len(payload)} line(s)"
        )

    # ------------------------------------------------------------------
    # Stage 4: Signatures
    # ------------------------------------------------------------------

    def get_signatures(self, lines: Sequence[str]) -> List[str]:
        """
        Collect one string per BEGIN/END signature section.

        Inside a section, lines containing ':' are signature headers and are
        skipped; the remaining lines are concatenated with no separator. An
        END outside any open section ends the list, and anything after it is
        ignored.
        """
        if not lines or not is_begin_separator(lines[0]):
            raise ExpectedSignatureListError(
                "Expected a list of signatures",
                lines[0] if lines else None,
            )

        signatures: List[str] = []
        current: Optional[List[str]] = None
        for line in lines:
            separator = SectionSeparator.parse(line)
            if separator is not None and separator.is_begin:
                current = []
            elif separator is not None and separator.is_end:
                if current is None:
                    break
                signatures.append("".join(current))
                current = None
            elif current is None:
                continue
            elif SIGNATURE_HEADER_MARKER in line:
                continue
            else:
                current.append(line)

        if current is not None:
            logger.warning("Dropping unterminated signature section (%d line(s))", len(current))

        return signatures


def _trim_leading_blank_lines(lines: Sequence[str]) -> List[str]:
    for idx, line in enumerate(lines):
        if trim(line) != "":
            return list(lines[idx:])
    return []


def parse_sections(lines: Sequence[str]) -> Message:
    """Convenience wrapper around SectionParser.parse()."""
    return SectionParser().parse(lines)
