"""
Stage 1: armor envelope stripping.

Removes the outer armor header and footer, exposing the base64 body lines.

Two modes:
    fixed - positional strip of a 4-line header and a 2-line footer. This is
            what existing signers produce and is the default.
    scan  - locate the first BEGIN and last END separators and drop the armor
            metadata and the blank lines adjacent to them.
"""

import logging
from typing import List, Sequence

from .constants import (
    ENVELOPE_FOOTER_LINES,
    ENVELOPE_HEADER_LINES,
    HEADER_SPLITTER,
    MIN_ENVELOPE_LINES,
    trim,
)
from .exceptions import EnvelopeTooShortError, MalformedEnvelopeError
from .models.sections import is_begin_separator, is_end_separator

logger = logging.getLogger(__name__)


class EnvelopeStripper:
    """
    Strip the armor envelope from a document.

    Example:
        >>> stripper = EnvelopeStripper()
        >>> body = stripper.strip(lines)
    """

    def __init__(
        self,
        mode: str = "fixed",
        header_lines: int = ENVELOPE_HEADER_LINES,
        footer_lines: int = ENVELOPE_FOOTER_LINES,
        min_lines: int = MIN_ENVELOPE_LINES,
    ):
        if mode not in ("fixed", "scan"):
            raise ValueError(f"Unsupported envelope mode: {mode}")
        self.mode = mode
        self.header_lines = header_lines
        self.footer_lines = footer_lines
        self.min_lines = max(min_lines, header_lines + footer_lines)

    def strip(self, lines: Sequence[str]) -> List[str]:
        """
        Return the body lines of an armored document.

        Raises:
            EnvelopeTooShortError: If the document is shorter than the envelope
            MalformedEnvelopeError: In scan mode, if no BEGIN/END pair is found
        """
        if len(lines) < self.min_lines:
            raise EnvelopeTooShortError(
                f"Document has {len(lines)} lines, envelope needs at least {self.min_lines}"
            )

        if self.mode == "scan":
            return self._strip_scan(lines)
        return list(lines[self.header_lines:len(lines) - self.footer_lines])

    def _strip_scan(self, lines: Sequence[str]) -> List[str]:
        begin = next(
            (idx for idx, line in enumerate(lines) if is_begin_separator(line)),
            None,
        )
        if begin is None:
            raise MalformedEnvelopeError("No armor BEGIN separator found")

        end = next(
            (idx for idx in range(len(lines) - 1, begin, -1) if is_end_separator(lines[idx])),
            None,
        )
        if end is None:
            raise MalformedEnvelopeError("No armor END separator after", lines[begin])

        start = begin + 1
        # armor metadata, e.g. "Version: 1" / "Comment: ..."
        while start < end and HEADER_SPLITTER in lines[start]:
            start += 1
        if start < end and trim(lines[start]) == "":
            start += 1

        stop = end
        if stop > start and trim(lines[stop - 1]) == "":
            stop -= 1

        logger.debug("Envelope body spans lines %d-%d", start, stop)
        return list(lines[start:stop])


def strip_envelope(lines: Sequence[str], mode: str = "fixed") -> List[str]:
    """Convenience wrapper around EnvelopeStripper.strip()."""
    return EnvelopeStripper(mode=mode).strip(lines)
