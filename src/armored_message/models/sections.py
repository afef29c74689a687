"""
Transient section grammar models.

Separators only live for the duration of a parse; only the opening
separator's label survives, as Message.type.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..constants import SECTION_BEGIN, SECTION_END, SECTION_END_OF_LINE, trim


class SeparatorKind(Enum):
    """Begin/end discriminant of a section separator"""
    BEGIN = "BEGIN"
    END = "END"


class SectionSeparator(BaseModel):
    """A '-----BEGIN <label>-----' or '-----END <label>-----' line"""
    model_config = ConfigDict(frozen=True)

    kind: SeparatorKind
    label: str

    @property
    def is_begin(self) -> bool:
        return self.kind is SeparatorKind.BEGIN

    @property
    def is_end(self) -> bool:
        return self.kind is SeparatorKind.END

    @classmethod
    def parse(cls, line: str) -> Optional["SectionSeparator"]:
        """
        Parse a separator line.

        The line is trimmed of spaces and tabs first. Returns None when the
        line is not a well-formed separator.
        """
        line = trim(line)
        for kind, prefix in (
            (SeparatorKind.BEGIN, SECTION_BEGIN),
            (SeparatorKind.END, SECTION_END),
        ):
            if (
                len(line) >= len(prefix) + len(SECTION_END_OF_LINE)
                and line.startswith(prefix)
                and line.endswith(SECTION_END_OF_LINE)
            ):
                label = line[len(prefix):len(line) - len(SECTION_END_OF_LINE)]
                return cls(kind=kind, label=trim(label))
        return None


def is_begin_separator(line: str) -> bool:
    separator = SectionSeparator.parse(line)
    return separator is not None and separator.is_begin


def is_end_separator(line: str) -> bool:
    separator = SectionSeparator.parse(line)
    return separator is not None and separator.is_end
