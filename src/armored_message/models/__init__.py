"""
Pydantic data models for armored message decoding.

- message: Message (pipeline output)
- sections: SectionSeparator, SeparatorKind (transient parse artifacts)
"""
from .message import Message
from .sections import (
    SectionSeparator,
    SeparatorKind,
    is_begin_separator,
    is_end_separator,
)

__all__ = [
    'Message',
    'SectionSeparator',
    'SeparatorKind',
    'is_begin_separator',
    'is_end_separator',
]
