# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/11 19:03:12
# @Author : Kariko Lin

"""
Line-level INI structures shared by the engine and the accessors.

Nothing here outlives a single read or write pass:
every call re-derives the lines from the file text.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, NamedTuple

WHITESPACES = ' \t\n\r\f\v'


class IniSyntaxError(Exception):
    """To record structural errors met while scanning an INI text."""
    def __init__(self, message: str, line_no: int = 0) -> None:
        super().__init__(message)
        self.line_no = line_no

    def __str__(self) -> str:
        if not self.line_no:
            return super().__str__()
        return f'line {self.line_no}: {super().__str__()}'


@dataclass(frozen=True)
class IniSyntax:
    """Parser settings of one INI source.

    Frozen on purpose of sharing: derive a changed copy with
    `with_field_separator()` / `with_comment_prefixes()`.
    """
    field_separator: str = '='
    comment_prefixes: tuple[str, ...] = ('#', ';')

    def __post_init__(self) -> None:
        sep = self.field_separator
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(
                f'field separator must be a single character, got {sep!r}')
        if sep in WHITESPACES or sep == '[':
            raise ValueError(f'{sep!r} can not be used as field separator')
        # lists are welcomed, but stored as tuple to keep it hashable.
        prefixes = tuple(self.comment_prefixes)
        for i in prefixes:
            if not isinstance(i, str) or not i:
                raise ValueError(
                    f'comment prefix must be a non-empty string, got {i!r}')
        object.__setattr__(self, 'comment_prefixes', prefixes)

    def with_field_separator(self, separator: str) -> 'IniSyntax':
        return replace(self, field_separator=separator)

    def with_comment_prefixes(self, prefixes: Iterable[str]) -> 'IniSyntax':
        return replace(self, comment_prefixes=tuple(prefixes))


class LineKind(Enum):
    IGNORED = 'ignored'
    SECTION = 'section'
    FIELD = 'field'


class IniLine(NamedTuple):
    kind: LineKind
    text: str               # trimmed line
    section: str = ''       # header name, or the section a field belongs to
    key: str = ''
    value: str = ''


class FoundMode(Enum):
    """Progress of an upsert scan."""
    NO_MATCH = 0
    SECTION_MATCH = 1
    BOTH_MATCH = 2
