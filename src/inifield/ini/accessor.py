# -*- encoding: utf-8 -*-
# @File   : accessor.py
# @Time   : 2026/10/12 22:15:07
# @Author : Kariko Lin

"""Typed access to fields of one INI file.

```python
ini = IniFile('app.ini')
port = ini.read_int('db', 'port', 5432)
ini.write_bool('db', 'ssl', True)
```

No cache at all. Each `read_*()` reads the file again,
each `write_*()` reads, edits and rewrites the whole file.
Don't share one file among concurrent writers.
"""

import logging
from typing import Callable, Iterable, TypeVar

from .convert import (
    format_bool,
    format_double,
    format_int,
    parse_bool,
    parse_double,
    parse_int
)
from .model import IniSyntax, IniSyntaxError
from .parser import IniTextFile, locate_field, trim_line, upsert_field

V = TypeVar('V')


class IniFile:
    def __init__(
        self, filename: str,
        syntax: IniSyntax | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        self._storage = IniTextFile(filename, encoding)
        self._syntax = IniSyntax() if syntax is None else syntax

    @property
    def filename(self) -> str:
        return self._storage.filename

    @property
    def encoding(self) -> str:
        return self._storage.encoding

    @property
    def syntax(self) -> IniSyntax:
        return self._syntax

    def set_field_separator(self, separator: str) -> 'IniFile':
        """Get another accessor of the same file, splitting with `separator`.

        `self` keeps its own settings.
        """
        return IniFile(
            self.filename,
            self._syntax.with_field_separator(separator),
            self.encoding)

    def set_comment_prefix_list(self, prefixes: Iterable[str]) -> 'IniFile':
        """Get another accessor of the same file, with new comment prefixes.

        `self` keeps its own settings.
        """
        return IniFile(
            self.filename,
            self._syntax.with_comment_prefixes(prefixes),
            self.encoding)

    def _get_field(self, section: str, field: str) -> str | None:
        try:
            content = self._storage.read()
        except OSError as e:
            logging.warning(f'Unable to read {self._storage}:\n  {e}')
            return None
        return locate_field(content, section, field, self._syntax)

    def _check_target(self, section: str, field: str, value: str) -> str:
        """Reasons why the pair can't be written safely, or empty string."""
        if not section or ']' in section or '\n' in section:
            return f'invalid section name {section!r}'
        if (not field
                or field != trim_line(field)
                or self._syntax.field_separator in field
                or field.startswith(('[', *self._syntax.comment_prefixes))
                or '\n' in field):
            return f'invalid field name {field!r}'
        if '\n' in value or '\r' in value:
            return 'multi-line values are not supported'
        return ''

    def _set_field(self, section: str, field: str, value: str) -> bool:
        if reason := self._check_target(section, field, value):
            logging.warning(
                f'[{section}] {field} not written to {self._storage}: '
                f'{reason}')
            return False
        try:
            content = self._storage.read()
        except OSError as e:
            logging.warning(f'Unable to read {self._storage}:\n  {e}')
            return False

        try:
            content = upsert_field(
                content, section, field, value, self._syntax)
        except IniSyntaxError as e:
            logging.warning(
                f'[{section}] {field} not written, '
                f'{self._storage} is malformed at {e}')
            return False

        try:
            self._storage.write(content)
        except UnicodeEncodeError as e:
            logging.warning(
                f"[{section}] {field} not written, "
                f"{self._storage} can't hold it:\n  {e}")
            return False
        except OSError as e:
            logging.warning(f'Unable to write {self._storage}:\n  {e}')
            return False
        return True

    def _read_as(
        self, section: str, field: str,
        parser: Callable[[str], V | None], default: V
    ) -> V:
        text = self._get_field(section, field)
        if text is None:
            return default
        value = parser(text)
        if value is None:
            logging.debug(
                f'[{section}] {field} = {text!r} is malformed, '
                f'fallback to {default!r}.')
            return default
        return value

    def read_bool(self, section: str, field: str, default: bool) -> bool:
        """`true` / `1` and `false` / `0`, case insensitive."""
        return self._read_as(section, field, parse_bool, default)

    def read_int(self, section: str, field: str, default: int) -> int:
        """Decimal, octal or hexadecimal (`0x` optional) integers."""
        return self._read_as(section, field, parse_int, default)

    def read_double(self, section: str, field: str, default: float) -> float:
        return self._read_as(section, field, parse_double, default)

    def read_str(self, section: str, field: str, default: str) -> str:
        text = self._get_field(section, field)
        return default if text is None else text

    def write_bool(self, section: str, field: str, value: bool) -> bool:
        return self._set_field(section, field, format_bool(value))

    def write_int(self, section: str, field: str, value: int) -> bool:
        return self._set_field(section, field, format_int(value))

    def write_double(self, section: str, field: str, value: float) -> bool:
        return self._set_field(section, field, format_double(value))

    def write_str(self, section: str, field: str, value: str) -> bool:
        """Set the field as is. Surrounding whitespaces get lost on read."""
        return self._set_field(section, field, value)

    def __str__(self) -> str:
        return str(self._storage)

    def __repr__(self) -> str:
        return f'IniFile({self.filename!r}, {self._syntax!r})'
