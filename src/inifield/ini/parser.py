# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/11 21:36:50
# @Author : Kariko Lin

"""Line-oriented INI engine.

The engine works on whole texts: `locate_field()` scans for a value,
`upsert_field()` returns a new text with one field updated or inserted.
Everything else in the file (comments, blank lines, other sections)
gets copied through, only trimmed.

Supported shape:

    ```ini
    ; comment, or # comment
    [section]
    key = value  ; NOT a trailing comment, it belongs to the value.
    ```

Structural errors (field before any section, missing separator,
bad header) raise `IniSyntaxError` with the 1-based line number.
"""

import logging
from typing import Iterator
from warnings import warn

import chardet

from .model import (
    WHITESPACES,
    FoundMode,
    IniLine,
    IniSyntax,
    IniSyntaxError,
    LineKind
)
from ..abstract import FileHandler


def trim_line(line: str) -> str:
    return line.strip(WHITESPACES)


def is_ignored_line(line: str, syntax: IniSyntax) -> bool:
    """Blank lines and comments. `line` should be trimmed already."""
    return not line or line.startswith(syntax.comment_prefixes)


def parse_section_header(line: str, line_no: int = 0) -> str:
    """Get section name out of `[name]`.

    Anything after the first `]` is not part of the name.
    """
    pos = line.find(']')
    if pos == -1:
        raise IniSyntaxError(f'unclosed section header: {line}', line_no)
    if pos == 1:
        raise IniSyntaxError('empty section name', line_no)
    return line[1:pos]


def parse_field_line(
    line: str, section: str, syntax: IniSyntax, line_no: int = 0
) -> tuple[str, str]:
    """Split `key<sep>value` on the first separator only."""
    if not section:
        raise IniSyntaxError(
            f'field declared before any section: {line}', line_no)
    key, sep, value = line.partition(syntax.field_separator)
    if not sep:
        raise IniSyntaxError(
            f'missing "{syntax.field_separator}" in field line: {line}',
            line_no)
    return trim_line(key), trim_line(value)


def classify_and_trim_line(
    raw: str, syntax: IniSyntax, section: str = '', line_no: int = 0
) -> IniLine:
    """Trim `raw` and tell what it is.

    `section` is the current one, i.e. the latest header seen before.
    """
    line = trim_line(raw)
    if is_ignored_line(line, syntax):
        return IniLine(LineKind.IGNORED, line)
    if line[0] == '[':
        return IniLine(
            LineKind.SECTION, line, parse_section_header(line, line_no))
    key, value = parse_field_line(line, section, syntax, line_no)
    return IniLine(LineKind.FIELD, line, section, key, value)


def scan_lines(content: str, syntax: IniSyntax) -> Iterator[IniLine]:
    """Walk `content` line by line, tracking the current section.

    Stops with `IniSyntaxError` at the first malformed line.
    """
    section = ''
    for line_no, raw in enumerate(content.split('\n'), 1):
        line = classify_and_trim_line(raw, syntax, section, line_no)
        if line.kind is LineKind.SECTION:
            section = line.section
        yield line


def locate_field(
    content: str, section: str, field: str, syntax: IniSyntax
) -> str | None:
    """Find the value of `field` in `section`.

    Returns `None` if not found, if the value is empty,
    or if the text got malformed before the field shows up.
    """
    try:
        for line in scan_lines(content, syntax):
            if line.kind is not LineKind.FIELD:
                continue
            if line.section == section and line.key == field:
                return line.value or None
    except IniSyntaxError as e:
        logging.warning(f'INI lookup of [{section}] {field} aborted: {e}')
    return None


def upsert_field(
    content: str, section: str, field: str, value: str, syntax: IniSyntax
) -> str:
    """Return `content` with `field<sep>value` set in `section`.

    - existing field: rewritten in place (first occurrence only).
    - existing section without the field: inserted before the next header,
      or at the end if the section is the last one.
    - no such section: `[section]` and the field appended.

    Raises `IniSyntaxError` if `content` is malformed.
    """
    pair = f'{field}{syntax.field_separator}{value}'
    lines = content.split('\n') if content else []
    # keep the final newline (if any) as the final newline.
    trailing = bool(lines) and not trim_line(lines[-1])
    if trailing:
        lines.pop()

    buf: list[str] = []
    mode = FoundMode.NO_MATCH
    for line in scan_lines('\n'.join(lines), syntax) if lines else ():
        if line.kind is LineKind.SECTION:
            if line.section == section:
                if mode is FoundMode.NO_MATCH:
                    mode = FoundMode.SECTION_MATCH
            elif mode is FoundMode.SECTION_MATCH:
                buf.append(pair)
                mode = FoundMode.BOTH_MATCH
        elif (line.kind is LineKind.FIELD
              and mode is not FoundMode.BOTH_MATCH
              and line.section == section and line.key == field):
            buf.append(pair)
            mode = FoundMode.BOTH_MATCH
            continue
        buf.append(line.text)

    if mode is FoundMode.NO_MATCH:
        buf.append(f'[{section}]')
        buf.append(pair)
    elif mode is FoundMode.SECTION_MATCH:
        buf.append(pair)
    if trailing:
        buf.append('')
    return '\n'.join(buf)


class IniTextFile(FileHandler[str]):
    """Whole-content text storage of one INI file.

    A missing file reads as an empty text, and gets created on write.
    Newlines are kept as they are, both ways.
    """
    def _guess_codec(self, raw: bytes) -> tuple[str, str]:
        codec = chardet.detect(raw)
        encoding = codec.get('encoding')
        if encoding is None or codec.get('confidence', 0) < 0.8:
            encoding = 'utf-8'

        # fallbacks
        try:
            return encoding, raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return 'latin-1', raw.decode('latin-1')

    def decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError:
            pass
        encoding, buf = self._guess_codec(raw)
        warn(f'`{self._fn}` is not {self._codec}, decoded as {encoding}.')
        # write back the same way we read it.
        self._codec = encoding
        return buf

    def encode(self, instance: str) -> bytes:
        return instance.encode(self._codec)
