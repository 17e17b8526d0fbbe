# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

"""Value text <-> Python value.

Parsers return `None` for anything they can't understand,
the caller decides what the fallback is.
"""

from re import compile as regex

_DEC_LITERAL = regex(r'[+-]?[0-9]+')
_OCT_LITERAL = regex(r'[+-]?[0-7]+')
_HEX_LITERAL = regex(r'[+-]?(?:0[xX])?[0-9a-fA-F]+')

# checked in order, first matched base wins.
INT_BASES = ((10, _DEC_LITERAL), (8, _OCT_LITERAL), (16, _HEX_LITERAL))


def parse_bool(text: str) -> bool | None:
    text = text.upper()
    if text in ('TRUE', '1'):
        return True
    elif text in ('FALSE', '0'):
        return False
    return None


def parse_int(text: str) -> int | None:
    """Accept decimal, octal or hexadecimal literals.

    Decimal is tried first, so `052` reads as 52, while `0x2A` and `ff`
    can only be hexadecimal.
    """
    for base, pattern in INT_BASES:
        if pattern.fullmatch(text):
            return int(text, base)
    return None


def parse_double(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def format_int(value: int) -> str:
    return str(int(value))


def format_double(value: float) -> str:
    # repr is the shortest text that reads back to the same float.
    return repr(float(value))
