"""
Tests for value parsers and formatters.
"""

import math

import pytest

from inifield.ini.convert import (
    format_bool,
    format_double,
    format_int,
    parse_bool,
    parse_double,
    parse_int
)


@pytest.mark.parametrize('text,expected', [
    ('true', True), ('TRUE', True), ('True', True), ('1', True),
    ('false', False), ('FALSE', False), ('fAlSe', False), ('0', False),
])
def test_parse_bool(text, expected):
    assert parse_bool(text) is expected


@pytest.mark.parametrize('text', ['yes', 'no', 'on', '2', 't', ''])
def test_parse_bool_rejects(text):
    assert parse_bool(text) is None


@pytest.mark.parametrize('text,expected', [
    ('42', 42),
    ('-7', -7),
    ('+3', 3),
    ('052', 52),     # decimal is tried first
    ('0x2A', 42),
    ('0X2a', 42),
    ('-0x10', -16),
    ('ff', 255),
    ('abc', 2748),   # hex digits only, still a literal
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize('text', [
    'xyz', '0xg', '4.2', '0x', '1_000', '', '12 3',
])
def test_parse_int_rejects(text):
    assert parse_int(text) is None


def test_parse_double():
    assert parse_double('3.25') == 3.25
    assert parse_double('-1e3') == -1000.0
    assert parse_double('7') == 7.0
    assert math.isinf(parse_double('inf'))


@pytest.mark.parametrize('text', ['pi', '3.5abc', ''])
def test_parse_double_rejects(text):
    assert parse_double(text) is None


def test_formatters():
    assert format_bool(True) == 'true'
    assert format_bool(False) == 'false'
    assert format_int(5432) == '5432'
    assert format_int(-1) == '-1'
    assert format_double(0.1) == '0.1'
    assert parse_double(format_double(1 / 3)) == 1 / 3
