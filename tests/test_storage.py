"""
Tests for whole-content file storage.
"""

import pytest

from inifield import IniFile, IniTextFile


def test_missing_file_reads_empty(tmp_path):
    assert IniTextFile(str(tmp_path / 'none.ini')).read() == ''


def test_newlines_read_untranslated(tmp_path):
    path = tmp_path / 'crlf.ini'
    path.write_bytes(b'[a]\r\nk=v\r\n')
    assert IniTextFile(str(path)).read() == '[a]\r\nk=v\r\n'


def test_write_replaces_content(tmp_path):
    path = tmp_path / 'test.ini'
    path.write_text('[old]\nk=v\n')
    storage = IniTextFile(str(path))
    storage.write('[new]\nk=v')
    assert path.read_bytes() == b'[new]\nk=v'


def test_str(tmp_path):
    storage = IniTextFile(str(tmp_path / 'a.ini'))
    assert str(storage).endswith('a.ini (utf-8)')


def test_undecodable_file_falls_back(tmp_path):
    path = tmp_path / 'legacy.ini'
    raw = b'[a]\nname=caf\xe9\n'
    path.write_bytes(raw)
    storage = IniTextFile(str(path))
    with pytest.warns(UserWarning):
        text = storage.read()
    assert storage.encoding != 'utf-8'
    assert text == raw.decode(storage.encoding)


def test_write_back_with_guessed_codec(tmp_path):
    path = tmp_path / 'legacy.ini'
    path.write_bytes(b'[a]\nname=caf\xe9\n')
    ini = IniFile(str(path))
    with pytest.warns(UserWarning):
        assert ini.write_int('a', 'n', 1)
    assert path.read_bytes() == b'[a]\nname=caf\xe9\nn=1\n'


def test_unencodable_write_leaves_file(tmp_path):
    path = tmp_path / 'test.ini'
    path.write_bytes(b'[a]\nk=v\n')
    storage = IniTextFile(str(path))
    with pytest.raises(UnicodeEncodeError):
        storage.write('[a]\nk=\ud800\n')
    assert path.read_bytes() == b'[a]\nk=v\n'


def test_unknown_codec_rejected(tmp_path):
    with pytest.raises(LookupError):
        IniTextFile(str(tmp_path / 'a.ini'), 'no-such-codec')
    with pytest.raises(LookupError):
        IniFile(str(tmp_path / 'a.ini'), encoding='no-such-codec')
