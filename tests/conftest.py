"""
Shared fixtures for inifield tests.
"""

import pytest

from inifield import IniFile


@pytest.fixture
def ini_path(tmp_path):
    return tmp_path / 'test.ini'


@pytest.fixture
def ini_factory(ini_path):
    """Factory writing `text` as the INI file and returning an accessor."""
    def _make_ini(text: str | None = '', **kwargs) -> IniFile:
        if text is not None:
            ini_path.write_text(text, encoding='utf-8', newline='')
        return IniFile(str(ini_path), **kwargs)

    return _make_ini
