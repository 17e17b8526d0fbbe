# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 18:20:05
# @Author : Chloride

import logging

from .ini import (
    IniFile, IniSyntax, IniSyntaxError, IniTextFile,
    locate_field, upsert_field
)

__all__ = [
    'IniFile', 'IniSyntax', 'IniSyntaxError', 'IniTextFile',
    'locate_field', 'upsert_field'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
