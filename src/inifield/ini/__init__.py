# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 18:22:47
# @Author : Kariko Lin

from .accessor import IniFile
from .model import IniLine, IniSyntax, IniSyntaxError, LineKind
from .parser import IniTextFile, locate_field, upsert_field
