# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 20:58:41
# @Author : Kariko Lin

import logging
from abc import ABCMeta, abstractmethod
from codecs import lookup as lookup_codec
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """A file loaded and saved as a whole, through `encoding`.

    Subclasses only convert between bytes and `T`. `write()` encodes
    *before* opening the file, so a failed `encode()` leaves it untouched.
    """
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        # unknown codec names fail here, not on the first read.
        lookup_codec(encoding)
        self._fn = filename
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str:
        return self._codec

    @abstractmethod
    def decode(self, raw: bytes) -> T:
        raise NotImplementedError

    @abstractmethod
    def encode(self, instance: T) -> bytes:
        raise NotImplementedError

    def read(self) -> T:
        """Load and decode. A missing file decodes from no bytes at all.

        May raise `OSError`.
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except FileNotFoundError:
            logging.debug(f'{self._fn} not found, read as empty.')
            raw = b''
        return self.decode(raw)

    def write(self, instance: T) -> None:
        """Replace the whole file.

        May raise `UnicodeEncodeError` (file untouched) or `OSError`.
        """
        raw = self.encode(instance)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec})'
