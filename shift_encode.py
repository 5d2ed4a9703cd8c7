#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Letter shift over a fixed alphabet"""

import sys
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

DICT = 'abcdefghijklmnopqrstuvwxyz'
SEPARATOR = ' '
OFFSET = 1


class ShiftCipherError(ValueError):
    """Bad alphabet/separator configuration"""


# ═══════════════════════════════════════════════════════════════════════════════
# SUBSTITUTION
# ═══════════════════════════════════════════════════════════════════════════════

def shift_letter(letter: str, alphabet: str = DICT, offset: int = OFFSET) -> str:
    """Shifts one character inside the alphabet, anything else is returned as is"""
    if len(letter) != 1 or not alphabet:
        return letter
    return letter.translate(_table(alphabet, offset))


@lru_cache(maxsize=128)
def _table(alphabet: str, offset: int) -> dict:
    size = len(alphabet)
    shifted = ''.join(alphabet[(i + offset) % size] for i in range(size))
    logger.debug("translate table built: alphabet=%r offset=%d", alphabet, offset)
    return str.maketrans(alphabet, shifted)


def shift_text(text: str, alphabet: str = DICT, separator: str = SEPARATOR,
               offset: int = OFFSET) -> str:
    """
    Splits on the separator, shifts every alphabet character of each segment
    and joins the segments back. The separator never takes part in the shift.
    """
    if not text or not alphabet:
        return text
    table = _table(alphabet, offset)
    return separator.join(segment.translate(table) for segment in text.split(separator))


def convert(text: str) -> str:
    """Shift with the static DICT / SEPARATOR / OFFSET"""
    return shift_text(text, DICT, SEPARATOR, OFFSET)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURED CIPHER
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ShiftCipher:
    """Alphabet, separator and offset bundled together; offset is kept mod len(alphabet)"""
    alphabet: str = DICT
    separator: str = SEPARATOR
    offset: int = OFFSET

    def __post_init__(self):
        if not self.alphabet:
            raise ShiftCipherError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            dupes = sorted({c for c in self.alphabet if self.alphabet.count(c) > 1})
            raise ShiftCipherError(f"alphabet has repeated characters: {''.join(dupes)!r}")
        if len(self.separator) != 1:
            raise ShiftCipherError(f"separator must be a single character, got {self.separator!r}")
        if self.separator in self.alphabet:
            raise ShiftCipherError("separator must not be part of the alphabet")
        object.__setattr__(self, 'offset', self.offset % len(self.alphabet))
        logger.debug("cipher ready: size=%d offset=%d", self.size, self.offset)

    @property
    def size(self) -> int:
        return len(self.alphabet)

    def inverse(self) -> 'ShiftCipher':
        return ShiftCipher(self.alphabet, self.separator, self.size - self.offset)

    def encode(self, text: str) -> str:
        return shift_text(text, self.alphabet, self.separator, self.offset)

    def decode(self, text: str) -> str:
        return self.inverse().encode(text)

    def mapping(self) -> List[Tuple[str, str]]:
        """Pairs (plain, shifted) in alphabet order"""
        return [(c, shift_letter(c, self.alphabet, self.offset)) for c in self.alphabet]


DEFAULT_CIPHER = ShiftCipher(DICT, SEPARATOR, OFFSET)


if __name__ == '__main__':
    if len(sys.argv) < 3:
        print("Usage: python3 shift_encode.py <offset> <text>")
        print("Example: python3 shift_encode.py 1 'ab cd'")
        sys.exit(1)

    try:
        key = int(sys.argv[1])
    except ValueError:
        print("❌ Error: offset must be an integer")
        sys.exit(1)

    text = ' '.join(sys.argv[2:])
    encoded = ShiftCipher(offset=key).encode(text)

    print(f"Offset: {key}")
    print(f"Input:  {text}")
    print(f"Output: {encoded}")
