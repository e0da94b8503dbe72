"""Alphabets and reverse lookup tables.

This module defines the Alphabet value type used by the codec, and the three
alphabets the library ships with. Each alphabet carries a reverse table that
maps a character code to its index, built once when the alphabet is created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from convert.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Reverse tables cover 7-bit ASCII only
TABLE_SIZE = 128

# Symbol counts for hex and base64
SYMBOL_COUNTS = (16, 64)

INVALID = -1


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of symbols and an optional padding character.

    The position of a symbol in ``symbols`` is the value it encodes.

    Attributes:
        symbols: The alphabet symbols, 16 for hex and 64 for base64.
        pad: The padding character, or None if the encoding is unpadded.
        reverse: Character code to symbol index, INVALID where unmapped.
    """

    symbols: str
    pad: Optional[str] = None
    reverse: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the symbols and build the reverse table.

        Raises:
            ValueError: If there are not 16 or 64 symbols, a symbol is
                repeated or not ASCII, or the pad is not a single ASCII
                character outside the symbols.
        """
        if len(self.symbols) not in SYMBOL_COUNTS:
            raise ValueError("alphabet must have 16 or 64 symbols")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("alphabet symbols must be distinct")
        if any(ord(symbol) >= TABLE_SIZE for symbol in self.symbols):
            raise ValueError("alphabet symbols must be ASCII")

        table = [INVALID] * TABLE_SIZE
        for index, symbol in enumerate(self.symbols):
            table[ord(symbol)] = index

        if self.pad is not None:
            if len(self.pad) != 1 or ord(self.pad) >= TABLE_SIZE:
                raise ValueError("pad must be a single ASCII character")
            if self.pad in self.symbols:
                raise ValueError("pad must not be an alphabet symbol")
            # Lets the decoder see padding without rejecting it
            table[ord(self.pad)] = 0

        object.__setattr__(self, "reverse", tuple(table))

    def index(self, char: str) -> int:
        """Look up the value a character encodes.

        Args:
            char: A single character of encoded input.

        Returns:
            The index of the character in the alphabet.

        Raises:
            InvalidInputError: If the character is not ASCII or not in the alphabet.
        """
        code = ord(char)
        if code >= TABLE_SIZE or self.reverse[code] == INVALID:
            logger.debug("rejected character code %d", code)
            raise InvalidInputError("Bad input string")

        return self.reverse[code]


BASE64 = Alphabet(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    pad="=",
)

BASE64_URL = Alphabet(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_",
)

HEX = Alphabet("0123456789abcdef")
