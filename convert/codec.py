"""Conversions between bytes and base64, base64url and hex text.

All functions are pure and synchronous. Decoders either return the complete
result or raise InvalidInputError; nothing partial is ever returned.
"""

from __future__ import annotations

import logging

from convert.alphabet import BASE64, BASE64_URL, HEX, Alphabet
from convert.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def to_base64(data: bytes) -> str:
    """Encode bytes as padded standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        The encoded string, its length a multiple of 4.

    Example:
        >>> to_base64(bytes([0xfe, 0x33, 0x17, 0x82]))
        '/jMXgg=='
    """
    return encode_base64(data, BASE64)


def from_base64(text: str) -> bytes:
    """Decode padded standard base64.

    Args:
        text: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInputError: If the length is not a multiple of 4 or a
            character is outside the base64 alphabet.
    """
    if len(text) % 4 != 0:
        logger.debug("rejected base64 input of length %d", len(text))
        raise InvalidInputError("Bad base64 data")

    return decode_base64(text, BASE64)


def to_base64url(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64.

    Args:
        data: The bytes to encode.

    Returns:
        The encoded string, without any '=' characters.
    """
    return encode_base64(data, BASE64_URL)


def from_base64url(text: str) -> bytes:
    """Decode unpadded URL-safe base64.

    Any length is accepted; a trailing partial group only yields the whole
    bytes it holds.

    Args:
        text: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInputError: If a character is outside the base64url alphabet.
    """
    return decode_base64(text, BASE64_URL)


def to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two characters per byte."""
    symbols = HEX.symbols
    output = []

    for byte in bytes(memoryview(data)):
        output.append(symbols[byte >> 4])
        output.append(symbols[byte & 0x0F])

    return "".join(output)


def from_hex(text: str) -> bytes:
    """Decode lowercase hex.

    Only the digits 0-9 and a-f are recognised; uppercase A-F is rejected.

    Args:
        text: The hex string to decode.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInputError: If the length is odd or a character is not a
            lowercase hex digit.
    """
    if len(text) % 2 != 0:
        logger.debug("rejected hex input of length %d", len(text))
        raise InvalidInputError("Bad input")

    result = bytearray()
    for position in range(0, len(text), 2):
        high = HEX.index(text[position])
        low = HEX.index(text[position + 1])
        result.append(high * 16 + low)

    return bytes(result)


def encode_base64(data: bytes, alphabet: Alphabet) -> str:
    """Encode bytes with a 64 symbol alphabet.

    Each group of up to 3 input bytes is packed into 24 bits and emitted
    6 bits at a time. Once the input bits run out, the rest of the group is
    filled with the alphabet's pad character, or left off when it has none.

    Args:
        data: The bytes to encode.
        alphabet: The alphabet and padding to encode with.

    Returns:
        The encoded string.

    Raises:
        ValueError: If the alphabet does not have 64 symbols.
    """
    _check_base64_alphabet(alphabet)
    data = bytes(memoryview(data))
    symbols = alphabet.symbols
    output = []
    remaining_bits = len(data) * 8

    for start in range(0, len(data), 3):
        # Left-align the group: first byte lands in bits 16-23
        packed = 0
        for offset, byte in enumerate(data[start:start + 3]):
            packed |= byte << (16 - 8 * offset)

        for _ in range(4):
            if remaining_bits > 0:
                output.append(symbols[(packed >> 18) & 0x3F])
                packed <<= 6
                remaining_bits -= 6
            elif alphabet.pad is not None:
                output.append(alphabet.pad)

    return "".join(output)


def decode_base64(text: str, alphabet: Alphabet) -> bytes:
    """Decode text produced with a 64 symbol alphabet.

    Trailing pad characters are trimmed when the alphabet has a pad. The
    remaining length fixes the output size, so the filler bits of a short
    final group never become output bytes.

    Args:
        text: The encoded string.
        alphabet: The alphabet and padding the text was encoded with.

    Returns:
        The decoded bytes.

    Raises:
        ValueError: If the alphabet does not have 64 symbols.
        InvalidInputError: If a character is outside the alphabet.
    """
    _check_base64_alphabet(alphabet)
    length = len(text)
    if alphabet.pad is not None:
        length = len(text.rstrip(alphabet.pad))

    output_length = length * 6 // 8
    result = bytearray()
    position = 0

    while position < length:
        packed = 0
        for _ in range(4):
            value = 0
            if position < length:
                value = alphabet.index(text[position])
                position += 1
            packed = (packed << 6) + value

        for _ in range(3):
            if len(result) >= output_length:
                break
            result.append((packed >> 16) & 0xFF)
            packed <<= 8

    return bytes(result)


def _check_base64_alphabet(alphabet: Alphabet) -> None:
    if len(alphabet.symbols) != 64:
        raise ValueError("base64 needs a 64 symbol alphabet")
