"""Convert: bytes to and from base64, base64url and hex.

This package provides small, pure conversion functions between raw bytes and
text-safe encodings, for URLs, tokens and configuration values.

Main Components:
    - to_base64 / from_base64: Standard base64 with '=' padding
    - to_base64url / from_base64url: URL-safe base64 without padding
    - to_hex / from_hex: Lowercase hexadecimal
    - Base64, Base64Url, Hex: Encoder classes implementing IEncoder
    - InvalidInputError: Raised for malformed encoded input

Example:
    >>> from convert import from_hex, to_base64url
    >>> to_base64url(from_hex("fe331782"))
    '_jMXgg'
"""

import logging

from convert.alphabet import BASE64, BASE64_URL, HEX, Alphabet
from convert.codec import (
    decode_base64,
    encode_base64,
    from_base64,
    from_base64url,
    from_hex,
    to_base64,
    to_base64url,
    to_hex,
)
from convert.encoders import Base64, Base64Url, Hex
from convert.exceptions import ConvertError, InvalidInputError
from convert.interfaces import IEncoder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Codec
    "to_base64",
    "from_base64",
    "to_base64url",
    "from_base64url",
    "to_hex",
    "from_hex",
    "encode_base64",
    "decode_base64",
    # Alphabets
    "Alphabet",
    "BASE64",
    "BASE64_URL",
    "HEX",
    # Encoders
    "IEncoder",
    "Base64",
    "Base64Url",
    "Hex",
    # Exceptions
    "ConvertError",
    "InvalidInputError",
]
