"""Encoder classes.

This module wraps the codec functions in stateless classes implementing
IEncoder, one per encoding.
"""

from convert import codec
from convert.interfaces.encoding import IEncoder


class Base64(IEncoder):
    """Standard base64 with '=' padding.

    Uses the '+' and '/' symbols, and pads output to a multiple of 4
    characters.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to a padded base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A base64 encoded string.
        """
        return codec.to_base64(data)

    @staticmethod
    def decode(text: str) -> bytes:
        """Decode a padded base64 string to bytes.

        Args:
            text: The base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: If the string is malformed.
        """
        return codec.from_base64(text)


class Base64Url(IEncoder):
    """URL-safe base64 (RFC 4648 Section 5) without padding.

    Replaces '+' with '-' and '/' with '_', and never emits '='.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to an unpadded base64url string."""
        return codec.to_base64url(data)

    @staticmethod
    def decode(text: str) -> bytes:
        """Decode an unpadded base64url string to bytes."""
        return codec.from_base64url(text)


class Hex(IEncoder):
    """Lowercase hexadecimal."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to a lowercase hex string."""
        return codec.to_hex(data)

    @staticmethod
    def decode(text: str) -> bytes:
        """Decode a lowercase hex string to bytes."""
        return codec.from_hex(text)
