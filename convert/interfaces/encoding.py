"""Encoding interfaces for convert.

This module defines the protocol shared by the text encoders, so callers can
take an encoder as a collaborator without depending on a concrete one.
"""

from __future__ import annotations

from typing import Protocol


class IEncoder(Protocol):
    """Interface for converting bytes to text and back."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: When the text is malformed.
        """
        ...
