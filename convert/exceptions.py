"""Exception classes for convert.

This module defines the exception types raised by the conversion functions.
"""


class ConvertError(Exception):
    """Base exception class for all convert errors."""

    pass


class InvalidInputError(ConvertError, ValueError):
    """Exception raised when encoded input is malformed.

    Raised for a bad length (standard base64 not a multiple of 4, odd hex)
    or for any character outside the alphabet being decoded.
    """

    pass
