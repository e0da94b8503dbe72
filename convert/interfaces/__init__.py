"""Convert interfaces package.

This package provides protocol definitions for the text encoders.
"""

from .encoding import IEncoder

__all__ = [
    "IEncoder",
]
