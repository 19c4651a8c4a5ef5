"""RADIX64

Short, URL-safe tokens for non-negative integers.
Converts integers to strings over a configurable 64-symbol alphabet and
back, e.g. to expose auto-increment database keys as compact public ids.
"""

from radix64.alphabet import DEFAULT_ALPHABET, Alphabet
from radix64.codec import Base64Codec
from radix64.errors import (
    InvalidAlphabetError,
    InvalidInputError,
    NegativeValueNotSupportedError,
    Radix64Error,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "Base64Codec",
    "InvalidAlphabetError",
    "InvalidInputError",
    "NegativeValueNotSupportedError",
    "Radix64Error",
    "__version__",
]
__version__ = "0.1.0"
