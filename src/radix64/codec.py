"""Radix-64 integer codec.

Converts non-negative numbers to strings over a 64-symbol alphabet
(most-significant digit first, no padding) and back. Fractional parts are
truncated before encoding. Decoding is lenient: characters that are not
part of the alphabet are skipped, so separators or stray punctuation in a
token do not change its value.

Adapted from: http://stackoverflow.com/a/6573119/192024
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

from radix64.alphabet import BASE, DEFAULT_ALPHABET, Alphabet
from radix64.errors import InvalidInputError, NegativeValueNotSupportedError
from radix64.interfaces.codec import IntegerCodec

logger = logging.getLogger(__name__)


# ASCII-only numeric literals: no "_" separators, no non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_RE = re.compile(r"([+-]?)Infinity")


def _parse_number(text: str) -> int | float:
    """Parse a numeric string.

    Accepts surrounding whitespace, signed decimal integers, decimals with
    an optional exponent (``"1e3"``, ``".5"``), unsigned ``0x``/``0o``/``0b``
    literals and ``"Infinity"``. Anything else, including ``"1_000"``,
    non-ASCII digits and ``"nan"``, is rejected.

    Raises:
        InvalidInputError: If the string is blank or not a number.
    """
    literal = text.strip()
    if _INTEGER_RE.fullmatch(literal):
        return int(literal)
    if _PREFIXED_RE.fullmatch(literal):
        return int(literal, 0)
    if _DECIMAL_RE.fullmatch(literal):
        return float(literal)
    if match := _INFINITY_RE.fullmatch(literal):
        return -math.inf if match.group(1) == "-" else math.inf
    raise InvalidInputError(text)


def _to_non_negative_int(value: Any) -> int:
    """Validate ``value`` and truncate it toward zero.

    Raises:
        InvalidInputError: For None, bools, non-numbers, NaN and +infinity.
        NegativeValueNotSupportedError: For values below zero.
    """
    number = value
    if isinstance(number, str):
        number = _parse_number(number)
    if isinstance(number, bool) or not isinstance(number, numbers.Real):
        raise InvalidInputError(value)
    if isinstance(number, numbers.Integral):
        number = int(number)
    elif isinstance(number, float) and (math.isnan(number) or number == math.inf):
        raise InvalidInputError(value)
    if number < 0:
        raise NegativeValueNotSupportedError(value)
    return math.trunc(number)


class Base64Codec(IntegerCodec):
    """Radix-64 codec with a replaceable alphabet.

    Each instance owns its alphabet; replacing it on one codec does not
    affect any other. `Alphabet` values are immutable and validated before
    they are stored, so replacing one is a single reference swap: each
    encode/decode call reads the reference once and works with one whole
    alphabet, even while another thread assigns a new one.

    Example:
        ```py
        codec = Base64Codec()
        codec.encode(123890)  # "ePy"
        codec.decode("ePy")  # 123890
        ```
    """

    def __init__(self, alphabet: Alphabet | str = DEFAULT_ALPHABET) -> None:
        self._alphabet = Alphabet.coerce(alphabet)

    @property
    def alphabet(self) -> Alphabet:
        """The current alphabet value."""
        return self._alphabet

    @property
    def chars(self) -> str:
        """The current alphabet symbols, in digit order."""
        return self._alphabet.symbols

    @chars.setter
    def chars(self, value: Alphabet | str) -> None:
        """Replace the alphabet.

        Raises:
            InvalidAlphabetError: If ``value`` is not a string of 64 symbols.
                The previous alphabet stays in place.
        """
        alphabet = Alphabet.coerce(value)
        self._alphabet = alphabet
        logger.debug("Codec alphabet replaced with %r", alphabet.symbols)

    def with_alphabet(self, value: Alphabet | str) -> Base64Codec:
        """Return a new codec using ``value``; this codec is left untouched.

        Raises:
            InvalidAlphabetError: If ``value`` is not a string of 64 symbols.
        """
        return type(self)(value)

    def encode(self, value: Any) -> str:
        """Convert a non-negative number to its radix-64 string.

        Any fractional part is dropped first (``1.9`` encodes like ``1``).
        Numeric strings such as ``"10"`` are accepted.

        Args:
            value: The number to encode.

        Returns:
            The symbols of the current alphabet, most significant first.
            Zero encodes to the single symbol at index 0.

        Raises:
            InvalidInputError: If ``value`` is not a finite number.
            NegativeValueNotSupportedError: If ``value`` is negative.
        """
        residual = _to_non_negative_int(value)
        alphabet = self._alphabet

        digits: list[str] = []
        while True:
            residual, rixit = divmod(residual, BASE)
            digits.append(alphabet.symbol(rixit))
            if not residual:
                break
        return "".join(reversed(digits))

    def decode(self, token: Any) -> int:
        """Convert a radix-64 string back to a number.

        Characters outside the current alphabet are skipped, so
        ``"/. =Eud0"`` decodes like ``"Eud0"``. A string made only of
        such characters decodes to 0.

        Args:
            token: The string to decode.

        Returns:
            The decoded non-negative integer.

        Raises:
            InvalidInputError: If ``token`` is not a string, or is empty.
        """
        if not isinstance(token, str) or not token:
            raise InvalidInputError(token)
        alphabet = self._alphabet

        result = 0
        for char in token:
            if (rixit := alphabet.digit(char)) is not None:
                result = result * BASE + rixit
        return result
