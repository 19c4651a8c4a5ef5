"""Alphabet value object used by the radix-64 codec.

An alphabet is an ordered run of exactly 64 symbols; the symbol at
position ``i`` is the digit for value ``i``. Only the type and length are
validated. Duplicate symbols are accepted, but since decoding resolves a
symbol to its first position they make round-trips lossy, so a warning is
logged when one is built.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from radix64.errors import InvalidAlphabetError

logger = logging.getLogger(__name__)

BASE = 64

#               0       8       16      24      32      40      48      56     63
#               v       v       v       v       v       v       v       v      v
DEFAULT_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


@dataclass(frozen=True)
class Alphabet:
    """Value object holding the 64 digit symbols of a codec.

    Attributes:
        symbols: The symbols in digit order.

    Raises:
        InvalidAlphabetError: If ``symbols`` is not a string of 64 characters.
    """

    symbols: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, str) or len(self.symbols) != BASE:
            raise InvalidAlphabetError(self.symbols)
        if duplicates := self.duplicates:
            logger.warning(
                "Alphabet has duplicate symbols %s; decoding will be ambiguous",
                duplicates,
            )

    @classmethod
    def coerce(cls, value: Any) -> Alphabet:
        """Return ``value`` as an Alphabet, validating plain strings."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @cached_property
    def duplicates(self) -> list[str]:
        """Symbols that appear more than once, in first-seen order."""
        return [sym for sym, n in Counter(self.symbols).items() if n > 1]

    @cached_property
    def _positions(self) -> dict[str, int]:
        positions: dict[str, int] = {}
        for i, sym in enumerate(self.symbols):
            positions.setdefault(sym, i)  # first occurrence wins
        return positions

    def symbol(self, digit: int) -> str:
        """Return the symbol for a digit value in ``[0, 63]``."""
        return self.symbols[digit]

    def digit(self, symbol: str) -> int | None:
        """Return the digit value of ``symbol``, or None if it is not in the alphabet."""
        return self._positions.get(symbol)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.symbols


DEFAULT_ALPHABET = Alphabet(DEFAULT_SYMBOLS)
