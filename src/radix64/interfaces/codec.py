"""Interface for integer codecs."""

import abc
from typing import Any


class IntegerCodec(abc.ABC):
    """Contract for a reversible integer <-> token codec."""

    @abc.abstractmethod
    def encode(self, value: Any) -> str:
        """Convert a non-negative number to its token."""

    @abc.abstractmethod
    def decode(self, token: Any) -> int:
        """Convert a token back to the number it encodes."""
