"""Error definitions for radix64."""

from typing import Any

# ============================================================================
#                               Base error
# ============================================================================


class Radix64Error(Exception):
    """Base class for radix64 errors."""


# ============================================================================
#                           Codec related errors
# ============================================================================


class InvalidAlphabetError(Radix64Error, ValueError):
    """Raised when an alphabet is not a string of exactly 64 symbols."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Alphabet must be a string with 64 characters, got {value!r}."
        )
        self.value = value


class InvalidInputError(Radix64Error, ValueError):
    """Raised when a value cannot be encoded or decoded."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"The input is not valid: {value!r}.")
        self.value = value


class NegativeValueNotSupportedError(Radix64Error, ValueError):
    """Raised when encoding a number below zero."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Negative numbers are not supported: {value!r}.")
        self.value = value


# ============================================================================
#                       Configuration related errors
# ============================================================================


class AlphabetNotSetError(Radix64Error):
    """Raised when the alphabet environment variable is missing or empty."""

    def __init__(self, var: str) -> None:
        super().__init__(f"Environment variable {var} is not set.")
        self.var = var
