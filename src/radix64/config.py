"""Configuration utilities for radix64.

The codec never reads the environment on its own. These helpers let an
application opt in to supplying a custom alphabet through the
``RADIX64_ALPHABET`` environment variable.
"""

import os

from radix64.alphabet import Alphabet
from radix64.codec import Base64Codec
from radix64.errors import AlphabetNotSetError

ALPHABET_ENV_VAR = "RADIX64_ALPHABET"  # pragma: no mutate


def get_alphabet_from_env(var: str = ALPHABET_ENV_VAR) -> Alphabet:
    """Get the codec alphabet from the environment.

    Args:
        var: Name of the environment variable to read.

    Returns:
        The validated alphabet.

    Raises:
        AlphabetNotSetError: If the variable is not set or is empty.
        InvalidAlphabetError: If the value is not a string of 64 symbols.
    """
    if not (symbols := os.environ.get(var)):
        raise AlphabetNotSetError(var)
    return Alphabet(symbols)


def codec_from_env(var: str = ALPHABET_ENV_VAR) -> Base64Codec:
    """Build a codec whose alphabet comes from the environment.

    Raises:
        AlphabetNotSetError: If the variable is not set or is empty.
        InvalidAlphabetError: If the value is not a string of 64 symbols.
    """
    return Base64Codec(get_alphabet_from_env(var))
