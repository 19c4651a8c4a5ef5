"""Fixtures for integer codec contract tests."""

from collections.abc import Iterable

import pytest

from radix64.alphabet import DEFAULT_SYMBOLS
from radix64.codec import Base64Codec
from radix64.interfaces.codec import IntegerCodec


@pytest.fixture(params=["base64", "base64-custom", "base64-derived"])
def codec(request: pytest.FixtureRequest) -> Iterable[IntegerCodec]:
    """Return a fresh IntegerCodec instance for the requested variant.

    Supported params:
      - `"base64"` → Base64Codec with the default alphabet
      - `"base64-custom"` → Base64Codec with a reversed alphabet
      - `"base64-derived"` → codec obtained through `with_alphabet`

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "base64":
            yield Base64Codec()
        case "base64-custom":
            yield Base64Codec(DEFAULT_SYMBOLS[::-1])
        case "base64-derived":
            yield Base64Codec().with_alphabet(DEFAULT_SYMBOLS[32:] + DEFAULT_SYMBOLS[:32])
        case _:
            raise ValueError(f"unknown codec type: {request.param}")
