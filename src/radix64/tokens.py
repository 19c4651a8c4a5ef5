"""Short public tokens for sequential integer keys."""

import logging
import threading

from radix64.codec import Base64Codec
from radix64.errors import InvalidInputError
from radix64.interfaces.codec import IntegerCodec

logger = logging.getLogger(__name__)


class SequentialTokenGenerator:
    """Hand out the tokens of consecutive integers.

    Each call to `next_token` encodes the next value of an in-memory
    counter with ``codec``, so every token is distinct and decodes back
    to its sequence number. With the default alphabet, ``start=1`` yields
    ``"B"``, ``"C"``, ``"D"``, ...

    The counter is not persisted. Seed ``start`` from your own storage
    (e.g. the current maximum key) to continue a sequence.
    """

    def __init__(self, codec: IntegerCodec | None = None, start: int = 1) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 0:
            raise InvalidInputError(start)
        self._codec = codec if codec is not None else Base64Codec()
        self._next = start
        self._counter_lock = threading.Lock()

    @property
    def codec(self) -> IntegerCodec:
        """Codec used to turn sequence numbers into tokens."""
        return self._codec

    def next_token(self) -> str:
        """Encode the next sequence number; concurrent callers never share one."""
        with self._counter_lock:
            value = self._next
            self._next += 1
        token = self._codec.encode(value)
        logger.debug("Issued token %s for sequence %d", token, value)
        return token
