"""
Random byte sources.

The ciphers draw every nonce and generated key through a RandomSource so
tests (or platforms with their own CSPRNG) can substitute one. The default
reads from the operating system via os.urandom, which is thread-safe.
"""

import abc
import os

from .exceptions import RandomSourceFailure


class RandomSource(abc.ABC):
    """Interface: return ``n`` cryptographically secure random bytes."""

    @abc.abstractmethod
    def next_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource(RandomSource):
    """os.urandom-backed source."""

    def next_bytes(self, n: int) -> bytes:
        return os.urandom(n)

    def __repr__(self):
        return "SystemRandomSource()"


DEFAULT_RANDOM_SOURCE = SystemRandomSource()


def generate_random_bytes(n: int, random_source: RandomSource = None) -> bytes:
    """
    Draw exactly ``n`` bytes, refusing non-bytes results and short or long reads.
    Raises RandomSourceFailure if the source misbehaves.
    """
    source = random_source or DEFAULT_RANDOM_SOURCE
    data = source.next_bytes(n)
    # bytes(int) would silently yield zeros
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise RandomSourceFailure(
            f"Random source returned {type(data).__name__}, expected bytes.")
    data = bytes(data)
    if len(data) != n:
        raise RandomSourceFailure(
            f"Random source returned {len(data)} bytes, expected {n}.")
    return data
