"""
Shared secret handling.

A 32-byte shared secret is split, never hashed: bytes [0,16) key AES-CTR,
bytes [16,32) key HMAC-SHA256.

The 16-byte HMAC key is below the 32 bytes HMAC-SHA256 is usually given.
The split is fixed by the envelope format the counterparts already speak,
so it stays as is.
"""

from typing import Tuple

from .constants import AES_KEY_SIZE, HMAC_KEY_SIZE, SHARED_SECRET_SIZE
from .entropy import RandomSource, generate_random_bytes
from .exceptions import InvalidKeyLength


def split_key(shared_secret: bytes) -> Tuple[bytes, bytes]:
    """Return (encryption_key, auth_key), 16 bytes each."""
    if shared_secret is None or len(shared_secret) != SHARED_SECRET_SIZE:
        got = "None" if shared_secret is None else f"{len(shared_secret)} bytes"
        raise InvalidKeyLength(
            f"Shared secret must be {SHARED_SECRET_SIZE} bytes, got {got}.")
    secret = bytes(shared_secret)
    return secret[:AES_KEY_SIZE], secret[AES_KEY_SIZE:AES_KEY_SIZE + HMAC_KEY_SIZE]


def generate_key(random_source: RandomSource = None) -> bytes:
    """Fresh random 256-bit shared secret."""
    return generate_random_bytes(SHARED_SECRET_SIZE, random_source)
