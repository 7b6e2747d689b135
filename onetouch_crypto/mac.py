"""
HMAC-SHA256 tags and constant-time comparison.

Dependencies: cryptography >= 41.0
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import constant_time, hashes, hmac

from .exceptions import AlgorithmUnavailable


def compute_tag(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA256(key, message). Returns 32 bytes."""
    try:
        h = hmac.HMAC(bytes(key), hashes.SHA256())
    except UnsupportedAlgorithm as exc:
        raise AlgorithmUnavailable("HMAC-SHA256 is not available.") from exc
    h.update(bytes(message))
    return h.finalize()


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Timing does not depend on where the first differing byte is."""
    return constant_time.bytes_eq(bytes(a), bytes(b))


def verify_tag(key: bytes, message: bytes, expected_tag: bytes) -> bool:
    """Recompute the tag over ``message`` and compare in constant time."""
    return constant_time_equal(compute_tag(key, message), expected_tag)
