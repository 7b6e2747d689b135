"""
Error kinds raised by onetouch_crypto.

Every failure is a subclass of OneTouchCryptoError and carries a ``kind``
from the closed ErrorKind enumeration, so callers can branch on it without
reading messages. Input-shape errors are also ValueErrors; environment
errors are also RuntimeErrors.
"""

import enum


class ErrorKind(enum.Enum):
    INVALID_KEY_LENGTH     = "invalid_key_length"
    MALFORMED_ENVELOPE     = "malformed_envelope"
    AUTHENTICATION_FAILURE = "authentication_failure"
    PAYLOAD_TOO_LARGE      = "payload_too_large"
    INVALID_CERTIFICATE    = "invalid_certificate"
    ALGORITHM_UNAVAILABLE  = "algorithm_unavailable"
    CIPHER_INIT_FAILURE    = "cipher_init_failure"
    RANDOM_SOURCE_FAILURE  = "random_source_failure"


class OneTouchCryptoError(Exception):
    """Base class for every error this package raises."""

    kind: ErrorKind = None


class InvalidKeyLength(OneTouchCryptoError, ValueError):
    """Shared secret is not exactly 32 bytes."""

    kind = ErrorKind.INVALID_KEY_LENGTH


class MalformedEnvelope(OneTouchCryptoError, ValueError):
    """Envelope is shorter than tag + nonce."""

    kind = ErrorKind.MALFORMED_ENVELOPE


class AuthenticationFailure(OneTouchCryptoError):
    """
    Tag mismatch: the envelope was tampered with, corrupted, or is being
    opened with the wrong key. Nothing was decrypted.
    """

    kind = ErrorKind.AUTHENTICATION_FAILURE


class PayloadTooLarge(OneTouchCryptoError, ValueError):
    """RSA plaintext exceeds what the public key can encrypt."""

    kind = ErrorKind.PAYLOAD_TOO_LARGE


class InvalidCertificate(OneTouchCryptoError, ValueError):
    """Certificate is missing, unparseable, or has no usable RSA key."""

    kind = ErrorKind.INVALID_CERTIFICATE


class AlgorithmUnavailable(OneTouchCryptoError, RuntimeError):
    """The cryptography backend lacks HMAC-SHA256 or RSA-OAEP/SHA-1."""

    kind = ErrorKind.ALGORITHM_UNAVAILABLE


class CipherInitFailure(OneTouchCryptoError, RuntimeError):
    """AES-CTR could not be set up with the derived key and nonce."""

    kind = ErrorKind.CIPHER_INIT_FAILURE


class RandomSourceFailure(OneTouchCryptoError, RuntimeError):
    """The random source returned the wrong number of bytes."""

    kind = ErrorKind.RANDOM_SOURCE_FAILURE
