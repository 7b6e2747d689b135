"""
onetouch_crypto
===============
Payload protection between a mobile app and its trusted counterpart.

Schemes:
    SYMMETRIC   — AES-128-CTR + HMAC-SHA256, encrypt-then-MAC
                  envelope: tag(32) || nonce(16) || ciphertext
    ASYMMETRIC  — RSA-OAEP (SHA-1 / MGF1), payloads up to 256 bytes,
                  encrypted to a certificate's public key

Errors all derive from OneTouchCryptoError and carry an ErrorKind.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .entropy                  import RandomSource, SystemRandomSource, generate_random_bytes
from .exceptions               import (
    ErrorKind,
    OneTouchCryptoError,
    InvalidKeyLength,
    MalformedEnvelope,
    AuthenticationFailure,
    PayloadTooLarge,
    InvalidCertificate,
    AlgorithmUnavailable,
    CipherInitFailure,
    RandomSourceFailure,
)
from .keys                     import split_key, generate_key
from .mac                      import compute_tag, verify_tag, constant_time_equal
from .schemes.aes_ctr_hmac     import AESCTRHMACCipher, encrypt_aes_ctr, decrypt_aes_ctr
from .schemes.rsa_oaep         import RSAOAEPCipher, encrypt_rsa, load_certificate

__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "generate_random_bytes",
    "ErrorKind",
    "OneTouchCryptoError",
    "InvalidKeyLength",
    "MalformedEnvelope",
    "AuthenticationFailure",
    "PayloadTooLarge",
    "InvalidCertificate",
    "AlgorithmUnavailable",
    "CipherInitFailure",
    "RandomSourceFailure",
    "split_key",
    "generate_key",
    "compute_tag",
    "verify_tag",
    "constant_time_equal",
    "AESCTRHMACCipher",
    "encrypt_aes_ctr",
    "decrypt_aes_ctr",
    "RSAOAEPCipher",
    "encrypt_rsa",
    "load_certificate",
]
