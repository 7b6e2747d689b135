"""
ASYMMETRIC: RSA + OAEP (SHA-1 / MGF1)
======================================
RSA public-key encryption of short payloads for the holder of a
certificate's private key.

OAEP padding is randomised, so the same plaintext encrypts differently every
time. It also eats into the modulus: with SHA-1 the largest message is
modulus_bytes - 2*20 - 2 (470 bytes for RSA-4096, 214 for RSA-2048). On top
of that, payloads are capped at 256 bytes whatever the key size. Both limits
are checked up front and reported as PayloadTooLarge.

The certificate is only a carrier for the public key. Trust validation
(chain, expiry, pinning) is the caller's job.

Use cases:
  - Handing a freshly generated shared secret to the counterpart
  - Small tokens bound to the counterpart's certificate

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..constants import OAEP_HASH_SIZE, RSA_MAX_PLAINTEXT
from ..exceptions import AlgorithmUnavailable, InvalidCertificate, PayloadTooLarge

logger = logging.getLogger(__name__)


def load_certificate(data: bytes) -> x509.Certificate:
    """Parse a PEM or DER X.509 certificate."""
    if not data:
        raise InvalidCertificate("Empty certificate data.")
    data = bytes(data)
    try:
        if data.lstrip().startswith(b"-----BEGIN"):
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as exc:
        raise InvalidCertificate(f"Could not parse certificate: {exc}") from exc


class RSAOAEPCipher:
    """RSA-OAEP (SHA-1, MGF1-SHA-1) encryption to a certificate."""

    MAX_PLAINTEXT = RSA_MAX_PLAINTEXT

    @staticmethod
    def _oaep():
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA1()),
            algorithm=hashes.SHA1(),
            label=None
        )

    @staticmethod
    def public_key_of(certificate) -> rsa.RSAPublicKey:
        """Extract the RSA public key, or raise InvalidCertificate."""
        if certificate is None:
            raise InvalidCertificate("No certificate supplied.")
        get_key = getattr(certificate, "public_key", None)
        if not callable(get_key):
            raise InvalidCertificate(
                f"{type(certificate).__name__} does not expose public_key().")
        try:
            key = get_key()
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise InvalidCertificate(f"Unusable public key: {exc}") from exc
        if not isinstance(key, rsa.RSAPublicKey):
            raise InvalidCertificate(
                f"Certificate key is {type(key).__name__}, not RSA.")
        return key

    @classmethod
    def max_plaintext_size(cls, public_key: rsa.RSAPublicKey) -> int:
        """Largest payload this key accepts under OAEP-SHA1, capped at 256."""
        oaep_limit = public_key.key_size // 8 - 2 * OAEP_HASH_SIZE - 2
        return min(cls.MAX_PLAINTEXT, oaep_limit)

    def encrypt_for_certificate(self, plaintext: bytes, certificate) -> bytes:
        """
        Encrypt with the certificate's public key.
        Returns ciphertext as long as the modulus.
        """
        if len(plaintext) > self.MAX_PLAINTEXT:
            raise PayloadTooLarge(
                f"Data is too large for public key encryption: "
                f"{len(plaintext)} > {self.MAX_PLAINTEXT} bytes.")

        public_key = self.public_key_of(certificate)
        limit = self.max_plaintext_size(public_key)
        if len(plaintext) > limit:
            raise PayloadTooLarge(
                f"RSA-{public_key.key_size} OAEP-SHA1 fits {limit} bytes, "
                f"got {len(plaintext)}.")

        try:
            ciphertext = public_key.encrypt(bytes(plaintext), self._oaep())
        except UnsupportedAlgorithm as exc:
            raise AlgorithmUnavailable("RSA-OAEP with SHA-1 is not available.") from exc
        logger.debug(f"RSA encrypt: pt={len(plaintext)}B ct={len(ciphertext)}B "
                     f"key=RSA-{public_key.key_size}")
        return ciphertext

    def __repr__(self):
        return "RSAOAEPCipher(OAEP-SHA1/MGF1)"


_DEFAULT = RSAOAEPCipher()


def encrypt_rsa(plaintext: bytes, certificate) -> bytes:
    return _DEFAULT.encrypt_for_certificate(plaintext, certificate)
