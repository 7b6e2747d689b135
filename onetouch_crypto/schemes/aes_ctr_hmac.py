"""
SYMMETRIC: AES-128-CTR + HMAC-SHA256 (encrypt-then-MAC)
=========================================================
AES in counter mode for confidentiality, HMAC-SHA256 over the nonce and
ciphertext for integrity.

CTR turns AES into a stream cipher: no padding, ciphertext is exactly as
long as the plaintext, and decryption is the same keystream XOR as
encryption. It offers no integrity on its own, which is what the tag is
for. A nonce must never repeat under the same key.

Shared secret: 256 bits (32 bytes) = AES key(16) || HMAC key(16)
Nonce:         128 bits (16 bytes) — random per message, full counter block
Tag:           256 bits (32 bytes) — HMAC-SHA256(nonce || ciphertext)

Envelope format: tag(32) || nonce(16) || ciphertext

Decryption verifies the tag before any AES work is done. A bad tag raises
AuthenticationFailure and nothing is decrypted.

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import MIN_ENVELOPE_SIZE, NONCE_SIZE, SHARED_SECRET_SIZE, TAG_SIZE
from ..entropy import RandomSource, generate_random_bytes
from ..exceptions import AuthenticationFailure, CipherInitFailure, MalformedEnvelope
from ..keys import generate_key, split_key
from ..mac import compute_tag, verify_tag

logger = logging.getLogger(__name__)


def _aes_ctr(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """Apply the AES-CTR keystream. Same call encrypts and decrypts."""
    try:
        cipher = Cipher(algorithms.AES(key), modes.CTR(nonce))
    except (UnsupportedAlgorithm, ValueError) as exc:
        raise CipherInitFailure(f"AES-CTR initialisation failed: {exc}") from exc
    ctx = cipher.encryptor()
    return ctx.update(data) + ctx.finalize()


class AESCTRHMACCipher:
    """AES-CTR + HMAC-SHA256 envelope encryption."""

    KEY_SIZE   = SHARED_SECRET_SIZE
    NONCE_SIZE = NONCE_SIZE
    TAG_SIZE   = TAG_SIZE

    def __init__(self, random_source: RandomSource = None):
        """Pass a RandomSource for nonces, or omit to use os.urandom."""
        self._random = random_source

    def generate_key(self) -> bytes:
        return generate_key(self._random)

    def encrypt(self, plaintext: bytes, shared_secret: bytes) -> bytes:
        """
        Encrypt and authenticate.
        Returns: tag(32) || nonce(16) || ciphertext
        """
        enc_key, auth_key = split_key(shared_secret)
        nonce = generate_random_bytes(self.NONCE_SIZE, self._random)

        ciphertext = _aes_ctr(enc_key, nonce, bytes(plaintext))

        signed = nonce + ciphertext
        tag    = compute_tag(auth_key, signed)
        logger.debug(f"Encrypt: pt={len(plaintext)}B envelope={TAG_SIZE + len(signed)}B")
        return tag + signed

    def decrypt(self, envelope: bytes, shared_secret: bytes) -> bytes:
        """
        Verify the tag, then decrypt.
        Raises MalformedEnvelope, InvalidKeyLength or AuthenticationFailure.
        """
        if len(envelope) < MIN_ENVELOPE_SIZE:
            raise MalformedEnvelope(
                f"Envelope is {len(envelope)} bytes, minimum is {MIN_ENVELOPE_SIZE}.")
        enc_key, auth_key = split_key(shared_secret)

        envelope = bytes(envelope)
        tag    = envelope[:self.TAG_SIZE]
        signed = envelope[self.TAG_SIZE:]

        # must fail before any decryption happens
        if not verify_tag(auth_key, signed, tag):
            logger.warning(f"Tag mismatch on {len(envelope)}B envelope")
            raise AuthenticationFailure("Signature mismatch.")

        nonce      = signed[:self.NONCE_SIZE]
        ciphertext = signed[self.NONCE_SIZE:]
        plaintext  = _aes_ctr(enc_key, nonce, ciphertext)
        logger.debug(f"Decrypt: envelope={len(envelope)}B pt={len(plaintext)}B")
        return plaintext

    def __repr__(self):
        return f"AESCTRHMACCipher(random_source={self._random!r})"


_DEFAULT = AESCTRHMACCipher()


def encrypt_aes_ctr(plaintext: bytes, shared_secret: bytes) -> bytes:
    return _DEFAULT.encrypt(plaintext, shared_secret)


def decrypt_aes_ctr(envelope: bytes, shared_secret: bytes) -> bytes:
    return _DEFAULT.decrypt(envelope, shared_secret)
