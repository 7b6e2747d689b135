"""
Fixed sizes shared by both schemes.

Envelope layout: tag(32) || nonce(16) || ciphertext
"""

# Symmetric suite
SHARED_SECRET_SIZE = 32   # caller-supplied secret, split in two
AES_KEY_SIZE       = 16   # first half  -> AES-128 encryption key
HMAC_KEY_SIZE      = 16   # second half -> HMAC-SHA256 key
NONCE_SIZE         = 16   # initial CTR counter block
TAG_SIZE           = 32   # HMAC-SHA256 digest

MIN_ENVELOPE_SIZE  = TAG_SIZE + NONCE_SIZE

# Asymmetric suite
RSA_MAX_PLAINTEXT  = 256  # modulus size in bytes
OAEP_HASH_SIZE     = 20   # SHA-1 digest
