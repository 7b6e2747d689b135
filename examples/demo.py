"""
onetouch_crypto — Live Demo
============================
Run:  python examples/demo.py

Walks a payload through the symmetric envelope and the RSA scheme,
printing sizes and timings, then shows each failure kind.
"""

import sys, os, time, datetime, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from onetouch_crypto import (
    AESCTRHMACCipher, RSAOAEPCipher, OneTouchCryptoError, generate_key,
)

LINE = "═" * 70
MSG  = b'{"payment_token":"EC-1234","switch":"browser"}'

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def fails(label, fn):
    try:
        fn()
    except OneTouchCryptoError as e:
        print(f"  ✓  {label:<28} → {e.kind.name}")
    else:
        print(f"  ✗  {label:<28} → no error raised")

logging.basicConfig(level=logging.DEBUG, format=' %(name)s: %(message)s')

print(f"\n{LINE}")
print("  onetouch_crypto — Demo")
print(LINE)
print(f"  Message: {MSG.decode()}\n")

# ── SYMMETRIC ────────────────────────────────────────────────────────────────
header("SYMMETRIC — AES-128-CTR + HMAC-SHA256")
t0  = time.perf_counter()
a   = AESCTRHMACCipher()
key = a.generate_key()
env = a.encrypt(MSG, key)
pt  = a.decrypt(env, key)
elapsed = time.perf_counter() - t0
ok("Shared secret", "256 bits (AES 128 + HMAC 128)")
ok("Envelope",      f"{len(env)} bytes (tag=32 + nonce=16 + data={len(MSG)})")
ok("Round-trip",    f"{elapsed*1000:.2f} ms")
ok("Decrypted",     pt.decode())

tampered = bytearray(env)
tampered[-1] ^= 0x01
fails("Tampered envelope",  lambda: a.decrypt(bytes(tampered), key))
fails("Wrong key",          lambda: a.decrypt(env, generate_key()))
fails("Truncated envelope", lambda: a.decrypt(env[:47], key))
fails("31-byte key",        lambda: a.encrypt(MSG, key[:31]))

# ── ASYMMETRIC ───────────────────────────────────────────────────────────────
header("ASYMMETRIC — RSA-4096 + OAEP (SHA-1 / MGF1)")
print("  (Generating 4096-bit self-signed certificate — takes a moment...)")
priv = rsa.generate_private_key(public_exponent=65537, key_size=4096)
name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "onetouch-demo")])
now  = datetime.datetime.now(datetime.timezone.utc)
cert = (x509.CertificateBuilder()
        .subject_name(name).issuer_name(name)
        .public_key(priv.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(priv, hashes.SHA256()))

t0 = time.perf_counter()
r  = RSAOAEPCipher()
ct = r.encrypt_for_certificate(key, cert)
elapsed = time.perf_counter() - t0
ok("Wrapped secret", f"{len(key)} bytes → {len(ct)} bytes")
ok("Encrypt",        f"{elapsed*1000:.1f} ms")
fails("257-byte payload", lambda: r.encrypt_for_certificate(b"\x00" * 257, cert))
fails("No certificate",   lambda: r.encrypt_for_certificate(MSG, None))

print(f"\n{LINE}\n")
