# Copyright (c) 2026 Signer — MIT License

"""Ed448 digital signatures (RFC 8032 Section 5.2, pure variant).

Ed448 curve: x^2 + y^2 = 1 - 39081*x^2*y^2  (mod 2^448 - 2^224 - 1)

Signs the message directly with an empty context string.

Sizes:
    Secret:      57 bytes (seed)
    Secret key: 114 bytes (seed || public_key)
    Public key:  57 bytes (compressed Edwards point)
    Signature:  114 bytes (R || S)

Curve arithmetic is delegated to pycryptodome (``Crypto.Signature.eddsa``).
"""

import logging

from Crypto.Random import get_random_bytes
from Crypto.Signature import eddsa

from ._secmem import mlock, munlock, secure_zero

logger = logging.getLogger(__name__)

# ── Exported Size Constants ────────────────────────────────────────
ED448_SECRET_SIZE = 57
ED448_PK_SIZE = 57
ED448_SK_SIZE = ED448_SECRET_SIZE + ED448_PK_SIZE
ED448_SIG_SIZE = 114


def _private_key(sk_bytes):
    seed = bytearray(sk_bytes[:ED448_SECRET_SIZE])
    mlock(seed)
    try:
        return eddsa.import_private_key(bytes(seed))
    finally:
        munlock(seed)
        secure_zero(seed)


def _public_bytes(key):
    return key.public_key().export_key(format='raw')


def ed448_keypair(secret=None):
    """Generate or derive an Ed448 keypair.

    Args:
        secret: 57-byte seed, or None to draw a fresh one from the system RNG.

    Returns:
        (sk_bytes, pk_bytes) tuple.
        sk_bytes: 114-byte secret key (seed || public_key).
        pk_bytes: 57-byte public key.
    """
    if secret is None:
        secret = get_random_bytes(ED448_SECRET_SIZE)
        logger.debug("Drew fresh Ed448 seed from system RNG")
    if len(secret) != ED448_SECRET_SIZE:
        raise ValueError(f"Ed448 secret must be {ED448_SECRET_SIZE} bytes, got {len(secret)}")

    pk_bytes = _public_bytes(_private_key(secret))
    return bytes(secret) + pk_bytes, pk_bytes


def ed448_secret_to_public(sk_bytes):
    """Derive the 57-byte public key from a secret key or bare seed."""
    if len(sk_bytes) not in (ED448_SECRET_SIZE, ED448_SK_SIZE):
        raise ValueError(
            f"Ed448 sk must be {ED448_SECRET_SIZE} or {ED448_SK_SIZE} bytes, "
            f"got {len(sk_bytes)}"
        )
    return _public_bytes(_private_key(sk_bytes))


def ed448_sign(message, sk_bytes):
    """Sign a message with Ed448.

    Verifies the signature before returning, like ed25519ph_sign.

    Raises:
        RuntimeError: If verify-after-sign detects a fault.
        TypeError: If message is not bytes.
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("Ed448 message must be bytes")
    if len(sk_bytes) != ED448_SK_SIZE:
        raise ValueError(f"Ed448 sk must be {ED448_SK_SIZE} bytes, got {len(sk_bytes)}")

    key = _private_key(sk_bytes)
    sig = eddsa.new(key, 'rfc8032').sign(bytes(message))

    if not ed448_verify(sig, message, _public_bytes(key)):
        raise RuntimeError("Ed448 verify-after-sign failed (fault detected)")
    return sig


def ed448_verify(sig_bytes, message, pk_bytes):
    """Verify an Ed448 signature. Returns True if valid, False otherwise."""
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("Ed448 message must be bytes")
    if len(sig_bytes) != ED448_SIG_SIZE or len(pk_bytes) != ED448_PK_SIZE:
        return False

    try:
        key = eddsa.import_public_key(bytes(pk_bytes))
    except ValueError:
        return False

    try:
        eddsa.new(key, 'rfc8032').verify(bytes(message), bytes(sig_bytes))
    except ValueError:
        return False
    return True
