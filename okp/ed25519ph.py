# Copyright (c) 2026 Signer — MIT License

"""Ed25519ph digital signatures (RFC 8032 Section 5.1, prehash variant).

Ed25519ph signs SHA-512(message) instead of the message itself, with the
dom2(1, "") domain prefix. Keys are identical to plain Ed25519 keys, but a
signature made with one variant never verifies under the other.

Sizes:
    Secret:      32 bytes (seed)
    Secret key:  64 bytes (seed || public_key)
    Public key:  32 bytes (compressed Edwards point)
    Signature:   64 bytes (R || S)

Curve arithmetic is delegated to pycryptodome (``Crypto.Signature.eddsa``),
which passes a SHA-512 hash object through the prehash code path. Seed
copies are kept in locked bytearrays and wiped after use.
"""

import logging

from Crypto.Hash import SHA512
from Crypto.Random import get_random_bytes
from Crypto.Signature import eddsa

from ._secmem import mlock, munlock, secure_zero

logger = logging.getLogger(__name__)

# ── Exported Size Constants ────────────────────────────────────────
ED25519PH_SECRET_SIZE = 32
ED25519PH_PK_SIZE = 32
ED25519PH_SK_SIZE = ED25519PH_SECRET_SIZE + ED25519PH_PK_SIZE
ED25519PH_SIG_SIZE = 64


def _private_key(sk_bytes):
    """Import the seed half of a secret key as a pycryptodome EdDSA key."""
    seed = bytearray(sk_bytes[:ED25519PH_SECRET_SIZE])
    mlock(seed)
    try:
        return eddsa.import_private_key(bytes(seed))
    finally:
        munlock(seed)
        secure_zero(seed)


def _public_bytes(key):
    return key.public_key().export_key(format='raw')


def ed25519ph_keypair(secret=None):
    """Generate or derive an Ed25519ph keypair.

    Args:
        secret: 32-byte seed, or None to draw a fresh one from the system RNG.

    Returns:
        (sk_bytes, pk_bytes) tuple.
        sk_bytes: 64-byte secret key (seed || public_key).
        pk_bytes: 32-byte public key.
    """
    if secret is None:
        secret = get_random_bytes(ED25519PH_SECRET_SIZE)
        logger.debug("Drew fresh Ed25519ph seed from system RNG")
    if len(secret) != ED25519PH_SECRET_SIZE:
        raise ValueError(
            f"Ed25519ph secret must be {ED25519PH_SECRET_SIZE} bytes, got {len(secret)}"
        )

    pk_bytes = _public_bytes(_private_key(secret))
    return bytes(secret) + pk_bytes, pk_bytes


def ed25519ph_secret_to_public(sk_bytes):
    """Derive the 32-byte public key from a secret key or bare seed."""
    if len(sk_bytes) not in (ED25519PH_SECRET_SIZE, ED25519PH_SK_SIZE):
        raise ValueError(
            f"Ed25519ph sk must be {ED25519PH_SECRET_SIZE} or "
            f"{ED25519PH_SK_SIZE} bytes, got {len(sk_bytes)}"
        )
    return _public_bytes(_private_key(sk_bytes))


def ed25519ph_sign(message, sk_bytes):
    """Sign SHA-512(message) with Ed25519ph.

    Fault injection countermeasure: verifies the signature before returning.

    Args:
        message: Arbitrary-length message bytes.
        sk_bytes: 64-byte secret key from ed25519ph_keypair.

    Returns:
        64-byte signature (R || S).

    Raises:
        RuntimeError: If verify-after-sign detects a fault.
        TypeError: If message is not bytes.
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("Ed25519ph message must be bytes")
    if len(sk_bytes) != ED25519PH_SK_SIZE:
        raise ValueError(f"Ed25519ph sk must be {ED25519PH_SK_SIZE} bytes, got {len(sk_bytes)}")

    key = _private_key(sk_bytes)
    signer = eddsa.new(key, 'rfc8032')
    sig = signer.sign(SHA512.new(bytes(message)))

    if not ed25519ph_verify(sig, message, _public_bytes(key)):
        raise RuntimeError("Ed25519ph verify-after-sign failed (fault detected)")
    return sig


def ed25519ph_verify(sig_bytes, message, pk_bytes):
    """Verify an Ed25519ph signature.

    Args:
        sig_bytes: 64-byte signature.
        message: Arbitrary-length message bytes (not prehashed).
        pk_bytes: 32-byte public key.

    Returns:
        True if valid, False otherwise.
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("Ed25519ph message must be bytes")
    if len(sig_bytes) != ED25519PH_SIG_SIZE or len(pk_bytes) != ED25519PH_PK_SIZE:
        return False

    try:
        key = eddsa.import_public_key(bytes(pk_bytes))
    except ValueError:
        # Not a point on the curve
        return False

    verifier = eddsa.new(key, 'rfc8032')
    try:
        verifier.verify(SHA512.new(bytes(message)), bytes(sig_bytes))
    except ValueError:
        return False
    return True
