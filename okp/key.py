# Copyright (c) 2026 Signer — MIT License

"""In-memory OKP key record.

A record is either public-only (``pk_bytes`` long) or secret-bearing
(``secret_bytes + pk_bytes`` long, laid out as secret || public). The length
is checked once at construction and the bytes never change afterwards.

Memory hardening: the bytes live in a private bytearray that is locked in
RAM when it holds a secret. ``wipe()`` unlocks and zeroes it; it runs on
``with`` exit and, as a last resort, when the record is collected.

``raw``, ``secret`` and ``public`` return immutable ``bytes`` copies, which
``wipe()`` cannot reach; pycryptodome only imports seeds from ``bytes``.
Callers should drop those copies as soon as the operation that needed them
returns. Comparisons run on the locked buffer directly.
"""

import hmac

from ._secmem import mlock, munlock, secure_zero
from .errors import InvalidKeyFormat


class OKPKey:
    """Raw Edwards-curve key bytes tagged with their curve."""

    __slots__ = ("_curve", "_buf", "_wiped")

    def __init__(self, curve, raw):
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidKeyFormat(f"{curve.name} key material must be bytes")
        n = len(raw)
        if n != curve.pk_bytes and n != curve.sk_bytes:
            raise InvalidKeyFormat(
                f"{curve.name} key must be {curve.pk_bytes} or {curve.sk_bytes} bytes, got {n}"
            )
        self._curve = curve
        self._wiped = False
        self._buf = bytearray(raw)
        if n == curve.sk_bytes:
            mlock(self._buf)

    # ── Accessors ──────────────────────────────────────────────────

    @property
    def curve(self):
        return self._curve

    def _material(self):
        if self._wiped:
            raise ValueError(f"{self._curve.name} key material has been wiped")
        return self._buf

    @property
    def is_secret(self):
        return len(self._buf) == self._curve.sk_bytes

    @property
    def is_public_only(self):
        return not self.is_secret

    @property
    def raw(self):
        """Full key bytes: public, or secret || public. A copy that wipe() does not clear."""
        return bytes(self._material())

    @property
    def secret(self):
        """Secret seed bytes, or None for a public-only key."""
        if not self.is_secret:
            return None
        return bytes(self._material()[:self._curve.secret_bytes])

    @property
    def public(self):
        """Public key bytes as stored (trailing ``pk_bytes`` of the record)."""
        return bytes(self._material()[-self._curve.pk_bytes:])

    # ── Lifetime ───────────────────────────────────────────────────

    def wipe(self):
        """Unlock and zero the key buffer. Safe to call more than once."""
        if self._wiped:
            return
        if self.is_secret:
            munlock(self._buf)
        secure_zero(self._buf)
        self._wiped = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.wipe()
        return False

    def __del__(self):
        # __init__ may have failed before the buffer existed
        if getattr(self, "_buf", None) is not None and not getattr(self, "_wiped", True):
            self.wipe()

    # ── Value semantics ────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, OKPKey):
            return NotImplemented
        if self._curve != other._curve:
            return False
        return hmac.compare_digest(self._material(), other._material())

    __hash__ = None

    def __repr__(self):
        kind = "secret" if self.is_secret else "public"
        return f"<OKPKey {self._curve.name} {kind}>"
