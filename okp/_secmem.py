# Copyright (c) 2026 Signer — MIT License

"""Secure memory utilities (libsodium-backed).

sodium_memzero:  Compiler-resistant secure zeroing.
sodium_mlock:    Locks pages to prevent swapping secrets to disk.
sodium_munlock:  Unlocks + zeros the pages on release.

Only mutable buffers (bytearray / memoryview) can be wiped; immutable
``bytes`` objects are ignored.
"""

from nacl._sodium import ffi as _ffi, lib as _lib


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / memoryview)."""
    if not isinstance(buf, (bytearray, memoryview)):
        return
    n = len(buf)
    if n == 0:
        return
    _lib.sodium_memzero(_ffi.from_buffer(buf), n)


def mlock(buf):
    """Lock memory pages to prevent swapping to disk."""
    if isinstance(buf, (bytearray, memoryview)) and len(buf):
        _lib.sodium_mlock(_ffi.from_buffer(buf), len(buf))


def munlock(buf):
    """Unlock memory pages (also zeros the region)."""
    if isinstance(buf, (bytearray, memoryview)) and len(buf):
        _lib.sodium_munlock(_ffi.from_buffer(buf), len(buf))
