# Copyright (c) 2026 Signer — MIT License

"""Exceptions raised by the OKP key-type adapter.

Every error is an input-validation failure raised at the boundary call
(decode, generate, sign, export). No operation ever returns a partially
built key. All of them subclass ``ValueError`` so callers that already
guard crypto calls with ``except ValueError`` keep working.
"""


class OKPError(Exception):
    """Base class for all OKP adapter errors."""


class InvalidKeyFormat(OKPError, ValueError):
    """Wrong kty/crv tag, missing or non-string ``x``, or bad byte length."""


class InvalidSecretLength(OKPError, ValueError):
    """Secret supplied for key generation has the wrong size."""


class UnrecognizedKeyType(OKPError, ValueError):
    """OpenSSH key type does not match the curve, or bad secret length."""


class SigningNotSupported(OKPError, ValueError):
    """Signing requested with a public-only key."""


class PublicKeyCannotExport(OKPError, ValueError):
    """OpenSSH private key export requested with a public-only key."""


class UnsupportedAlgorithm(OKPError, ValueError):
    """Algorithm tag is not the curve's own."""
