# Copyright (c) 2026 Signer — MIT License

"""OKP key types for JSON Web Keys (RFC 8037) on Edwards curves.

Curves:
    Ed25519ph (RFC 8032): prehashed Ed25519, 32-byte secret and public key.
    Ed448     (RFC 8032): pure Ed448, 57-byte secret and public key.

Formats:
    JWK map: {"crv", "d", "kty", "x", ...} with base64url members.
    OpenSSH: unencrypted "openssh-key-v1" private key container.

Each curve is served by an ``OKPKeyType`` (``ED25519PH``, ``ED448``) that
decodes and encodes keys, generates them, and signs and verifies with them.
"""

# Key types
from .kty import ED25519PH, ED448, OKPKeyType
from .key import OKPKey
from .curves import Curve, ED25519PH_CURVE, ED448_CURVE

# Errors
from .errors import (
    OKPError, InvalidKeyFormat, InvalidSecretLength, UnrecognizedKeyType,
    SigningNotSupported, PublicKeyCannotExport, UnsupportedAlgorithm,
)

# Formats
from .openssh import to_binary as openssh_to_binary, from_binary as openssh_from_binary

__all__ = [
    # Key types
    "ED25519PH", "ED448", "OKPKeyType", "OKPKey",
    "Curve", "ED25519PH_CURVE", "ED448_CURVE",
    # Errors
    "OKPError", "InvalidKeyFormat", "InvalidSecretLength", "UnrecognizedKeyType",
    "SigningNotSupported", "PublicKeyCannotExport", "UnsupportedAlgorithm",
    # Formats
    "openssh_to_binary", "openssh_from_binary",
]
