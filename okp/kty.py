# Copyright (c) 2026 Signer — MIT License

"""OKP Edwards-curve key types: generation, signing and algorithm selection.

``OKPKeyType`` bundles the JWK map codec, the OpenSSH codec and the
signing operations for one curve. ``ED25519PH`` and ``ED448`` are the two
ready-made instances; both run the same code and differ only in their
curve descriptor.

Signing requires a secret-bearing key. Verification works with either
kind; a secret-bearing key re-derives its public key through the curve
collaborator rather than trusting the stored public half.
"""

import logging

from . import jwk_map, ssh
from .curves import ED448_CURVE, ED25519PH_CURVE
from .errors import (
    InvalidKeyFormat,
    InvalidSecretLength,
    SigningNotSupported,
    UnsupportedAlgorithm,
)
from .key import OKPKey

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


# ── Raw tuple form ─────────────────────────────────────────────────

def from_okp(curve, okp):
    """Build a key from ``(curve_name, raw_bytes)``.

    Returns:
        (OKPKey, {}) tuple.

    Raises:
        InvalidKeyFormat: On a wrong curve name or byte length.
    """
    if (not isinstance(okp, (tuple, list)) or len(okp) != 2
            or okp[0] != curve.name or not isinstance(okp[1], _BYTES_TYPES)):
        raise InvalidKeyFormat(f"'okp' must be a tuple in the form ({curve.name!r}, bytes)")
    return OKPKey(curve, okp[1]), {}


def to_okp(key):
    return (key.curve.name, key.raw)


# ── Generation ─────────────────────────────────────────────────────

def _secret_from_params(curve, params):
    """Pick the secret out of None, raw bytes, or ("okp", name[, secret])."""
    if params is None or isinstance(params, _BYTES_TYPES):
        return params
    if isinstance(params, tuple) and len(params) in (2, 3) and params[0] == "okp":
        if params[1] != curve.name:
            raise UnsupportedAlgorithm(f"cannot generate {params[1]!r} key as {curve.name}")
        return params[2] if len(params) == 3 else None
    raise InvalidSecretLength(
        f"'secret' must be None or bytes of length {curve.secret_bytes}"
    )


def generate_key(curve, params=None):
    """Generate a secret-bearing key, randomly or from a given secret.

    Args:
        curve: Curve descriptor.
        params: None, a ``secret_bytes``-long secret, or a tuple
            ``("okp", curve_name)`` / ``("okp", curve_name, secret)``.

    Returns:
        (OKPKey, {}) tuple.

    Raises:
        InvalidSecretLength: If the secret has the wrong type or size.
        UnsupportedAlgorithm: If the tuple names another curve.
    """
    secret = _secret_from_params(curve, params)
    if secret is not None and (not isinstance(secret, _BYTES_TYPES)
                               or len(secret) != curve.secret_bytes):
        raise InvalidSecretLength(
            f"'secret' must be None or bytes of length {curve.secret_bytes}"
        )

    sk, _ = curve.ops.keypair(None if secret is None else bytes(secret))
    logger.debug("Generated %s key (%s secret)", curve.name,
                 "random" if secret is None else "supplied")
    return from_okp(curve, (curve.name, sk))


def regenerate_key(key, fields):
    """Fresh random key on the same curve; ``kid`` is dropped from ``fields``."""
    new_key, other_fields = generate_key(key.curve, ("okp", key.curve.name))
    merged = {k: v for k, v in fields.items() if k != "kid"}
    merged.update(other_fields)
    return new_key, merged


# ── Sign / verify ──────────────────────────────────────────────────

def _check_alg(curve, alg):
    if alg is not None and alg != curve.name:
        raise UnsupportedAlgorithm(f"'alg' must be {curve.name!r}, got {alg!r}")


def sign(key, message, alg=None):
    """Sign ``message`` with a secret-bearing key.

    Raises:
        UnsupportedAlgorithm: If ``alg`` is given and is not the curve name.
        SigningNotSupported: If ``key`` is public-only.
        TypeError: If ``message`` is not bytes.
    """
    curve = key.curve
    _check_alg(curve, alg)
    if not isinstance(message, _BYTES_TYPES):
        raise TypeError("message must be bytes")
    if not key.is_secret:
        raise SigningNotSupported(f"{curve.name} public key cannot be used for signing")
    return curve.ops.sign(message, key.raw)


def verify(key, message, signature, alg=None):
    """Check ``signature`` over ``message``.

    Returns:
        True if the signature is valid, False otherwise.

    Raises:
        UnsupportedAlgorithm: If ``alg`` is given and is not the curve name.
        TypeError: If ``message`` or ``signature`` is not bytes.
    """
    curve = key.curve
    _check_alg(curve, alg)
    if not isinstance(signature, _BYTES_TYPES):
        raise TypeError("signature must be bytes")
    if not isinstance(message, _BYTES_TYPES):
        raise TypeError("message must be bytes")
    if key.is_secret:
        pk = curve.ops.secret_to_public(key.raw)
    else:
        pk = key.public
    return curve.ops.verify(signature, message, pk)


def _requested_alg(fields):
    if fields and fields.get("use") == "sig" and fields.get("alg") is not None:
        return fields["alg"]
    return None


def select_algorithm_for_signing(key, fields=None):
    """Algorithm to sign with: the ``alg`` of a ``use: sig`` key, else the curve's.

    The ``alg`` override is echoed as given.

    Raises:
        SigningNotSupported: If ``key`` is public-only.
    """
    if not key.is_secret:
        raise SigningNotSupported("signing not supported for public keys")
    alg = _requested_alg(fields)
    return key.curve.name if alg is None else alg


def select_algorithms_for_verifying(curve, fields=None):
    """One-element list of acceptable algorithms, same rule as for signing."""
    alg = _requested_alg(fields)
    return [curve.name if alg is None else alg]


# ── Per-curve adapter ──────────────────────────────────────────────

class OKPKeyType:
    """All OKP operations for a single curve."""

    def __init__(self, curve):
        self.curve = curve

    def __repr__(self):
        return f"OKPKeyType({self.curve.name})"

    # JWK map
    def from_map(self, fields):
        return jwk_map.from_map(self.curve, fields)

    def to_map(self, key, fields):
        self._own(key)
        return jwk_map.to_map(key, fields)

    def to_public_map(self, key, fields):
        self._own(key)
        return jwk_map.to_public_map(key, fields)

    def to_thumbprint_map(self, key, fields):
        self._own(key)
        return jwk_map.to_thumbprint_map(key, fields)

    # OpenSSH
    def from_openssh_key(self, key):
        return ssh.from_openssh_key(self.curve, key)

    def to_openssh_key(self, key, fields):
        self._own(key)
        return ssh.to_openssh_key(key, fields)

    # Raw tuple
    def from_okp(self, okp):
        return from_okp(self.curve, okp)

    def to_okp(self, key):
        self._own(key)
        return to_okp(key)

    # Keys and signatures
    def generate_key(self, params=None):
        return generate_key(self.curve, params)

    def regenerate_key(self, key, fields):
        self._own(key)
        return regenerate_key(key, fields)

    def sign(self, key, message, alg=None):
        self._own(key)
        return sign(key, message, alg)

    def verify(self, key, message, signature, alg=None):
        self._own(key)
        return verify(key, message, signature, alg)

    def select_algorithm_for_signing(self, key, fields=None):
        self._own(key)
        return select_algorithm_for_signing(key, fields)

    def select_algorithms_for_verifying(self, fields=None):
        return select_algorithms_for_verifying(self.curve, fields)

    def _own(self, key):
        if key.curve != self.curve:
            raise UnsupportedAlgorithm(
                f"{key.curve.name} key passed to {self.curve.name} key type"
            )


ED25519PH = OKPKeyType(ED25519PH_CURVE)
ED448 = OKPKeyType(ED448_CURVE)
