# Copyright (c) 2026 Signer — MIT License

"""JWK map codec for OKP Edwards-curve keys (RFC 8037).

Converts between an ``OKPKey`` and a JSON key map. Field order is part of
the contract because it decides the serialized JSON layout:

    secret key:   crv, d, kty, x, <passthrough fields>
    public key:   crv, kty, x, <passthrough fields>
    thumbprint:   crv, kty, x

Every function returns a new dict and leaves its ``fields`` argument alone.
Base64url values are written without padding; padding is accepted on input.
"""

import base64
import binascii
import logging
import re

from ._secmem import secure_zero
from .errors import InvalidKeyFormat
from .key import OKPKey

logger = logging.getLogger(__name__)

KTY = "OKP"

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


# ── Base64url ──────────────────────────────────────────────────────

def b64url_encode(data):
    """Unpadded base64url (RFC 7515 Section 2)."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def b64url_decode(value):
    """Decode base64url with optional padding.

    Raises:
        ValueError: If ``value`` is not a well-formed base64url string.
    """
    if not _B64URL_RE.fullmatch(value):
        raise ValueError("not a base64url string")
    stripped = value.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as exc:
        raise ValueError(f"not a base64url string: {exc}") from exc


def _decode_field(curve, fields, name, size):
    value = fields[name]
    if not isinstance(value, str):
        raise InvalidKeyFormat(f"invalid 'OKP' crv '{curve.name}' JWK: '{name}' must be a string")
    try:
        data = b64url_decode(value)
    except ValueError as exc:
        raise InvalidKeyFormat(
            f"invalid 'OKP' crv '{curve.name}' JWK: '{name}' is not base64url"
        ) from exc
    if len(data) != size:
        raise InvalidKeyFormat(
            f"invalid 'OKP' crv '{curve.name}' JWK: '{name}' must decode to "
            f"{size} bytes, got {len(data)}"
        )
    return data


def _without(fields, *names):
    return {k: v for k, v in fields.items() if k not in names}


# ── Decode ─────────────────────────────────────────────────────────

def from_map(curve, fields):
    """Decode a JWK map into a key.

    Args:
        curve: Curve descriptor the map must name.
        fields: Mapping with ``kty``, ``crv``, ``x`` and optionally ``d``.
            A ``d`` of None (JSON null) counts as absent.

    Returns:
        (OKPKey, remaining) tuple. ``remaining`` holds every field other than
        kty/crv/x/d in its original order.

    Raises:
        InvalidKeyFormat: On a wrong tag, a missing field, or a bad length.
    """
    if fields.get("kty") != KTY:
        raise InvalidKeyFormat(f"invalid 'OKP' crv '{curve.name}' JWK: 'kty' must be 'OKP'")
    if fields.get("crv") != curve.name:
        raise InvalidKeyFormat(
            f"invalid 'OKP' crv '{curve.name}' JWK: 'crv' must be '{curve.name}'"
        )
    if "x" not in fields:
        raise InvalidKeyFormat(f"invalid 'OKP' crv '{curve.name}' JWK: missing 'x'")

    pk = _decode_field(curve, fields, "x", curve.pk_bytes)
    if fields.get("d") is None:
        return OKPKey(curve, pk), _without(fields, "kty", "crv", "x", "d")

    raw = bytearray(_decode_field(curve, fields, "d", curve.secret_bytes)) + pk
    try:
        key = OKPKey(curve, raw)
    finally:
        secure_zero(raw)
    logger.debug("Decoded %s secret key from JWK map", curve.name)
    return key, _without(fields, "kty", "crv", "x", "d")


# ── Encode ─────────────────────────────────────────────────────────

def to_map(key, fields):
    """Encode a key as a JWK map; ``d`` is present only for secret keys."""
    curve = key.curve
    out = {"crv": curve.name}
    if key.is_secret:
        out["d"] = b64url_encode(key.secret)
    out["kty"] = KTY
    out["x"] = b64url_encode(key.public)
    out.update(_without(fields, "crv", "d", "kty", "x"))
    return out


def to_public_map(key, fields):
    """Encode a key as a JWK map with ``d`` always left out."""
    return _without(to_map(key, fields), "d")


def to_thumbprint_map(key, fields):
    """Required members for the RFC 7638 thumbprint: crv, kty, x only."""
    public = to_public_map(key, fields)
    return {k: public[k] for k in ("crv", "kty", "x")}
