# Copyright (c) 2026 Signer — MIT License

"""OpenSSH codec for OKP Edwards-curve keys.

Decodes the private entry ``(type, pk, sk, comment)`` yielded by
``openssh.from_binary`` and encodes a secret key back into a container.
The key comment travels as the JWK ``kid`` field.
"""

import logging

from .errors import PublicKeyCannotExport, UnrecognizedKeyType
from .key import OKPKey
from .openssh import to_binary

logger = logging.getLogger(__name__)


def _text(value):
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UnrecognizedKeyType(f"openssh field is not UTF-8: {exc}") from None
    return value


def from_openssh_key(curve, key):
    """Decode an OpenSSH private entry.

    Args:
        curve: Curve descriptor the entry must match.
        key: ``(type, pk, sk, comment)``. Only type, sk and comment are used.

    Returns:
        (OKPKey, fields) tuple. ``fields`` is ``{"kid": comment}`` when the
        comment is non-empty, else an empty dict.

    Raises:
        UnrecognizedKeyType: If the type or the secret length does not match,
            or the type or comment is not valid UTF-8.
    """
    key_type, _, sk, comment = key
    key_type = _text(key_type)
    if (key_type != curve.ssh_type or sk is None
            or not isinstance(sk, (bytes, bytearray, memoryview))
            or len(sk) != curve.sk_bytes):
        raise UnrecognizedKeyType(f"unrecognized openssh key type: {key_type!r}")

    comment = _text(comment)
    record = OKPKey(curve, sk)
    if not comment:
        return record, {}
    return record, {"kid": comment}


def to_openssh_key(key, fields):
    """Serialize a secret key as an unencrypted OpenSSH private key.

    Raises:
        PublicKeyCannotExport: If ``key`` holds no secret.
        TypeError: If ``fields["kid"]`` is present and not a string.
    """
    curve = key.curve
    if not key.is_secret:
        raise PublicKeyCannotExport(
            f"{curve.name} public key cannot be exported as an OpenSSH private key"
        )
    comment = fields.get("kid")
    if comment is None:
        comment = ""
    elif not isinstance(comment, str):
        raise TypeError(f"kid must be a string, got {type(comment).__name__}")
    sk = key.raw
    pk = curve.ops.secret_to_public(sk)
    logger.debug("Exporting %s key as OpenSSH private key", curve.name)
    return to_binary([
        [
            (
                (curve.ssh_type, pk),
                (curve.ssh_type, pk, sk, comment),
            )
        ]
    ])
