# Copyright (c) 2026 Signer — MIT License

"""Curve descriptors for the Edwards-curve OKP key types.

Each descriptor fixes the byte sizes, the JWK ``crv`` name, the OpenSSH key
type string, and the curve collaborator used for keypair/sign/verify. The
rest of the package is written once against these descriptors.
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple

from .ed448 import (
    ED448_PK_SIZE, ED448_SECRET_SIZE,
    ed448_keypair, ed448_secret_to_public, ed448_sign, ed448_verify,
)
from .ed25519ph import (
    ED25519PH_PK_SIZE, ED25519PH_SECRET_SIZE,
    ed25519ph_keypair, ed25519ph_secret_to_public, ed25519ph_sign, ed25519ph_verify,
)


class CurveOps(NamedTuple):
    keypair: Callable
    sign: Callable
    verify: Callable
    secret_to_public: Callable


@dataclass(frozen=True)
class Curve:
    """Fixed facts about one curve.

    Attributes:
        name: JWK ``crv`` value, also the signing algorithm identifier.
        secret_bytes: Size of the secret seed.
        pk_bytes: Size of the encoded public point.
        ssh_type: OpenSSH key type string.
        ops: Curve collaborator.
    """

    name: str
    secret_bytes: int
    pk_bytes: int
    ssh_type: str
    ops: CurveOps

    @property
    def sk_bytes(self):
        return self.secret_bytes + self.pk_bytes

    def __repr__(self):
        return f"Curve({self.name})"


ED25519PH_CURVE = Curve(
    name="Ed25519ph",
    secret_bytes=ED25519PH_SECRET_SIZE,
    pk_bytes=ED25519PH_PK_SIZE,
    ssh_type="ssh-ed25519ph",
    ops=CurveOps(
        keypair=ed25519ph_keypair,
        sign=ed25519ph_sign,
        verify=ed25519ph_verify,
        secret_to_public=ed25519ph_secret_to_public,
    ),
)

ED448_CURVE = Curve(
    name="Ed448",
    secret_bytes=ED448_SECRET_SIZE,
    pk_bytes=ED448_PK_SIZE,
    ssh_type="ssh-ed448",
    ops=CurveOps(
        keypair=ed448_keypair,
        sign=ed448_sign,
        verify=ed448_verify,
        secret_to_public=ed448_secret_to_public,
    ),
)
