# Copyright (c) 2026 Signer — MIT License

"""Test suite for OKP key records and the JWK map codec.

Covers:
    - Key record length validation and value semantics
    - Secret wiping
    - JWK decode: tag checks, base64url, exact byte lengths, passthrough
    - JWK encode: field order for secret, public and thumbprint maps
    - Round trips for both curves

Run from the repository root:
    python -m tools.test_jwk_map
"""

import os
import sys
import unittest

# Ensure project root is on the import path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from okp.curves import ED448_CURVE, ED25519PH_CURVE
from okp.errors import InvalidKeyFormat, OKPError
from okp.jwk_map import (
    b64url_decode, b64url_encode,
    from_map, to_map, to_public_map, to_thumbprint_map,
)
from okp.key import OKPKey
from okp.kty import ED448, ED25519PH

_CURVES = (ED25519PH_CURVE, ED448_CURVE)


def _public_map(curve, pk, **extra):
    fields = {"kty": "OKP", "crv": curve.name, "x": b64url_encode(pk)}
    fields.update(extra)
    return fields


class TestOKPKey(unittest.TestCase):
    """Record construction and lifetime."""

    def test_accepts_exact_lengths(self):
        for curve in _CURVES:
            pub = OKPKey(curve, b"\x01" * curve.pk_bytes)
            self.assertTrue(pub.is_public_only)
            self.assertIsNone(pub.secret)
            sec = OKPKey(curve, b"\x02" * curve.secret_bytes + b"\x03" * curve.pk_bytes)
            self.assertTrue(sec.is_secret)
            self.assertEqual(sec.secret, b"\x02" * curve.secret_bytes)
            self.assertEqual(sec.public, b"\x03" * curve.pk_bytes)

    def test_rejects_every_other_length(self):
        for curve in _CURVES:
            for n in range(0, curve.sk_bytes + 3):
                if n in (curve.pk_bytes, curve.sk_bytes):
                    continue
                with self.assertRaises(InvalidKeyFormat, msg=f"{curve.name} n={n}"):
                    OKPKey(curve, b"\x00" * n)

    def test_ed25519ph_length_is_not_ed448_length(self):
        with self.assertRaises(InvalidKeyFormat):
            OKPKey(ED25519PH_CURVE, b"\x00" * 57)
        with self.assertRaises(InvalidKeyFormat):
            OKPKey(ED448_CURVE, b"\x00" * 64)

    def test_rejects_non_bytes(self):
        with self.assertRaises(InvalidKeyFormat):
            OKPKey(ED25519PH_CURVE, "a" * 32)

    def test_equality(self):
        a = OKPKey(ED25519PH_CURVE, b"\x05" * 32)
        b = OKPKey(ED25519PH_CURVE, bytearray(b"\x05" * 32))
        c = OKPKey(ED25519PH_CURVE, b"\x06" * 32)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_record_is_independent_of_source_buffer(self):
        src = bytearray(b"\x07" * 32)
        key = OKPKey(ED25519PH_CURVE, src)
        src[0] = 0
        self.assertEqual(key.raw, b"\x07" * 32)

    def test_wipe(self):
        key, _ = ED25519PH.generate_key()
        with key:
            self.assertTrue(key.is_secret)
        with self.assertRaises(ValueError):
            key.raw
        key.wipe()  # idempotent

    def test_wipe_zeroes_buffer(self):
        key, _ = ED448.generate_key(b"\x11" * 57)
        buf = key._buf
        key.wipe()
        self.assertEqual(buf, bytearray(ED448_CURVE.sk_bytes))

    def test_accessors_return_copies(self):
        key, _ = ED25519PH.generate_key(b"\x22" * 32)
        secret = key.secret
        self.assertIsInstance(secret, bytes)
        key.wipe()
        # Copies handed out earlier are the caller's to drop
        self.assertEqual(secret, b"\x22" * 32)

    def test_equality_of_mixed_lengths(self):
        pub = OKPKey(ED25519PH_CURVE, b"\x01" * 32)
        sec = OKPKey(ED25519PH_CURVE, b"\x01" * 64)
        self.assertNotEqual(pub, sec)

    def test_repr_hides_secret(self):
        key, _ = ED448.generate_key(b"\x11" * 57)
        text = repr(key)
        self.assertIn("Ed448", text)
        self.assertNotIn("11" * 4, text)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidKeyFormat, ValueError))
        self.assertTrue(issubclass(InvalidKeyFormat, OKPError))


class TestBase64url(unittest.TestCase):

    def test_unpadded_output(self):
        self.assertEqual(b64url_encode(b"\xfb\xff"), "-_8")

    def test_padding_optional_on_input(self):
        self.assertEqual(b64url_decode("-_8"), b"\xfb\xff")
        self.assertEqual(b64url_decode("-_8="), b"\xfb\xff")

    def test_rejects_standard_alphabet(self):
        with self.assertRaises(ValueError):
            b64url_decode("+/8")

    def test_rejects_impossible_length(self):
        with self.assertRaises(ValueError):
            b64url_decode("A")


class TestFromMap(unittest.TestCase):
    """JWK map decoding."""

    def test_public_zero_key(self):
        fields = _public_map(ED25519PH_CURVE, b"\x00" * 32)
        key, rest = from_map(ED25519PH_CURVE, fields)
        self.assertTrue(key.is_public_only)
        self.assertEqual(key.public, b"\x00" * 32)
        self.assertEqual(rest, {})

    def test_secret_is_d_then_x(self):
        for curve in _CURVES:
            d = bytes(range(curve.secret_bytes))
            x = bytes(reversed(range(curve.pk_bytes)))
            fields = _public_map(curve, x, d=b64url_encode(d))
            key, rest = from_map(curve, fields)
            self.assertEqual(key.raw, d + x)
            self.assertEqual(rest, {})

    def test_passthrough_order_preserved(self):
        fields = {
            "kid": "k1",
            "kty": "OKP",
            "use": "sig",
            "crv": "Ed448",
            "x": b64url_encode(b"\x01" * 57),
            "alg": "Ed448",
            "custom": {"nested": [1, 2]},
        }
        _, rest = from_map(ED448_CURVE, fields)
        self.assertEqual(list(rest), ["kid", "use", "alg", "custom"])
        self.assertEqual(rest["custom"], {"nested": [1, 2]})

    def test_input_not_mutated(self):
        fields = _public_map(ED448_CURVE, b"\x01" * 57, kid="a")
        snapshot = dict(fields)
        from_map(ED448_CURVE, fields)
        self.assertEqual(fields, snapshot)

    def test_wrong_kty(self):
        fields = _public_map(ED25519PH_CURVE, b"\x00" * 32)
        fields["kty"] = "EC"
        with self.assertRaisesRegex(InvalidKeyFormat, "kty"):
            from_map(ED25519PH_CURVE, fields)

    def test_wrong_crv(self):
        fields = _public_map(ED25519PH_CURVE, b"\x00" * 32)
        fields["crv"] = "Ed25519"
        with self.assertRaisesRegex(InvalidKeyFormat, "crv"):
            from_map(ED25519PH_CURVE, fields)

    def test_curve_confusion_rejected(self):
        fields = _public_map(ED448_CURVE, b"\x00" * 57)
        with self.assertRaises(InvalidKeyFormat):
            from_map(ED25519PH_CURVE, fields)

    def test_missing_x(self):
        with self.assertRaisesRegex(InvalidKeyFormat, "'x'"):
            from_map(ED448_CURVE, {"kty": "OKP", "crv": "Ed448"})

    def test_non_string_x(self):
        fields = {"kty": "OKP", "crv": "Ed448", "x": b"\x00" * 57}
        with self.assertRaisesRegex(InvalidKeyFormat, "string"):
            from_map(ED448_CURVE, fields)

    def test_x_not_base64url(self):
        fields = {"kty": "OKP", "crv": "Ed448", "x": "not base64!"}
        with self.assertRaises(InvalidKeyFormat):
            from_map(ED448_CURVE, fields)

    def test_wrong_x_length(self):
        for curve in _CURVES:
            for n in (0, curve.pk_bytes - 1, curve.pk_bytes + 1, curve.sk_bytes):
                fields = _public_map(curve, b"\x00" * n)
                with self.assertRaises(InvalidKeyFormat, msg=f"{curve.name} x={n}"):
                    from_map(curve, fields)

    def test_wrong_d_length(self):
        for curve in _CURVES:
            for n in (0, curve.secret_bytes - 1, curve.secret_bytes + 1, curve.sk_bytes):
                fields = _public_map(curve, b"\x00" * curve.pk_bytes,
                                     d=b64url_encode(b"\x00" * n))
                with self.assertRaises(InvalidKeyFormat, msg=f"{curve.name} d={n}"):
                    from_map(curve, fields)

    def test_null_d_is_absent(self):
        fields = _public_map(ED25519PH_CURVE, b"\x00" * 32, d=None, kid="k")
        key, rest = from_map(ED25519PH_CURVE, fields)
        self.assertTrue(key.is_public_only)
        self.assertEqual(rest, {"kid": "k"})

    def test_non_string_d(self):
        for d in (5, b"\x00" * 32, ["d"]):
            fields = _public_map(ED25519PH_CURVE, b"\x00" * 32, d=d)
            with self.assertRaisesRegex(InvalidKeyFormat, "string", msg=repr(d)):
                from_map(ED25519PH_CURVE, fields)


class TestToMap(unittest.TestCase):
    """JWK map encoding and field order."""

    def test_secret_field_order(self):
        key, _ = ED25519PH.generate_key(b"\x09" * 32)
        out = to_map(key, {"kid": "abc", "use": "sig"})
        self.assertEqual(list(out), ["crv", "d", "kty", "x", "kid", "use"])
        self.assertEqual(out["crv"], "Ed25519ph")
        self.assertEqual(out["kty"], "OKP")
        self.assertEqual(b64url_decode(out["d"]), b"\x09" * 32)
        self.assertEqual(b64url_decode(out["x"]), key.public)

    def test_public_field_order(self):
        key = OKPKey(ED448_CURVE, b"\x04" * 57)
        out = to_map(key, {"kid": "abc"})
        self.assertEqual(list(out), ["crv", "kty", "x", "kid"])

    def test_existing_fields_overwritten_not_duplicated(self):
        key = OKPKey(ED448_CURVE, b"\x04" * 57)
        out = to_map(key, {"x": "stale", "kid": "abc", "crv": "stale", "d": "stale"})
        self.assertEqual(list(out), ["crv", "kty", "x", "kid"])
        self.assertEqual(out["x"], b64url_encode(b"\x04" * 57))

    def test_input_not_mutated(self):
        key, _ = ED448.generate_key()
        fields = {"kid": "abc"}
        to_map(key, fields)
        to_public_map(key, fields)
        to_thumbprint_map(key, fields)
        self.assertEqual(fields, {"kid": "abc"})

    def test_public_map_never_has_d(self):
        key, _ = ED448.generate_key()
        out = to_public_map(key, {"use": "sig"})
        self.assertNotIn("d", out)
        self.assertEqual(list(out), ["crv", "kty", "x", "use"])

    def test_thumbprint_map_exact_members(self):
        for curve in _CURVES:
            sec = OKPKey(curve, b"\x01" * curve.sk_bytes)
            pub = OKPKey(curve, b"\x01" * curve.pk_bytes)
            for key in (sec, pub):
                out = to_thumbprint_map(key, {"kid": "x", "alg": curve.name, "d": "y"})
                self.assertEqual(list(out), ["crv", "kty", "x"])


class TestRoundTrip(unittest.TestCase):

    def test_secret_round_trip(self):
        for kty in (ED25519PH, ED448):
            key, _ = kty.generate_key()
            decoded, rest = kty.from_map(kty.to_map(key, {}))
            self.assertEqual(decoded, key)
            self.assertTrue(decoded.is_secret)
            self.assertEqual(rest, {})

    def test_public_round_trip(self):
        for kty in (ED25519PH, ED448):
            key, _ = kty.generate_key()
            decoded, _ = kty.from_map(kty.to_public_map(key, {}))
            self.assertTrue(decoded.is_public_only)
            self.assertEqual(decoded.public, key.public)

    def test_round_trip_keeps_passthrough(self):
        key, _ = ED448.generate_key()
        fields = {"kid": "k", "use": "sig", "alg": "Ed448"}
        _, rest = ED448.from_map(ED448.to_map(key, fields))
        self.assertEqual(list(rest.items()), list(fields.items()))


if __name__ == "__main__":
    unittest.main(verbosity=2)
