from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from wycheproof_util import CurveType, UnknownAlgorithmError, UnknownCurveError, get_curve_type


def test_p384_and_p521_names():
    assert get_curve_type("secp384r1") is CurveType.NIST_P384
    assert get_curve_type("secp521r1") is CurveType.NIST_P521


def test_p256_only_accepts_transposed_literal():
    # The imported vectors spell P-256 as "sepcp256r1"; the standard spelling is rejected.
    assert get_curve_type("sepcp256r1") is CurveType.NIST_P256
    with pytest.raises(UnknownCurveError):
        get_curve_type("secp256r1")


@pytest.mark.parametrize("name", ["", "prime256v1", "SECP384R1", "secp256k1", "brainpoolP256r1"])
def test_unknown_curve_names_fail_loudly(name):
    with pytest.raises(UnknownCurveError) as excinfo:
        get_curve_type(name)
    assert excinfo.value.name == name
    assert str(excinfo.value) == f"Unknown curve name: {name}"


def test_unknown_curve_is_an_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        get_curve_type("curve25519")
    with pytest.raises(LookupError):
        get_curve_type("curve25519")


@pytest.mark.parametrize(
    "curve_type, ec_cls, bits",
    [
        (CurveType.NIST_P256, ec.SECP256R1, 256),
        (CurveType.NIST_P384, ec.SECP384R1, 384),
        (CurveType.NIST_P521, ec.SECP521R1, 521),
    ],
)
def test_curve_type_maps_to_cryptography_curve(curve_type, ec_cls, bits):
    assert isinstance(curve_type.to_curve(), ec_cls)
    assert curve_type.key_size == bits
