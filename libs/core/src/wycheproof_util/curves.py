"""Named elliptic curves referenced by Wycheproof test groups.

Curve names come from the "curve" field of ECDSA/ECDH groups and map onto
`CurveType`, which the `cryptography` EC backend consumes via `to_curve()`.
"""
from __future__ import annotations

import enum
from typing import Dict

from cryptography.hazmat.primitives.asymmetric import ec

from .errors import UnknownCurveError


class CurveType(enum.Enum):
    NIST_P256 = "NIST_P256"
    NIST_P384 = "NIST_P384"
    NIST_P521 = "NIST_P521"

    @property
    def key_size(self) -> int:
        return self.to_curve().key_size

    def to_curve(self) -> ec.EllipticCurve:
        return _EC_CURVES[self]()


_EC_CURVES = {
    CurveType.NIST_P256: ec.SECP256R1,
    CurveType.NIST_P384: ec.SECP384R1,
    CurveType.NIST_P521: ec.SECP521R1,
}

# "sepcp256r1" is the literal the imported vectors use; "secp256r1" is not
# accepted. TODO: confirm against the upstream corpus whether the P-256 key
# should be renamed to "secp256r1".
_CURVE_NAMES: Dict[str, CurveType] = {
    "sepcp256r1": CurveType.NIST_P256,
    "secp384r1": CurveType.NIST_P384,
    "secp521r1": CurveType.NIST_P521,
}


def get_curve_type(curve_name: str) -> CurveType:
    """Map a curve name to its `CurveType`.

    Raises UnknownCurveError for names outside the recognised set.
    """
    try:
        return _CURVE_NAMES[curve_name]
    except KeyError:
        raise UnknownCurveError(curve_name) from None


__all__ = ["CurveType", "get_curve_type"]
