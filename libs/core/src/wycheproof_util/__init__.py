from .conformance import ConformanceReport, check_alg_and_version
from .curves import CurveType, get_curve_type
from .document import TestVectorDocument
from .errors import (
    FieldTypeError,
    MissingFieldError,
    TestVectorParseError,
    UnknownAlgorithmError,
    UnknownCurveError,
    WycheproofError,
)
from .loader import ANDROID_RUNFILES_PREFIX, read_json, resolve_path
from .naming import hash_algorithm, signature_algorithm_name

__all__ = [
    "ConformanceReport",
    "check_alg_and_version",
    "CurveType",
    "get_curve_type",
    "TestVectorDocument",
    "FieldTypeError",
    "MissingFieldError",
    "TestVectorParseError",
    "UnknownAlgorithmError",
    "UnknownCurveError",
    "WycheproofError",
    "ANDROID_RUNFILES_PREFIX",
    "read_json",
    "resolve_path",
    "hash_algorithm",
    "signature_algorithm_name",
]
