"""Algorithm names for digests and signature schemes.

JCA-style names are a bit inconsistent: message digests carry a dash
("SHA-256") while the combined signature names drop it ("SHA256WITHECDSA").
"""
from __future__ import annotations

from typing import Callable, Dict

from cryptography.hazmat.primitives import hashes

from .errors import UnknownAlgorithmError

# Only these digests have a combined signature name; anything else maps to "".
_SIGNATURE_DIGESTS: Dict[str, str] = {
    "SHA-256": "SHA256",
    "SHA-512": "SHA512",
}

# Digest names as they appear in the "sha" field of Wycheproof test groups.
_HASH_FACTORIES: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "SHA-1": hashes.SHA1,
    "SHA-224": hashes.SHA224,
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
    "SHA3-224": hashes.SHA3_224,
    "SHA3-256": hashes.SHA3_256,
    "SHA3-384": hashes.SHA3_384,
    "SHA3-512": hashes.SHA3_512,
}


def signature_algorithm_name(md: str, signature_algorithm: str) -> str:
    """Return e.g. "SHA256WITHECDSA" for ("SHA-256", "ECDSA").

    Digests without a combined name yield an empty string; callers treat that
    as "no applicable signature algorithm" rather than an error.
    """
    digest = _SIGNATURE_DIGESTS.get(md)
    if digest is None:
        return ""
    return digest + "WITH" + signature_algorithm


def hash_algorithm(md: str) -> hashes.HashAlgorithm:
    """Fresh `cryptography` hash instance for a Wycheproof digest name."""
    factory = _HASH_FACTORIES.get(md)
    if factory is None:
        raise UnknownAlgorithmError(f"Unknown hash algorithm: {md}", md)
    return factory()


__all__ = ["signature_algorithm_name", "hash_algorithm"]
