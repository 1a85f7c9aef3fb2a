from __future__ import annotations

import logging
from dataclasses import dataclass

from .document import TestVectorDocument

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConformanceReport:
    """What a test-vector file declares versus what the caller expected."""

    expected_algorithm: str
    algorithm: str
    expected_version: str
    generator_version: str

    @property
    def algorithm_matches(self) -> bool:
        return self.algorithm == self.expected_algorithm

    @property
    def version_matches(self) -> bool:
        return self.generator_version == self.expected_version

    @property
    def ok(self) -> bool:
        return self.algorithm_matches and self.version_matches


def check_alg_and_version(
    testvector: TestVectorDocument,
    expected_algorithm: str,
    expected_version: str,
) -> ConformanceReport:
    """Warn when a test-vector file has an unexpected algorithm or version.

    Mismatches are logged and never raised: corpus updates drift over time and
    the cryptographic assertions that follow still catch real regressions.
    A missing ``algorithm`` or ``generatorVersion`` field does raise.
    """
    algorithm = testvector.get_string("algorithm")
    if algorithm != expected_algorithm:
        log.warning("Expecting algorithm %s, got %s.", expected_algorithm, algorithm)

    generator_version = testvector.get_string("generatorVersion")
    if generator_version != expected_version:
        log.warning(
            "Expecting test vectors with version %s, got vectors with version %s for %s.",
            expected_version,
            generator_version,
            expected_algorithm,
        )

    return ConformanceReport(
        expected_algorithm=expected_algorithm,
        algorithm=algorithm,
        expected_version=expected_version,
        generator_version=generator_version,
    )


__all__ = ["ConformanceReport", "check_alg_and_version"]
