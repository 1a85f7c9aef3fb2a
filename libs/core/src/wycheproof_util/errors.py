from __future__ import annotations
from typing import Optional

"""Exception types raised by the test-vector helpers.

Each class also derives from the closest builtin so callers can keep using
plain ``except KeyError`` / ``except ValueError`` clauses.
"""


class WycheproofError(Exception):
    """Base class for errors raised by this package."""


class UnknownAlgorithmError(WycheproofError, LookupError):
    """An algorithm, digest or curve name is not recognised."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownCurveError(UnknownAlgorithmError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown curve name: {name}", name)


class MissingFieldError(WycheproofError, KeyError):
    """A required field is absent from a test-vector document."""

    def __init__(self, field: str, path: Optional[str] = None) -> None:
        super().__init__(field)
        self.field = field
        self.path = path

    def __str__(self) -> str:
        where = f" in {self.path}" if self.path else ""
        return f"Missing field {self.field!r}{where}"


class FieldTypeError(WycheproofError, TypeError):
    """A field exists but holds the wrong JSON type."""

    def __init__(self, field: str, expected: str, actual: object, path: Optional[str] = None) -> None:
        where = f" in {path}" if path else ""
        super().__init__(
            f"Field {field!r}{where} should be {expected}, got {type(actual).__name__}"
        )
        self.field = field
        self.path = path


class TestVectorParseError(WycheproofError, ValueError):
    """A test-vector file is not UTF-8 encoded JSON holding an object."""

    __test__ = False  # keep pytest from collecting this as a test class

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot parse test vectors from {path}: {reason}")
        self.path = path


__all__ = [
    "WycheproofError",
    "UnknownAlgorithmError",
    "UnknownCurveError",
    "MissingFieldError",
    "FieldTypeError",
    "TestVectorParseError",
]
