"""Typed read access to a parsed Wycheproof test-vector file.

A Wycheproof file is a JSON object with a small header (``algorithm``,
``generatorVersion``, ``numberOfTests``, ``header``, ``notes``) and a
``testGroups`` array; each group carries its own parameters plus a ``tests``
array. `TestVectorDocument` wraps any such object (the file itself, a group,
or a single test) and fails with a named error when a field is missing or has
the wrong type.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator, KeysView, List, Mapping, Optional, Tuple

from .errors import FieldTypeError, MissingFieldError


class TestVectorDocument:
    __test__ = False  # keep pytest from collecting this as a test class

    def __init__(self, data: Mapping[str, Any], path: Optional[str] = None) -> None:
        self._data = data
        self.path = path

    def __repr__(self) -> str:
        return f"TestVectorDocument(path={self.path!r}, keys={sorted(self._data)!r})"

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: str) -> Any:
        return self._field(key)

    def keys(self) -> KeysView[str]:
        return self._data.keys()

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._data

    # ---------------- typed accessors ----------------

    def _field(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            raise MissingFieldError(key, self.path) from None

    def get_string(self, key: str) -> str:
        value = self._field(key)
        if not isinstance(value, str):
            raise FieldTypeError(key, "a string", value, self.path)
        return value

    def opt_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if key not in self._data:
            return default
        return self.get_string(key)

    def get_int(self, key: str) -> int:
        value = self._field(key)
        # JSON booleans decode to bool, which is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldTypeError(key, "an integer", value, self.path)
        return value

    def get_object(self, key: str) -> "TestVectorDocument":
        value = self._field(key)
        if not isinstance(value, dict):
            raise FieldTypeError(key, "an object", value, self.path)
        return TestVectorDocument(value, self.path)

    def get_array(self, key: str) -> List[Any]:
        value = self._field(key)
        if not isinstance(value, list):
            raise FieldTypeError(key, "an array", value, self.path)
        return value

    # ---------------- Wycheproof header ----------------

    @property
    def algorithm(self) -> str:
        return self.get_string("algorithm")

    @property
    def generator_version(self) -> str:
        return self.get_string("generatorVersion")

    @property
    def number_of_tests(self) -> Optional[int]:
        if "numberOfTests" not in self._data:
            return None
        return self.get_int("numberOfTests")

    @property
    def header(self) -> List[str]:
        if "header" not in self._data:
            return []
        return [str(line) for line in self.get_array("header")]

    @property
    def notes(self) -> Dict[str, Any]:
        if "notes" not in self._data:
            return {}
        return dict(self.get_object("notes").raw)

    # ---------------- groups and cases ----------------

    def test_groups(self) -> List["TestVectorDocument"]:
        groups = []
        for i, group in enumerate(self.get_array("testGroups")):
            if not isinstance(group, dict):
                raise FieldTypeError(f"testGroups[{i}]", "an object", group, self.path)
            groups.append(TestVectorDocument(group, self.path))
        return groups

    def iter_test_cases(self) -> Iterator[Tuple["TestVectorDocument", "TestVectorDocument"]]:
        """Yield ``(group, test)`` pairs across every test group."""
        for group in self.test_groups():
            for i, test in enumerate(group.get_array("tests")):
                if not isinstance(test, dict):
                    raise FieldTypeError(f"tests[{i}]", "an object", test, self.path)
                yield group, TestVectorDocument(test, self.path)


__all__ = ["TestVectorDocument"]
