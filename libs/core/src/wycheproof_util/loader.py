"""Load Wycheproof JSON files from disk.

On Android devices the test runfiles are pushed under a fixed directory, so
relative corpus paths are rewritten with `ANDROID_RUNFILES_PREFIX`. Platform
detection is injected through ``is_android`` so both branches are testable.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from . import _util
from .document import TestVectorDocument
from .errors import TestVectorParseError

log = logging.getLogger(__name__)

ANDROID_RUNFILES_PREFIX = "/sdcard/googletest/test_runfiles/google3/"

PathLike = Union[str, "os.PathLike[str]"]


def resolve_path(path: PathLike, *, is_android: Optional[Callable[[], bool]] = None) -> str:
    """Return the filesystem path `read_json` will open for `path`."""
    predicate = is_android if is_android is not None else _util.is_android
    file_path = os.fspath(path)
    if predicate():
        # TODO: derive the device root from the runner instead of the google3 layout.
        file_path = ANDROID_RUNFILES_PREFIX + file_path
    return file_path


def read_json(path: PathLike, *, is_android: Optional[Callable[[], bool]] = None) -> TestVectorDocument:
    """Read and parse a test-vector file.

    Raises FileNotFoundError/OSError when the file cannot be read and
    TestVectorParseError when it is not UTF-8 JSON with an object at the top.
    """
    file_path = resolve_path(path, is_android=is_android)
    log.debug("Reading test vectors from %s", file_path)

    raw = Path(file_path).read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TestVectorParseError(file_path, f"not UTF-8 ({exc.reason})") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TestVectorParseError(file_path, str(exc)) from exc
    if not isinstance(data, dict):
        raise TestVectorParseError(file_path, f"top-level value is {type(data).__name__}, not an object")
    return TestVectorDocument(data, file_path)


__all__ = ["ANDROID_RUNFILES_PREFIX", "resolve_path", "read_json"]
