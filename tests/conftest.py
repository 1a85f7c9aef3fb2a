from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
CORE_SRC = ROOT / "libs" / "core" / "src"
if str(CORE_SRC) not in sys.path:
    sys.path.insert(0, str(CORE_SRC))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def ecdsa_vectors_path() -> Path:
    return DATA_DIR / "ecdsa_secp384r1_sha512_test.json"


@pytest.fixture
def write_vectors(tmp_path):
    """Write a dict as a JSON vector file under tmp_path and return its path."""

    def _write(data: Dict[str, Any], name: str = "vectors.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
