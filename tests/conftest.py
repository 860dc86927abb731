from __future__ import annotations

import sys
from pathlib import Path
from typing import Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def variables() -> Mapping[str, str]:
    return {
        "project-name": "my-app",
        "crate_name": "my_app",
        "authors": "Jane Doe <jane@example.com>",
        "username": "jdoe",
    }
