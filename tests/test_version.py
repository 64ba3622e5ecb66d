"""The package version and pyproject.toml must agree."""

from __future__ import annotations

import re
from pathlib import Path

import statefile

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_package_version_is_declared_in_pyproject():
    match = re.search(r'^version = "([^"]+)"$', PYPROJECT.read_text(), re.MULTILINE)
    assert match, "pyproject.toml declares no version"
    assert statefile.__version__ == match.group(1)
