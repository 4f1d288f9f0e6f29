from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for generator options and in-memory compilations.
"""

import json
import os
import sys
from typing import Any, Callable, Dict, Mapping

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from wbmetajson.domain.asset_models import Asset, Compilation  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_options() -> Dict[str, Any]:
    """
    Return a valid option mapping, as a host build configuration would pass it.

    Returns:
        Dict[str, Any]: Raw generator options.
    """
    return {
        "environment": "production",
        "package": "toolbox",
        "packageDescription": "Operator toolbox",
        "packageIcon": "https://cdn.example.com/toolbox.png",
        "sites": ["https://intranet.example.com"],
        "folderDescriptionList": [
            {"path": "/a", "description": "Letter A"},
        ],
    }


@pytest.fixture
def make_compilation(tmp_path) -> Callable[[Mapping[str, str]], Compilation]:
    """Factory building a compilation rooted in a temporary context directory."""

    def _make(files: Mapping[str, str]) -> Compilation:
        return Compilation(
            context=str(tmp_path),
            assets={path: Asset(content) for path, content in files.items()},
        )

    return _make


@pytest.fixture
def read_doc() -> Callable[[Compilation, str], Dict[str, Any]]:
    """Parse a generated meta document from the compilation assets."""

    def _read(compilation: Compilation, path: str) -> Dict[str, Any]:
        return json.loads(compilation.assets[path].source())

    return _read
