from __future__ import annotations

"""
Unit tests for the README Copy Service.
"""

from pathlib import Path

import pytest

from wbmetajson.core.services.readme import load_readme


def test_readme_is_loaded_verbatim(tmp_path: Path) -> None:
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "README.md").write_bytes(b"# Toolbox\r\nUsage notes")

    output_path, content = load_readme(str(tmp_path), "docs/README.md")

    assert output_path == "README.md"
    assert content == b"# Toolbox\r\nUsage notes"


def test_missing_readme_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_readme(str(tmp_path), "README.md")
