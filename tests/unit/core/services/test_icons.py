from __future__ import annotations

"""
Unit tests for the Icon Materialization Service.

Verifies reference rewriting, remote passthrough, single reads per
reference, and the cleanup of icons left by a previous run.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from wbmetajson.core.services.icons import (
    clean_icons_output,
    is_remote_reference,
    materialize_icon_reference,
    materialize_icons,
)
from wbmetajson.domain.config import FolderAnnotation, GeneratorConfig


@pytest.fixture
def icon_context(tmp_path: Path) -> Path:
    """Compilation root holding two local icons."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "box.png").write_bytes(b"\x89PNG-box")
    (assets / "folder.svg").write_bytes(b"<svg/>")
    return tmp_path


def _tokens():
    counter = iter(range(1, 100))
    return lambda: f"-tok{next(counter)}"


def test_reference_rewriting_is_pure() -> None:
    assert materialize_icon_reference("/assets/box.png", "-abc") == "icons/box-abc.png"
    assert materialize_icon_reference("assets/box.png", "-abc") == "icons/box-abc.png"
    assert materialize_icon_reference("box", "-abc") == "icons/box-abc"


@pytest.mark.parametrize("reference", [
    "http://cdn.example.com/a.png",
    "https://cdn.example.com/a.png",
    "HTTPS://CDN.EXAMPLE.COM/A.PNG",
])
def test_remote_references_detected(reference: str) -> None:
    assert is_remote_reference(reference) is True


def test_local_references_not_remote() -> None:
    assert is_remote_reference("/assets/box.png") is False
    assert is_remote_reference(None) is False
    assert is_remote_reference("") is False


def test_local_icons_are_read_and_rewritten(icon_context: Path) -> None:
    cfg = GeneratorConfig(
        package="toolbox",
        package_icon="/assets/box.png",
        folder_description_list=(
            FolderAnnotation(path="/a", icon_path="/assets/folder.svg"),
            FolderAnnotation(path="/b", description="no icon"),
        ),
    )

    new_cfg, icons = materialize_icons(cfg, str(icon_context), token_factory=_tokens())

    assert new_cfg.package_icon == "icons/box-tok1.png"
    assert new_cfg.folder_description_list[0].icon_path == "icons/folder-tok2.svg"
    assert new_cfg.folder_description_list[1].icon_path is None
    assert [(i.path, i.content) for i in icons] == [
        ("icons/box-tok1.png", b"\x89PNG-box"),
        ("icons/folder-tok2.svg", b"<svg/>"),
    ]
    # The original configuration is untouched
    assert cfg.package_icon == "/assets/box.png"


def test_shared_reference_is_read_once(icon_context: Path) -> None:
    cfg = GeneratorConfig(
        package="toolbox",
        folder_description_list=(
            FolderAnnotation(path="/a", icon_path="/assets/folder.svg"),
            FolderAnnotation(path="/b", icon_path="/assets/folder.svg"),
        ),
    )

    with patch("wbmetajson.core.services.icons.read_binary_file", return_value=b"x") as reader:
        new_cfg, icons = materialize_icons(cfg, str(icon_context), token_factory=_tokens())

    assert reader.call_count == 1
    assert len(icons) == 1
    assert new_cfg.folder_description_list[0].icon_path == new_cfg.folder_description_list[1].icon_path


def test_remote_icons_pass_through_without_reads(tmp_path: Path) -> None:
    cfg = GeneratorConfig(
        package="toolbox",
        package_icon="https://cdn.example.com/box.png",
        folder_description_list=(FolderAnnotation(path="/a", icon_path="http://cdn.example.com/a.png"),),
    )

    with patch("wbmetajson.core.services.icons.read_binary_file") as reader:
        new_cfg, icons = materialize_icons(cfg, str(tmp_path))

    reader.assert_not_called()
    assert icons == []
    assert new_cfg == cfg


def test_default_tokens_are_unique(icon_context: Path) -> None:
    cfg = GeneratorConfig(package="toolbox", package_icon="/assets/box.png")

    first, _ = materialize_icons(cfg, str(icon_context))
    second, _ = materialize_icons(cfg, str(icon_context))

    assert first.package_icon.startswith("icons/box")
    assert first.package_icon.endswith(".png")
    assert first.package_icon != second.package_icon


def test_missing_local_icon_raises(tmp_path: Path) -> None:
    cfg = GeneratorConfig(package="toolbox", package_icon="/assets/missing.png")

    with pytest.raises(OSError):
        materialize_icons(cfg, str(tmp_path))


def test_clean_icons_output(tmp_path: Path) -> None:
    stale = tmp_path / "dist" / "icons"
    stale.mkdir(parents=True)
    (stale / "old-123.png").write_bytes(b"old")

    assert clean_icons_output(str(tmp_path), "dist") is True
    assert not stale.exists()
    assert (tmp_path / "dist").exists()
    assert clean_icons_output(str(tmp_path), "dist") is False
