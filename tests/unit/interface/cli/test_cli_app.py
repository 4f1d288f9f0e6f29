from __future__ import annotations

"""
Unit tests for the CLI application controller.

The controller is called in-process; the build output lives in tmp_path.
"""

import json
from pathlib import Path

import pytest

from wbmetajson.infra.logging import shutdown_logging
from wbmetajson.interface.cli.app import main


@pytest.fixture(autouse=True)
def reset_logging():
    """Each run configures logging against the current capture streams."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    dist = tmp_path / "dist"
    (dist / "a" / "b").mkdir(parents=True)
    (dist / "a" / "one.js").write_text("// @description first\n", encoding="utf-8")
    (dist / "a" / "b" / "two.js").write_text("code", encoding="utf-8")
    return dist


def test_missing_package_is_a_usage_error(dist_dir: Path) -> None:
    assert main(["-i", str(dist_dir)]) == 2
    assert not (dist_dir / "meta.json").exists()


def test_missing_input_directory(tmp_path: Path) -> None:
    assert main(["-i", str(tmp_path / "nowhere"), "--package", "toolbox"]) == 2


def test_invalid_config_file(tmp_path: Path, dist_dir: Path) -> None:
    bad = tmp_path / "options.json"
    bad.write_text("{not json", encoding="utf-8")

    assert main(["-i", str(dist_dir), "-c", str(bad)]) == 2


def test_generation_writes_documents(dist_dir: Path) -> None:
    assert main(["-i", str(dist_dir), "--package", "toolbox"]) == 0

    root = json.loads((dist_dir / "meta.json").read_text(encoding="utf-8"))
    assert root["name"] == "toolbox"
    assert (dist_dir / "a" / "meta.json").exists()
    assert (dist_dir / "a" / "b" / "meta.json").exists()


def test_config_file_and_overrides(tmp_path: Path, dist_dir: Path) -> None:
    options = tmp_path / "options.json"
    options.write_text(json.dumps({
        "package": "from-file",
        "folderDescriptionList": [{"path": "/a", "description": "Letter A"}],
    }), encoding="utf-8")

    assert main(["-i", str(dist_dir), "-c", str(options), "--package", "from-cli"]) == 0

    assert json.loads((dist_dir / "meta.json").read_text(encoding="utf-8"))["name"] == "from-cli"
    a = json.loads((dist_dir / "a" / "meta.json").read_text(encoding="utf-8"))
    assert a["description"] == "Letter A"


def test_dry_run_writes_nothing(dist_dir: Path, capsys) -> None:
    assert main(["-i", str(dist_dir), "--package", "toolbox", "--dry-run", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["summary"]["dry_run"] is True
    assert len(payload["meta_documents"]) == 3
    assert not (dist_dir / "meta.json").exists()


def test_dump_config(dist_dir: Path, capsys) -> None:
    assert main(["-i", str(dist_dir), "--package", "toolbox", "--dump-config"]) == 0

    options = json.loads(capsys.readouterr().out)
    assert options["package"] == "toolbox"
    assert options["outputDir"] == "dist"


def test_icons_land_in_the_output_directory(tmp_path: Path, dist_dir: Path) -> None:
    (tmp_path / "box.png").write_bytes(b"box")

    assert main(["-i", str(dist_dir), "--package", "toolbox", "--icon", "box.png"]) == 0

    icon_ref = json.loads((dist_dir / "meta.json").read_text(encoding="utf-8"))["icon"]
    assert icon_ref.startswith("icons/box")
    assert (dist_dir / icon_ref).read_bytes() == b"box"


def test_missing_icon_fails_with_exit_code_1(dist_dir: Path) -> None:
    assert main(["-i", str(dist_dir), "--package", "toolbox", "--icon", "nowhere.png"]) == 1
    assert not (dist_dir / "meta.json").exists()
