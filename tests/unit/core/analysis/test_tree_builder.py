from __future__ import annotations

"""
Unit tests for the Directory Tree Builder.

Verifies hierarchical reconstruction from flat artifact paths, artifact
filtering, and the merge of folder annotations onto created nodes.
"""

from typing import Dict, List

from wbmetajson.core.analysis.folder_index import build_folder_index
from wbmetajson.core.analysis.tree_builder import build_directory_tree
from wbmetajson.domain.asset_models import Asset
from wbmetajson.domain.config import FolderAnnotation
from wbmetajson.domain.tree_models import FileEntry


def _assets(files: Dict[str, str]) -> Dict[str, Asset]:
    return {path: Asset(content) for path, content in files.items()}


def _build(files: Dict[str, str], folders: List[FolderAnnotation] = (), **kwargs):
    return build_directory_tree(
        _assets(files),
        build_folder_index(folders),
        kwargs.pop("environment", "production"),
        **kwargs,
    )


def test_root_carries_package_annotations() -> None:
    root = _build(
        {},
        package_description="Toolbox",
        package_icon="icons/box.png",
        package_default_action="start",
        sites=["site-a"],
    )

    assert root.path == "/"
    assert root.description == "Toolbox"
    assert root.icon == "icons/box.png"
    assert root.default_action == "start"
    assert root.sites == ["site-a"]
    assert root.files == []
    assert root.children == {}


def test_nested_paths_create_intermediate_nodes() -> None:
    root = _build({
        "/a/one.js": "// @description first\n",
        "/a/b/two.js": "code",
    })

    a = root.children["a"]
    b = a.children["b"]

    assert a.path == "/a/"
    assert b.path == "/a/b/"
    assert a.files == [FileEntry(file_name="one.js", description="first")]
    assert b.files == [FileEntry(file_name="two.js", description="")]


def test_paths_without_leading_slash_are_equivalent() -> None:
    root = _build({"a/one.js": "x"}, [FolderAnnotation(path="/a", description="Letter A")])

    assert root.children["a"].path == "/a/"
    assert root.children["a"].description == "Letter A"


def test_root_level_files_attach_to_root() -> None:
    root = _build({"index.js": "x", "/setup.js": "y"})

    assert [f.file_name for f in root.files] == ["index.js", "setup.js"]
    assert root.children == {}


def test_files_keep_input_iteration_order() -> None:
    root = _build({"/a/z.js": "", "/a/m.js": "", "/a/b.js": ""})

    assert [f.file_name for f in root.children["a"].files] == ["z.js", "m.js", "b.js"]


def test_non_script_and_ignored_artifacts_are_skipped() -> None:
    skipped: List[str] = []
    root = build_directory_tree(
        _assets({
            "/a/logo.png": "binary",
            "/a/logo.PNG": "binary",
            "/a/photo.jpeg": "binary",
            "/a/data.json": "{}",
            "/a/hidden.js": "// @ignore\nmodule content",
            "/a/kept.js": "code",
        }),
        build_folder_index([]),
        "production",
        skipped=skipped,
    )

    assert [f.file_name for f in root.children["a"].files] == ["kept.js"]
    assert len(skipped) == 5
    assert "/a/hidden.js" in skipped


def test_ignored_file_still_creates_its_directory() -> None:
    root = _build({"/only/hidden.js": "// @ignore"})

    assert root.children["only"].files == []
    assert root.children["only"].children == {}


def test_non_script_artifacts_do_not_create_directories() -> None:
    root = _build({"/images/logo.png": "binary", "/data/payload.json": "{}"})

    assert root.children == {}


def test_folder_annotations_are_merged_on_creation() -> None:
    root = _build(
        {"/a/b/two.js": "code"},
        [
            FolderAnnotation(path="/a", description="Letter A", icon_path="icons/a.png", default_action="run"),
            FolderAnnotation(path="/a/b", description="Letter B"),
        ],
    )

    a = root.children["a"]
    assert a.description == "Letter A"
    assert a.icon == "icons/a.png"
    assert a.default_action == "run"
    assert a.children["b"].description == "Letter B"
    assert a.children["b"].icon == ""


def test_unmatched_folder_annotation_has_no_effect() -> None:
    plain = _build({"/a/one.js": "x"})
    annotated = _build({"/a/one.js": "x"}, [FolderAnnotation(path="/missing", description="nope")])

    assert plain == annotated


def test_existing_nodes_are_looked_up_only_once() -> None:
    class CountingIndex(dict):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.lookups: List[str] = []

        def get(self, key, default=None):
            self.lookups.append(key)
            return super().get(key, default)

    index = CountingIndex({"/a": FolderAnnotation(path="/a", description="Letter A")})
    root = build_directory_tree(
        _assets({"/a/one.js": "x", "/a/two.js": "y", "/a/b/three.js": "z"}),
        index,
        "production",
    )

    assert index.lookups == ["/a", "/a/b"]
    assert root.children["a"].description == "Letter A"
    assert len(root.children["a"].files) == 2


def test_binary_content_is_scanned_as_text() -> None:
    root = build_directory_tree(
        {"/a/one.js": Asset(b"// @description From bytes\n")},
        build_folder_index([]),
        "production",
    )

    assert root.children["a"].files[0].description == "From bytes"


def test_every_node_is_reachable_by_its_path() -> None:
    root = _build({"/a/b/c/d.js": "", "/a/x/y.js": "", "/e/f.js": ""})

    for node in root.iter_nodes():
        current = root
        for segment in [s for s in node.path.split("/") if s]:
            current = current.children[segment]
        assert current is node
