from __future__ import annotations

"""
Directory Tree Builder.

Rebuilds the hierarchical output tree from the flat, path-keyed artifact
collection of a build. Folder annotations are merged onto directory nodes the
first time each node is created; file descriptions are extracted from the
artifacts' comment markers.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from wbmetajson.core.analysis.annotation_extractor import extract_file_annotation
from wbmetajson.domain.asset_models import Asset
from wbmetajson.domain.config import FolderAnnotation
from wbmetajson.domain.constants import NON_SCRIPT_FILE_RX
from wbmetajson.domain.tree_models import DirectoryNode, FileEntry

logger = logging.getLogger(__name__)

ROOT_PATH = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_directory_tree(
        assets: Mapping[str, Asset],
        folder_index: Mapping[str, FolderAnnotation],
        environment: str,
        package_description: str = "",
        package_icon: Optional[str] = None,
        package_default_action: Optional[str] = None,
        sites: Optional[Iterable[Any]] = None,
        skipped: Optional[List[str]] = None,
) -> DirectoryNode:
    """
    Build the directory tree of a build output.

    Args:
        assets: Artifact collection keyed by slash-separated output path.
        folder_index: Folder annotations keyed by slash-joined path ('/a/b').
        environment: Environment flag forwarded to the annotation extractor.
        package_description: Description of the root node.
        package_icon: Icon reference of the root node.
        package_default_action: Default action of the root node.
        sites: Opaque list attached to the root node.
        skipped: Optional accumulator receiving the paths of excluded artifacts.

    Returns:
        DirectoryNode: The root of the rebuilt tree.
    """
    root = DirectoryNode(
        path=ROOT_PATH,
        description=package_description or "",
        icon=package_icon or "",
        default_action=package_default_action or "",
        sites=list(sites or []),
    )

    for asset_path, asset in assets.items():
        if NON_SCRIPT_FILE_RX.search(asset_path):
            _record_skip(skipped, asset_path, "non-script extension")
            continue

        segments = asset_path.split("/")
        file_name = segments.pop()
        if segments and segments[0] == "":
            segments.pop(0)

        annotation = extract_file_annotation(asset.text(), environment)

        # Ignored scripts still materialize their enclosing directories
        directory = _walk_or_create(root, segments, folder_index)
        if annotation.ignored:
            _record_skip(skipped, asset_path, "ignore marker")
            continue

        directory.files.append(FileEntry(file_name=file_name, description=annotation.description))

    return root


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk_or_create(
        root: DirectoryNode,
        segments: List[str],
        folder_index: Mapping[str, FolderAnnotation],
) -> DirectoryNode:
    """Descend along the segments, creating and annotating missing nodes."""
    current = root
    visited = [""]

    for segment in segments:
        visited.append(segment)
        child = current.children.get(segment)
        if child is None:
            child = _create_node(current, segment, "/".join(visited), folder_index)
            current.children[segment] = child
        current = child

    return current


def _create_node(
        parent: DirectoryNode,
        name: str,
        joined_path: str,
        folder_index: Mapping[str, FolderAnnotation],
) -> DirectoryNode:
    annotation = folder_index.get(joined_path)
    node = DirectoryNode(path=f"{parent.path}{name}/")
    if annotation is not None:
        node.description = annotation.description or ""
        node.icon = annotation.icon_path or ""
        node.default_action = annotation.default_action or ""
        logger.debug(f"Folder annotation applied to {joined_path}")
    return node


def _record_skip(skipped: Optional[List[str]], asset_path: str, reason: str) -> None:
    logger.debug(f"Skipping artifact '{asset_path}' ({reason})")
    if skipped is not None:
        skipped.append(asset_path)
