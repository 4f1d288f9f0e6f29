from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the disk I/O used at the boundaries of the
generator: reading icon and README payloads, cleaning stale output, and
moving artifact collections between a build output directory and memory.
"""

import logging
import os
import shutil
from typing import Dict, Iterable, List, Optional, Tuple

from wbmetajson.domain.asset_models import Asset
from wbmetajson.domain.constants import ICONS_OUTPUT_DIR, META_FILE_NAME

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_asset_path(root: str, file_path: str) -> str:
    """Convert a filesystem path below root into a slash-separated asset key."""
    rel_path = os.path.relpath(file_path, root)
    return rel_path.replace(os.sep, "/")

# -----------------------------------------------------------------------------
# READ / CLEAN API
# -----------------------------------------------------------------------------

def read_binary_file(path: str) -> bytes:
    """
    Read a file's raw content.

    Raises:
        OSError: If the file does not exist or cannot be read.
    """
    with open(path, "rb") as f:
        return f.read()


def remove_directory(path: str) -> bool:
    """
    Recursively delete a directory if it exists.

    Returns:
        bool: True if the directory existed and was removed.
    """
    if not os.path.isdir(path):
        return False
    shutil.rmtree(path)
    return True

# -----------------------------------------------------------------------------
# ARTIFACT COLLECTION API
# -----------------------------------------------------------------------------

def load_assets_from_dir(root: str, exclude: Iterable[str] = ()) -> Dict[str, Asset]:
    """
    Load a build output directory into an artifact collection.

    Previously generated meta documents and the icons directory are left out
    so that a run over an existing output is reproducible.

    Args:
        root: Build output directory.
        exclude: Additional asset paths written by a previous run (e.g. the
                 copied README) that must not be read back.

    Returns:
        Dict[str, Asset]: Artifacts keyed by slash-separated relative path,
                          in sorted walk order.
    """
    assets: Dict[str, Asset] = {}
    root_abs = os.path.abspath(root)
    excluded = {p.strip("/") for p in exclude if p}

    for current, dirs, files in os.walk(root_abs):
        if current == root_abs:
            dirs[:] = [d for d in dirs if d != ICONS_OUTPUT_DIR]
        dirs.sort()
        files.sort()

        for file_name in files:
            if file_name == META_FILE_NAME:
                continue
            file_path = os.path.join(current, file_name)
            asset_path = to_asset_path(root_abs, file_path)
            if asset_path in excluded:
                continue
            assets[asset_path] = Asset(read_binary_file(file_path))

    logger.debug(f"Loaded {len(assets)} artifacts from {root_abs}")
    return assets


def write_assets_to_dir(root: str, assets: Iterable[Tuple[str, Asset]]) -> List[str]:
    """
    Persist artifacts below a build output directory.

    Args:
        root: Build output directory.
        assets: (asset path, asset) pairs to write.

    Returns:
        List[str]: Absolute paths of the written files.
    """
    written: List[str] = []
    for asset_path, asset in assets:
        target = os.path.join(root, *[p for p in asset_path.split("/") if p])
        os.makedirs(os.path.dirname(target), exist_ok=True)

        content = asset.source()
        if isinstance(content, str):
            with open(target, "w", encoding="utf-8") as f:
                f.write(content)
        else:
            with open(target, "wb") as f:
                f.write(content)
        written.append(target)

    return written
