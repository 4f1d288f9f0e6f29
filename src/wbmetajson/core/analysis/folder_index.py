from __future__ import annotations

"""
Folder Annotation Index.

Builds the read-only path lookup used by the tree builder to attach
operator-supplied folder descriptions, icons and default actions.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from wbmetajson.domain.config import FolderAnnotation


def build_folder_index(annotations: Iterable[FolderAnnotation]) -> Mapping[str, FolderAnnotation]:
    """
    Index folder annotations by their exact path string.

    No path normalization is performed. When two annotations share a path,
    the later one wins.

    Args:
        annotations: Folder annotations in configuration order.

    Returns:
        Mapping[str, FolderAnnotation]: Immutable path -> annotation view.
    """
    index: Dict[str, FolderAnnotation] = {}
    for annotation in annotations:
        index[annotation.path] = annotation
    return MappingProxyType(index)
