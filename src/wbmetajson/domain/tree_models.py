from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the in-memory nodes used to rebuild the hierarchical output tree
from the flat artifact collection.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a script file directly contained in a directory.

    Attributes:
        file_name: Last path segment, extension included.
        description: Text extracted from the file's description marker.
    """
    file_name: str
    description: str = ""


@dataclass
class DirectoryNode:
    """
    One directory of the output tree with its merged annotations.

    Attributes:
        path: Slash-terminated path relative to the output root ('/', '/a/').
        files: File entries in artifact iteration order.
        children: Child directories keyed by name, in discovery order.
        description: Folder description ('' when not annotated).
        icon: Folder icon reference ('' when not annotated).
        default_action: Folder default action ('' when not annotated).
        sites: Opaque passthrough list, only populated on the root.
    """
    path: str
    files: List[FileEntry] = field(default_factory=list)
    children: Dict[str, "DirectoryNode"] = field(default_factory=dict)
    description: str = ""
    icon: str = ""
    default_action: str = ""
    sites: List[Any] = field(default_factory=list)

    def iter_nodes(self):
        """Yield this node and every descendant, parents first."""
        yield self
        for child in self.children.values():
            yield from child.iter_nodes()
