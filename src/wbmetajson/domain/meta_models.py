from __future__ import annotations

"""
Metadata Document Models.

Structured representation of the per-directory meta.json documents. Documents
are rendered through the standard JSON serializer so that operator-supplied
text is always escaped correctly.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wbmetajson.domain.constants import SCRIPT_TYPE_ACTION, SCRIPT_TYPE_FOLDER


@dataclass(frozen=True)
class ScriptRecord:
    """
    One entry of a document's 'scripts' catalog.

    Attributes:
        name: Display name (file name without extension, or folder name).
        file: File name with extension, or folder name.
        type: 'action' for files, 'folder' for subdirectories.
        description: Merged description text.
    """
    name: str
    file: str
    type: str
    description: str = ""

    @classmethod
    def for_file(cls, file_name: str, description: str) -> "ScriptRecord":
        return cls(
            name=strip_extension(file_name),
            file=file_name,
            type=SCRIPT_TYPE_ACTION,
            description=description,
        )

    @classmethod
    def for_folder(cls, folder_name: str, description: str) -> "ScriptRecord":
        return cls(
            name=folder_name,
            file=folder_name,
            type=SCRIPT_TYPE_FOLDER,
            description=description,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "file": self.file,
            "type": self.type,
            "description": self.description,
        }


@dataclass(frozen=True)
class MetaDocument:
    """
    The metadata document of a single directory.

    Attributes:
        name: Directory name (package name for the root).
        description: Directory description.
        default_action: Optional default action, omitted when empty.
        icon: Optional icon reference, omitted when empty.
        scripts: File records followed by folder records.
    """
    name: str
    description: str = ""
    default_action: Optional[str] = None
    icon: Optional[str] = None
    scripts: List[ScriptRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
        }
        if self.default_action:
            doc["defaultAction"] = self.default_action
        if self.icon:
            doc["icon"] = self.icon
        doc["scripts"] = [script.to_dict() for script in self.scripts]
        return doc

    def render(self) -> str:
        """Serialize the document to its meta.json text."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


@dataclass(frozen=True)
class MetaJsonInfo:
    """
    A rendered document and the directory it belongs to.

    Attributes:
        path: Slash-terminated directory path ('/', '/a/').
        content: Serialized meta.json text.
    """
    path: str
    content: str


def strip_extension(file_name: str) -> str:
    """Remove the last extension of a file name ('a.min.js' -> 'a.min')."""
    dot = file_name.rfind(".")
    if dot == -1 or dot == len(file_name) - 1:
        return file_name
    return file_name[:dot]
