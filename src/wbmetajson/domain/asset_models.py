from __future__ import annotations

"""
Build Collaborator Models.

Minimal representation of the build tool objects the generator interacts
with: the artifacts (assets) and the compilation that owns them.
"""

from dataclasses import dataclass, field
from typing import Dict, Union

Content = Union[str, bytes]


@dataclass(frozen=True)
class Asset:
    """
    A build-produced output file.

    Attributes:
        content: Text for scripts and documents, bytes for binary payloads.
    """
    content: Content

    def source(self) -> Content:
        return self.content

    def size(self) -> int:
        return len(self.content)

    def text(self) -> str:
        """Return the content as text, decoding binary payloads leniently."""
        if isinstance(self.content, bytes):
            return self.content.decode("utf-8", errors="replace")
        return self.content


@dataclass
class Compilation:
    """
    The output of one completed build.

    Attributes:
        context: Absolute compilation root, used to resolve local references.
        assets: Artifact collection keyed by slash-separated output path.
    """
    context: str
    assets: Dict[str, Asset] = field(default_factory=dict)

    def add_asset(self, path: str, content: Content) -> None:
        self.assets[path] = Asset(content)
