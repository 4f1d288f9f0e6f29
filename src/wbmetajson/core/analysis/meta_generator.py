from __future__ import annotations

"""
Metadata Document Generator.

Walks the rebuilt directory tree and renders one meta.json document per
directory. Traversal is pre-order; sibling directories are emitted in the
reverse of their discovery order because pending children are consumed
last-in-first-out. Consumers rely on this ordering, so it is kept stable.
"""

from typing import List

from wbmetajson.domain.constants import JSON_SUBSTRING, META_FILE_NAME
from wbmetajson.domain.meta_models import MetaDocument, MetaJsonInfo, ScriptRecord
from wbmetajson.domain.tree_models import DirectoryNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_meta_documents(root: DirectoryNode, name: str) -> List[MetaJsonInfo]:
    """
    Render the documents of a node and all of its descendants.

    Args:
        root: Directory node to start from (usually the tree root).
        name: Document name of that node (the package name for the root).

    Returns:
        List[MetaJsonInfo]: Rendered documents, parents before descendants.
    """
    documents = [MetaJsonInfo(path=root.path, content=build_meta_document(root, name).render())]

    pending = list(root.children.keys())
    while pending:
        child_name = pending.pop()
        documents.extend(generate_meta_documents(root.children[child_name], child_name))

    return documents


def build_meta_document(node: DirectoryNode, name: str) -> MetaDocument:
    """
    Build the structured document of a single directory.

    File records come first (json payloads excluded), followed by one folder
    record per direct child. Folder records only carry the child's name and
    description.
    """
    scripts = [
        ScriptRecord.for_file(entry.file_name, entry.description)
        for entry in node.files
        if JSON_SUBSTRING not in entry.file_name
    ]
    scripts.extend(
        ScriptRecord.for_folder(child_name, child.description)
        for child_name, child in node.children.items()
    )

    return MetaDocument(
        name=name,
        description=node.description,
        default_action=node.default_action or None,
        icon=node.icon or None,
        scripts=scripts,
    )


def meta_output_path(directory_path: str) -> str:
    """
    Compute the artifact key of a directory's document.

    '/' -> 'meta.json', '/a/b/' -> 'a/b/meta.json'.
    """
    relative = directory_path.strip("/")
    if not relative:
        return META_FILE_NAME
    return f"{relative}/{META_FILE_NAME}"
