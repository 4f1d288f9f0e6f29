from __future__ import annotations

"""
Icon Materialization Service.

Resolves local icon references (package icon and folder icons) into binary
payloads that are shipped with the build output under collision-free names.
Remote references are left untouched and never read.
"""

import logging
import os
import uuid
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from wbmetajson.domain.config import GeneratorConfig
from wbmetajson.domain.constants import ICONS_OUTPUT_DIR, REMOTE_URL_RX
from wbmetajson.infra.fs import read_binary_file, remove_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconAsset:
    """
    An icon payload to be added to the build output.

    Attributes:
        path: Output-relative path ('icons/<name><token>.<ext>').
        content: Raw icon bytes.
    """
    path: str
    content: bytes


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_remote_reference(reference: Optional[str]) -> bool:
    """Check whether an icon reference is served over http(s)."""
    return bool(reference) and bool(REMOTE_URL_RX.search(reference))


def materialize_icon_reference(reference: str, token: str) -> str:
    """
    Compute the output path of a local icon reference.

    The token is appended to the base file name, before its extension.

    Args:
        reference: Local icon path as written in the configuration.
        token: Freshly generated unique token.

    Returns:
        str: The rewritten, output-relative reference.
    """
    file_name = reference.replace("\\", "/").split("/")[-1]
    stem, dot, ext = file_name.partition(".")
    return f"{ICONS_OUTPUT_DIR}/{stem}{token}{dot}{ext}"


def materialize_icons(
        cfg: GeneratorConfig,
        context: str,
        token_factory: Optional[Callable[[], str]] = None,
) -> Tuple[GeneratorConfig, List[IconAsset]]:
    """
    Read every local icon and rewrite its reference in the configuration.

    Each distinct local reference is read once and mapped to a single output
    path, even when several folders share it.

    Args:
        cfg: Validated configuration holding the original references.
        context: Compilation root used to resolve local references.
        token_factory: Source of unique tokens (uuid4 strings by default).

    Returns:
        Tuple[GeneratorConfig, List[IconAsset]]: The rewritten configuration
        and the icon payloads to add to the output.

    Raises:
        OSError: If a referenced local icon cannot be read.
    """
    new_token = token_factory or _uuid_token
    resolved: Dict[str, str] = {}
    icons: List[IconAsset] = []

    def _resolve(reference: Optional[str]) -> Optional[str]:
        if not reference or is_remote_reference(reference):
            return reference
        if reference not in resolved:
            content = read_binary_file(resolve_local_path(context, reference))
            output_path = materialize_icon_reference(reference, new_token())
            resolved[reference] = output_path
            icons.append(IconAsset(path=output_path, content=content))
            logger.debug(f"Icon '{reference}' materialized as '{output_path}'")
        return resolved[reference]

    package_icon = _resolve(cfg.package_icon)
    folders = tuple(
        replace(folder, icon_path=_resolve(folder.icon_path))
        for folder in cfg.folder_description_list
    )

    return replace(cfg, package_icon=package_icon, folder_description_list=folders), icons


def clean_icons_output(context: str, output_dir: str) -> bool:
    """
    Delete the icons directory left in the build output by a previous run.

    Icon names are unique per run, so stale icons would otherwise accumulate.

    Returns:
        bool: True if a directory was removed.
    """
    icons_dir = os.path.join(context, output_dir, ICONS_OUTPUT_DIR)
    removed = remove_directory(icons_dir)
    if removed:
        logger.info(f"Removed previous icons directory: {icons_dir}")
    return removed


def resolve_local_path(context: str, reference: str) -> str:
    """Resolve a configuration reference against the compilation root."""
    if os.path.isabs(reference) and os.path.exists(reference):
        return reference
    return os.path.join(context, reference.lstrip("/\\"))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _uuid_token() -> str:
    return str(uuid.uuid4())
