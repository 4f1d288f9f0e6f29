from __future__ import annotations

"""
README Copy Service.

Reads an operator-supplied README file so it can be shipped verbatim at the
root of the build output.
"""

import logging
import os
from typing import Tuple

from wbmetajson.core.services.icons import resolve_local_path
from wbmetajson.infra.fs import read_binary_file

logger = logging.getLogger(__name__)


def readme_output_name(readme_file: str) -> str:
    """Output path of the copied README (its base name, at the output root)."""
    return os.path.basename(readme_file.replace("\\", "/").rstrip("/"))


def load_readme(context: str, readme_file: str) -> Tuple[str, bytes]:
    """
    Load the README payload and compute its output name.

    Args:
        context: Compilation root used to resolve the reference.
        readme_file: README path as written in the configuration.

    Returns:
        Tuple[str, bytes]: (output path at the output root, raw content).

    Raises:
        OSError: If the file cannot be read.
    """
    source_path = resolve_local_path(context, readme_file)
    content = read_binary_file(source_path)
    logger.debug(f"README loaded from {source_path} ({len(content)} bytes)")
    return readme_output_name(readme_file), content
