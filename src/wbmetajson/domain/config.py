from __future__ import annotations

"""
Configuration Domain Models.

Defines the immutable option structures consumed by the generator and the
helpers used to obtain them: domain defaults and JSON option files written
by operators for the command line interface.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from wbmetajson.domain.constants import DEFAULT_DIST_DIR, DEFAULT_ENVIRONMENT
from wbmetajson.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# CONFIGURATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FolderAnnotation:
    """
    Operator-supplied metadata for one output directory.

    Attributes:
        path: Slash-joined directory path from the output root (e.g. '/actions').
        description: Free-text description of the folder.
        icon_path: Local path (relative to the compilation root) or remote URL.
        default_action: Script launched when the folder itself is activated.
    """
    path: str
    description: str = ""
    icon_path: Optional[str] = None
    default_action: Optional[str] = None


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Validated generator options.

    Attributes:
        package: Package name, used as the root document name.
        environment: 'development' or 'production'; selects the line-break
                     encoding assumed when scanning artifacts for markers.
        package_description: Description of the root document.
        package_icon: Icon reference of the root document.
        package_default_action: Default action of the root document.
        folder_icon: Accepted for compatibility; not rendered.
        readme_file: README copied verbatim to the output root.
        sites: Opaque passthrough list attached to the root node.
        folder_description_list: Per-path folder annotations.
        output_dir: Build output directory name, relative to the context.
    """
    package: str
    environment: str = DEFAULT_ENVIRONMENT
    package_description: str = ""
    package_icon: Optional[str] = None
    package_default_action: Optional[str] = None
    folder_icon: Optional[str] = None
    readme_file: Optional[str] = None
    sites: Tuple[Any, ...] = ()
    folder_description_list: Tuple[FolderAnnotation, ...] = field(default_factory=tuple)
    output_dir: str = DEFAULT_DIST_DIR


# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw option mapping.

    Keys mirror the option names accepted from host build configurations.

    Returns:
        Dict[str, Any]: Default option values.
    """
    return {
        "environment": DEFAULT_ENVIRONMENT,
        "package": "",
        "packageDescription": "",
        "packageIcon": None,
        "packageDefaultAction": None,
        "folderIcon": None,
        "readmeFile": None,
        "sites": [],
        "folderDescriptionList": [],
        "outputDir": DEFAULT_DIST_DIR,
    }


# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load raw generator options from a JSON file.

    Args:
        path: Location of the options file.

    Returns:
        Dict[str, Any]: The raw (unvalidated) option mapping.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object.
    """
    if not os.path.exists(path):
        raise ConfigurationError(f"Options file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read options file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Options file '{path}' must contain a JSON object, found {type(data).__name__}."
        )

    logger.debug(f"Options loaded from {path}")
    return data
