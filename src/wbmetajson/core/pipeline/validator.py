from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper of the generator, turning the loosely-typed option
mapping received from a host build configuration (or a JSON options file)
into an immutable GeneratorConfig. Validation runs before any tree work so
that shape errors abort the build immediately.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from wbmetajson.domain.config import FolderAnnotation, GeneratorConfig, get_default_config
from wbmetajson.domain.constants import ALLOWED_ENVIRONMENTS
from wbmetajson.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# snake_case spellings accepted for every option
KEY_ALIASES: Dict[str, str] = {
    "package_description": "packageDescription",
    "package_icon": "packageIcon",
    "package_default_action": "packageDefaultAction",
    "folder_icon": "folderIcon",
    "readme_file": "readmeFile",
    "folder_description_list": "folderDescriptionList",
    "output_dir": "outputDir",
}

FOLDER_KEY_ALIASES: Dict[str, str] = {
    "icon_path": "iconPath",
    "default_action": "defaultAction",
}

FOLDER_KEYS = ("path", "description", "iconPath", "defaultAction")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = True,
) -> Tuple[GeneratorConfig, List[str]]:
    """
    Validate and normalize the generator options.

    Args:
        config: Raw option mapping (camelCase or snake_case keys).
        strict: If True, any type or value mismatch raises. If False, invalid
                optional values fall back to defaults and produce warnings.

    Returns:
        Tuple[GeneratorConfig, List[str]]: The validated configuration and
                                           the list of warnings.

    Raises:
        ConfigurationError: On shape errors (always for a missing package name
                            or malformed folder annotations).
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Invalid options type: expected mapping, received {type(config).__name__}."
        )

    merged: Dict[str, Any] = dict(defaults)
    for key, value in config.items():
        canonical = KEY_ALIASES.get(key, key)
        if canonical not in defaults:
            warnings.append(f"Unknown option '{key}' ignored.")
            continue
        merged[canonical] = value

    # 2. Required fields
    package = merged.get("package")
    if not isinstance(package, str) or not package.strip():
        raise ConfigurationError("Option 'package' is required and must be a non-empty string.")

    # 3. Field Processing & Normalization
    environment = _as_environment(merged.get("environment"), defaults["environment"], warnings, strict)

    optional_strings: Dict[str, Optional[str]] = {}
    for field in ("packageIcon", "packageDefaultAction", "folderIcon", "readmeFile"):
        optional_strings[field] = _as_optional_str(merged.get(field), field, warnings, strict)

    description = _as_optional_str(merged.get("packageDescription"), "packageDescription", warnings, strict)
    output_dir = _as_optional_str(merged.get("outputDir"), "outputDir", warnings, strict)
    sites = _as_list(merged.get("sites"), "sites", warnings, strict)
    folders = _as_folder_annotations(merged.get("folderDescriptionList"), warnings)

    cfg = GeneratorConfig(
        package=package.strip(),
        environment=environment,
        package_description=description or "",
        package_icon=optional_strings["packageIcon"],
        package_default_action=optional_strings["packageDefaultAction"],
        folder_icon=optional_strings["folderIcon"],
        readme_file=optional_strings["readmeFile"],
        sites=tuple(sites),
        folder_description_list=tuple(folders),
        output_dir=output_dir or defaults["outputDir"],
    )

    for w in warnings:
        logger.warning(f"Configuration Warning: {w}")

    return cfg, warnings


def config_to_options(cfg: GeneratorConfig) -> Dict[str, Any]:
    """Render a validated configuration back into its camelCase option mapping."""
    return {
        "environment": cfg.environment,
        "package": cfg.package,
        "packageDescription": cfg.package_description,
        "packageIcon": cfg.package_icon,
        "packageDefaultAction": cfg.package_default_action,
        "folderIcon": cfg.folder_icon,
        "readmeFile": cfg.readme_file,
        "sites": list(cfg.sites),
        "folderDescriptionList": [
            {
                "path": f.path,
                "description": f.description,
                "iconPath": f.icon_path,
                "defaultAction": f.default_action,
            }
            for f in cfg.folder_description_list
        ],
        "outputDir": cfg.output_dir,
    }


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_environment(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Validate the environment flag against the allowed values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip() in ALLOWED_ENVIRONMENTS:
        return value.strip()

    msg = f"Invalid option 'environment': {value!r}. Allowed: {list(ALLOWED_ENVIRONMENTS)}."
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} Using fallback '{fallback}'.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Accept strings (empty ones become None) and None."""
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v if v else None

    msg = f"Invalid option '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} Option ignored.")
    return None


def _as_list(value: Any, field: str, warnings: List[str], strict: bool) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)

    msg = f"Invalid option '{field}': expected list, received {type(value).__name__}."
    if strict:
        raise ConfigurationError(msg)
    warnings.append(f"{msg} Using empty list.")
    return []


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: FOLDER ANNOTATIONS
# -----------------------------------------------------------------------------

def _as_folder_annotations(value: Any, warnings: List[str]) -> List[FolderAnnotation]:
    """Validate 'folderDescriptionList' entries. Malformed entries always raise."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(
            f"Invalid option 'folderDescriptionList': expected list, received {type(value).__name__}."
        )

    folders: List[FolderAnnotation] = []
    for i, item in enumerate(value):
        field = f"folderDescriptionList[{i}]"
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"Invalid item '{field}': expected mapping.")

        entry: Dict[str, Any] = {}
        for key, item_value in item.items():
            canonical = FOLDER_KEY_ALIASES.get(key, key)
            if canonical not in FOLDER_KEYS:
                warnings.append(f"Unknown key '{key}' in '{field}' ignored.")
                continue
            if item_value is not None and not isinstance(item_value, str):
                raise ConfigurationError(
                    f"Invalid key '{field}.{key}': expected str, received {type(item_value).__name__}."
                )
            entry[canonical] = item_value

        path = entry.get("path")
        if not path:
            raise ConfigurationError(f"Invalid item '{field}': 'path' is required.")
        _check_folder_path(path, field, warnings)

        folders.append(
            FolderAnnotation(
                path=path,
                description=entry.get("description") or "",
                icon_path=entry.get("iconPath") or None,
                default_action=entry.get("defaultAction") or None,
            )
        )

    return folders


def _check_folder_path(path: str, field: str, warnings: List[str]) -> None:
    """Reject relative '.' segments; flag paths that can never match a directory."""
    segments = path.split("/")
    if segments and segments[0] == "":
        segments = segments[1:]
    if segments and segments[0] in (".", ".."):
        raise ConfigurationError(
            f"Invalid path '{path}' in '{field}': a leading '.' segment is not supported."
        )
    if not path.startswith("/"):
        warnings.append(
            f"Folder path '{path}' in '{field}' does not start with '/' and will not match any directory."
        )
