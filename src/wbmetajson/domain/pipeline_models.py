from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
generation outcomes between the pipeline engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wbmetajson.domain.config import GeneratorConfig
from wbmetajson.domain.meta_models import MetaJsonInfo

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Unified result object of one generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        package: Package name used for the root document.
        environment: Environment flag used while scanning artifacts.
        meta_documents: Rendered documents in emission order.
        icon_files: Output paths of materialized icons.
        readme_path: Output path of the copied README, if any.
        skipped_files: Artifacts excluded from every document.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    package: str
    environment: str

    meta_documents: List[MetaJsonInfo] = field(default_factory=list)
    icon_files: List[str] = field(default_factory=list)
    readme_path: str = ""
    skipped_files: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: GeneratorConfig,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    return GenerationResult(
        ok=False,
        error=error,
        package=cfg.package,
        environment=cfg.environment,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: GeneratorConfig,
        meta_documents: List[MetaJsonInfo],
        icon_files: Optional[List[str]] = None,
        readme_path: str = "",
        skipped_files: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        cfg: Final configuration used during execution.
        meta_documents: Rendered documents in emission order.
        icon_files: Output paths of materialized icons.
        readme_path: Output path of the copied README.
        skipped_files: Artifacts excluded by the filters.
        summary_extra: Final execution metrics.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        package=cfg.package,
        environment=cfg.environment,
        meta_documents=list(meta_documents),
        icon_files=icon_files or [],
        readme_path=readme_path,
        skipped_files=skipped_files or [],
        summary=summary_extra or {},
    )
